#!/usr/bin/env python3
"""syswords - list system words and check word validity.

Usage:
    python main.py list
    python main.py --file extra.txt --local count
    python main.py check Äbba --ignore-diacritics
"""

import argparse
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from pydantic import ValidationError

from core.errors import SourceUnreadableError
from core.vocabulary import build_word_list, build_word_set
from core.word_matcher import is_valid_word
from core.words_config import WordsConfig
from utils.dict_locations import DictionaryLocations

log = logging.getLogger("syswords")

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure root logging for the command line tool."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        # 5MB max, keep 5 backups
        handlers.append(
            RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=5)
        )

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="syswords - system word lists and word validity checks"
    )
    parser.add_argument(
        "--local",
        action="store_true",
        help="Include the local user dictionary",
    )
    parser.add_argument(
        "--file",
        "-f",
        dest="files",
        action="append",
        default=[],
        metavar="PATH",
        help="Additional word list file (repeatable)",
    )
    parser.add_argument(
        "--default-location",
        dest="default_locations",
        action="append",
        metavar="PATH",
        help="Replace the system word list locations (repeatable)",
    )
    parser.add_argument(
        "--local-location",
        dest="local_locations",
        action="append",
        metavar="PATH",
        help="Replace the local dictionary locations (repeatable)",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding of the word list files (default: utf-8)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--log-file", help="Also write logs to this file")

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="Print all unique words")
    list_parser.add_argument(
        "--no-sort",
        action="store_true",
        help="Print words in arbitrary order",
    )

    subparsers.add_parser("count", help="Print the number of unique words")

    check_parser = subparsers.add_parser("check", help="Check if a word is valid")
    check_parser.add_argument("word", help="Word to check")
    check_parser.add_argument(
        "--ignore-case", "-i", action="store_true", help="Ignore case differences"
    )
    check_parser.add_argument(
        "--ignore-diacritics",
        "-d",
        action="store_true",
        help="Ignore diacritic differences",
    )
    check_parser.add_argument(
        "--language",
        "-l",
        default="en",
        help="Language tag for comparison rules (default: en)",
    )

    return parser


def build_locations(args: argparse.Namespace) -> DictionaryLocations:
    overrides = {}
    if args.default_locations:
        overrides["default_locations"] = args.default_locations
    if args.local_locations:
        overrides["local_dictionary_locations"] = args.local_locations
    return DictionaryLocations(**overrides)


def build_config(args: argparse.Namespace) -> WordsConfig:
    return WordsConfig(
        include_local_dictionary=args.local,
        additional_word_files=args.files,
        ignore_sort=getattr(args, "no_sort", False),
        ignore_case=getattr(args, "ignore_case", False),
        ignore_diacritics=getattr(args, "ignore_diacritics", False),
        language=getattr(args, "language", "en"),
        encoding=args.encoding,
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        config = build_config(args)
        locations = build_locations(args)
        log.debug(f"Config: {config!r}, locations: {locations!r}")

        if args.command == "list":
            # Undecodable bytes come back as lone surrogates; write them as-is
            reconfigure = getattr(sys.stdout, "reconfigure", None)
            if reconfigure is not None:
                reconfigure(errors="surrogateescape")
            for word in build_word_list(config, locations):
                print(word)
            return EXIT_VALID

        if args.command == "count":
            print(len(build_word_set(config, locations)))
            return EXIT_VALID

        valid = is_valid_word(args.word, config, locations)
        print("valid" if valid else "invalid")
        return EXIT_VALID if valid else EXIT_INVALID

    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_ERROR
    except SourceUnreadableError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
