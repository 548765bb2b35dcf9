"""Vocabulary building from system and user word lists.

Every call re-reads its sources; nothing is cached between calls.
"""

import logging
from typing import Optional

from core.errors import SourceMissingError
from core.words_config import WordsConfig
from utils.dict_locations import DictionaryLocations, resolve_sources
from utils.line_loader import LineLoader

log = logging.getLogger("syswords.vocabulary")


def build_word_set(
    config: Optional[WordsConfig] = None,
    locations: Optional[DictionaryLocations] = None,
    loader: Optional[LineLoader] = None,
) -> set[str]:
    """Read all available word lists into a set of unique words.

    Each line of a source becomes one word, verbatim. A blank line is the
    empty-string word. Sources that do not exist are skipped.

    Args:
        config: Word list configuration, None for defaults
        locations: Default and local dictionary locations, None for the
            platform defaults
        loader: Line loader, None for a LineLoader using config.encoding

    Returns:
        Set of words

    Raises:
        SourceUnreadableError: If an existing source cannot be read. No
            partial vocabulary is returned.
    """
    if config is None:
        config = WordsConfig()
    if loader is None:
        loader = LineLoader(encoding=config.encoding)

    words: set[str] = set()
    for source in resolve_sources(config, locations):
        try:
            words.update(loader.lines(source))
        except SourceMissingError:
            log.debug(f"Skipping missing word list: {source}")
            continue
        log.debug(f"Read word list {source} ({len(words)} words so far)")

    log.info(f"Built vocabulary of {len(words)} words")
    return words


def build_word_list(
    config: Optional[WordsConfig] = None,
    locations: Optional[DictionaryLocations] = None,
    loader: Optional[LineLoader] = None,
) -> list[str]:
    """Read all available word lists into a list of unique words.

    Args:
        config: Word list configuration, None for defaults. With
            ignore_sort the list keeps set iteration order, otherwise it is
            sorted by code point.
        locations: Default and local dictionary locations
        loader: Line loader

    Returns:
        List of words without duplicates

    Raises:
        SourceUnreadableError: If an existing source cannot be read
    """
    if config is None:
        config = WordsConfig()

    word_list = list(build_word_set(config, locations, loader))
    if not config.ignore_sort:
        word_list.sort()
    return word_list


__all__ = ["build_word_set", "build_word_list"]
