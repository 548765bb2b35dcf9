"""Word validity checks against system and user word lists."""

import logging
from typing import Callable, Optional

from core.errors import SourceMissingError
from core.words_config import WordsConfig
from utils.collation import Collator, UnicodeCollator
from utils.dict_locations import DictionaryLocations, resolve_sources
from utils.line_loader import LineLoader

log = logging.getLogger("syswords.word_matcher")

CollatorFactory = Callable[..., Collator]


def make_collator(
    config: WordsConfig, collator_factory: CollatorFactory = UnicodeCollator
) -> Collator:
    """Create a collator for the configured language and sensitivity."""
    return collator_factory(
        language=config.language,
        ignore_case=config.ignore_case,
        ignore_diacritics=config.ignore_diacritics,
    )


def is_valid_word(
    word: str,
    config: Optional[WordsConfig] = None,
    locations: Optional[DictionaryLocations] = None,
    loader: Optional[LineLoader] = None,
    collator_factory: CollatorFactory = UnicodeCollator,
) -> bool:
    """Check whether a word is listed in any available word list.

    Sources are scanned in priority order and the scan stops at the first
    line equivalent to the word. No vocabulary is kept, so repeated checks
    re-read the files; build a vocabulary instead for many lookups.

    Args:
        word: Word to check
        config: Word list configuration, None for defaults
        locations: Default and local dictionary locations
        loader: Line loader, None for a LineLoader using config.encoding
        collator_factory: Called with language, ignore_case and
            ignore_diacritics keywords, once per call

    Returns:
        True if some source line is equivalent to the word

    Raises:
        SourceUnreadableError: If an existing source cannot be read before
            a match is found
    """
    if config is None:
        config = WordsConfig()
    if loader is None:
        loader = LineLoader(encoding=config.encoding)

    collator = make_collator(config, collator_factory)

    for source in resolve_sources(config, locations):
        try:
            for line in loader.lines(source):
                if collator.equal(word, line):
                    log.debug(f"{word!r} matched {line!r} in {source}")
                    return True
        except SourceMissingError:
            log.debug(f"Skipping missing word list: {source}")
            continue

    return False


__all__ = ["is_valid_word", "make_collator"]
