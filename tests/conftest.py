"""Shared test fixtures for syswords tests."""

import pytest

from utils.dict_locations import DictionaryLocations
from word_files import (
    CUSTOM_WORDS,
    DICTIONARY1,
    DICTIONARY2,
    EMPTY_CUSTOM_WORDS,
)


@pytest.fixture
def locations():
    """Test word lists in place of the system locations."""
    return DictionaryLocations(
        default_locations=[DICTIONARY1],
        local_dictionary_locations=[CUSTOM_WORDS],
    )


@pytest.fixture
def two_dictionaries():
    """Both test dictionaries as system word lists."""
    return DictionaryLocations(
        default_locations=[DICTIONARY1, DICTIONARY2],
        local_dictionary_locations=[CUSTOM_WORDS],
    )


@pytest.fixture
def empty_local_dictionary():
    """System word list with an empty local dictionary."""
    return DictionaryLocations(
        default_locations=[DICTIONARY1],
        local_dictionary_locations=[EMPTY_CUSTOM_WORDS],
    )


@pytest.fixture
def write_words(tmp_path):
    """Write a word list file under tmp_path and return its path."""

    def _write(name: str, content: str, encoding: str = "utf-8") -> str:
        path = tmp_path / name
        path.write_bytes(content.encode(encoding))
        return str(path)

    return _write
