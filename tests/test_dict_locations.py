"""Tests for word list source resolution."""

import pytest
from pydantic import ValidationError

from core.words_config import WordsConfig
from utils.dict_locations import (
    LOCAL_DICTIONARY_LOCATIONS,
    UNIX_WORDS_LOCATIONS,
    DictionaryLocations,
    resolve_sources,
)


class TestDictionaryLocations:
    """Test the location table."""

    def test_defaults_are_unix_words_files(self):
        """Default table should hold the two Unix words files in order."""
        locations = DictionaryLocations()
        assert locations.default_locations == (
            "/usr/share/dict/words",
            "/usr/dict/words",
        )
        assert locations.local_dictionary_locations == LOCAL_DICTIONARY_LOCATIONS

    def test_lists_are_accepted(self):
        """Lists should be converted to tuples."""
        locations = DictionaryLocations(default_locations=["a", "b"])
        assert locations.default_locations == ("a", "b")

    def test_path_objects_are_accepted(self, tmp_path):
        """pathlib paths should be stored as strings."""
        locations = DictionaryLocations(
            default_locations=[tmp_path / "words"],
            local_dictionary_locations=(tmp_path / "local",),
        )
        assert locations.default_locations == (str(tmp_path / "words"),)
        assert locations.local_dictionary_locations == (str(tmp_path / "local"),)

    def test_locations_are_immutable(self):
        """Location table should not be modifiable after creation."""
        locations = DictionaryLocations()
        with pytest.raises(ValidationError):
            locations.default_locations = ("elsewhere",)


class TestResolveSources:
    """Test source ordering."""

    def test_default_config_uses_default_locations_only(self):
        """Without extras only the system locations are returned."""
        assert resolve_sources(WordsConfig()) == list(UNIX_WORDS_LOCATIONS)

    def test_tier_order(self):
        """Defaults come first, then additional files, then local dictionary."""
        locations = DictionaryLocations(
            default_locations=["d1", "d2"],
            local_dictionary_locations=["l1"],
        )
        config = WordsConfig(
            include_local_dictionary=True,
            additional_word_files=["a2", "a1"],
        )
        assert resolve_sources(config, locations) == ["d1", "d2", "a2", "a1", "l1"]

    def test_local_dictionary_excluded_unless_enabled(self):
        """Local dictionary locations should only appear when enabled."""
        locations = DictionaryLocations(
            default_locations=["d1"], local_dictionary_locations=["l1"]
        )
        config = WordsConfig(additional_word_files=["a1"])
        assert resolve_sources(config, locations) == ["d1", "a1"]

    def test_duplicate_paths_are_kept(self):
        """Paths listed twice should not be collapsed."""
        locations = DictionaryLocations(default_locations=["d1"])
        config = WordsConfig(additional_word_files=["d1"])
        assert resolve_sources(config, locations) == ["d1", "d1"]

    def test_nonexistent_paths_are_not_filtered(self):
        """Resolution should not touch the filesystem."""
        locations = DictionaryLocations(default_locations=["/does/not/exist"])
        assert resolve_sources(WordsConfig(), locations) == ["/does/not/exist"]
