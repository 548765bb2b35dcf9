"""Word list source locations and source resolution."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.words_config import WordsConfig, coerce_paths

# Unix standard words files, https://en.wikipedia.org/wiki/Words_(Unix)
UNIX_WORDS_LOCATIONS = (
    "/usr/share/dict/words",  # macOS and most Linux distributions
    "/usr/dict/words",  # older Unix layouts
)

# Per-user spelling dictionary, https://superuser.com/a/136267
LOCAL_DICTIONARY_LOCATIONS = (
    "~/Library/Spelling/LocalDictionary",  # macOS
)


class DictionaryLocations(BaseModel):
    """Where to look for the default and the local word lists."""

    default_locations: tuple[str, ...] = Field(
        default=UNIX_WORDS_LOCATIONS,
        description="System word lists, consulted first and in order",
    )
    local_dictionary_locations: tuple[str, ...] = Field(
        default=LOCAL_DICTIONARY_LOCATIONS,
        description="User dictionaries, consulted last and only when enabled",
    )

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator(
        "default_locations", "local_dictionary_locations", mode="before"
    )
    @classmethod
    def validate_locations(cls, v: Any) -> Any:
        return coerce_paths(v)


def resolve_sources(
    config: WordsConfig, locations: Optional[DictionaryLocations] = None
) -> list[str]:
    """Build the ordered list of candidate word list paths.

    No filesystem access happens here; missing files are skipped later.

    Args:
        config: Word list configuration
        locations: Location table, or None for the platform defaults

    Returns:
        Default locations, then additional files, then local dictionary
        locations if enabled
    """
    if locations is None:
        locations = DictionaryLocations()

    sources = list(locations.default_locations)
    sources.extend(config.additional_word_files)
    if config.include_local_dictionary:
        sources.extend(locations.local_dictionary_locations)
    return sources


__all__ = ["DictionaryLocations", "resolve_sources"]
