"""Word list configuration with Pydantic validation."""

import codecs
import os
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Primary subtag, then optional script/region/variant subtags
LANGUAGE_TAG_PATTERN = re.compile(r"^[A-Za-z]{2,8}(-[A-Za-z0-9]{1,8})*$")


def coerce_paths(v: Any) -> Any:
    """Turn os.PathLike items of a path sequence into plain strings."""
    if isinstance(v, (list, tuple)):
        return tuple(os.fspath(p) if isinstance(p, os.PathLike) else p for p in v)
    return v


class WordsConfig(BaseModel):
    """Options for building vocabularies and checking words."""

    include_local_dictionary: bool = Field(
        default=False, description="Also read the user's local spelling dictionary"
    )
    additional_word_files: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Extra word list files, read after the default locations",
    )
    ignore_sort: bool = Field(
        default=False,
        description="Keep set iteration order instead of sorting (list form only)",
    )
    ignore_case: bool = Field(
        default=False, description="Treat words differing only in case as equal"
    )
    ignore_diacritics: bool = Field(
        default=False, description="Treat words differing only in diacritics as equal"
    )
    language: str = Field(
        default="en", description="Language tag whose collation rules apply"
    )
    encoding: str = Field(
        default="utf-8", description="Text encoding of the word list files"
    )

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("additional_word_files", mode="before")
    @classmethod
    def validate_additional_word_files(cls, v: Any) -> Any:
        """Accept pathlib paths alongside strings."""
        return coerce_paths(v)

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Accept BCP 47-style tags, normalizing underscores to hyphens."""
        tag = v.strip().replace("_", "-")
        if not LANGUAGE_TAG_PATTERN.match(tag):
            raise ValueError(f"Invalid language tag: {v!r}")
        return tag

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject encodings unknown to the codec registry."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v!r}") from e
        return v


__all__ = ["WordsConfig"]
