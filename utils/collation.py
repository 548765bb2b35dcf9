"""Pairwise word equivalence under case and diacritic sensitivity."""

import unicodedata
from typing import Protocol

# Languages whose dotted and dotless i are distinct letters
DOTLESS_I_LANGUAGES = frozenset({"tr", "az"})

TURKIC_CASE_MAP = str.maketrans({"I": "ı"})
COMBINING_DOT_ABOVE = "\u0307"

# Letters with an overlaid stroke or bar do not decompose under NFD
STROKE_LETTER_MAP = str.maketrans(
    {
        "\u00f8": "o", "\u00d8": "O",  # ø Ø
        "\u0142": "l", "\u0141": "L",  # ł Ł
        "\u0111": "d", "\u0110": "D",  # đ Đ
        "\u0127": "h", "\u0126": "H",  # ħ Ħ
        "\u0167": "t", "\u0166": "T",  # ŧ Ŧ
        "\u0180": "b", "\u0243": "B",  # ƀ Ƀ
        "\u0268": "i", "\u0197": "I",  # ɨ Ɨ
        "\u01b6": "z", "\u01b5": "Z",  # ƶ Ƶ
        "\u01e5": "g", "\u01e4": "G",  # ǥ Ǥ
    }
)


class Collator(Protocol):
    """Tells whether two strings are the same word."""

    def equal(self, a: str, b: str) -> bool: ...


class UnicodeCollator:
    """Collator built on Unicode normalization and case folding.

    Canonically equivalent strings (precomposed vs. combining marks) are
    always equal. Diacritics are nonspacing marks (category Mn) after
    canonical decomposition, plus the strokes and bars of letters such as
    ø, ł and đ, which have no decomposition.
    """

    def __init__(
        self,
        language: str = "en",
        ignore_case: bool = False,
        ignore_diacritics: bool = False,
    ):
        """Initialize collator.

        Args:
            language: Language tag, only the primary subtag is used
            ignore_case: Fold case before comparing
            ignore_diacritics: Drop combining marks before comparing
        """
        self.language = language.replace("_", "-").split("-", 1)[0].lower()
        self.ignore_case = ignore_case
        self.ignore_diacritics = ignore_diacritics

    def fold_case(self, text: str) -> str:
        """Case-fold a canonically decomposed string."""
        if self.language in DOTLESS_I_LANGUAGES:
            # Decomposed İ is I + dot above, and folds to plain i
            text = text.replace("I" + COMBINING_DOT_ABOVE, "i")
            text = text.translate(TURKIC_CASE_MAP)
        return text.casefold()

    def key(self, text: str) -> str:
        """Reduce a string to the form compared by equal()."""
        text = unicodedata.normalize("NFD", text)
        if self.ignore_case:
            text = unicodedata.normalize("NFD", self.fold_case(text))
        if self.ignore_diacritics:
            text = "".join(c for c in text if unicodedata.category(c) != "Mn")
            text = text.translate(STROKE_LETTER_MAP)
        return text

    def equal(self, a: str, b: str) -> bool:
        if a == b:
            return True
        return self.key(a) == self.key(b)


__all__ = ["Collator", "UnicodeCollator"]
