"""
Text helpers for accent- and case-insensitive comparison
"""

import unicodedata
from typing import Tuple


def _strip_marks(decomposed: str) -> str:
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def normalize(text: str) -> str:
    """Canonical form used for matching: no diacritics, case-folded, trimmed.

    Display text is never replaced by this value; it is only compared.
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text)
    return _strip_marks(decomposed).casefold().strip()


def collation_key(text: str) -> Tuple[str, str, str, str]:
    """Sort key approximating a locale-aware string comparison.

    Letters are compared first ignoring accents and case, then accents
    (unaccented before accented), then case (lowercase before uppercase),
    and finally the raw text so the order is total.
    """
    decomposed = unicodedata.normalize("NFD", text)
    primary = _strip_marks(decomposed).casefold()
    secondary = decomposed.casefold()
    tertiary = decomposed.swapcase()
    return primary, secondary, tertiary, text
