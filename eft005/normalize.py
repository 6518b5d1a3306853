# =============================================================
# eft005/normalize.py
# Diacritic stripping with strict ASCII enforcement
# =============================================================

import unicodedata

from eft005.errors import NormalizationError

# Combining marks and other symbols are discarded after NFD decomposition.
_DROPPED_CATEGORIES = ("Mn", "So")


def normalize(text: str) -> str:
    """
    Remove diacritical marks ("Álfréd" -> "Alfred") and reject anything
    that is still outside ASCII afterwards (Cyrillic, CJK, Devanagari...).
    """
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) not in _DROPPED_CATEGORIES)
    result = unicodedata.normalize("NFC", stripped)
    for ch in result:
        if ord(ch) > 127:
            raise NormalizationError(ch)
    return result
