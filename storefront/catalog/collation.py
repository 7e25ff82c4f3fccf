"""
Locale-aware string ordering.

Brands and names are compared accent- and case-insensitively first. Ties are
broken with lowercase before uppercase and unaccented before accented, so the
order is total and does not depend on the process locale.
"""

import unicodedata
from typing import Iterable, List, Tuple


def collation_key(value: str) -> Tuple[str, str]:
    """Sort key approximating a locale-aware comparison of ``value``."""
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), value.swapcase()


def sorted_distinct(values: Iterable[str]) -> List[str]:
    """Distinct values in collation order."""
    return sorted(set(values), key=collation_key)
