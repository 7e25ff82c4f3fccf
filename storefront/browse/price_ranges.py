"""
Price brackets offered as filter pills.

Each bracket is half-open ``[min, max)``: a product priced exactly at a
bracket's upper bound belongs to the next bracket.
"""

import math
from typing import Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from storefront.core import exceptions


class PriceRange(BaseModel):
    """A labelled half-open price interval."""

    model_config = ConfigDict(frozen=True)

    label: str
    min: float = 0
    max: float = math.inf

    @property
    def is_unrestricted(self) -> bool:
        return self.min <= 0 and self.max == math.inf

    def contains(self, price: float) -> bool:
        return self.min <= price < self.max


PRICE_RANGES: Tuple[PriceRange, ...] = (
    PriceRange(label="All"),
    PriceRange(label="Under ¥5,000", min=0, max=5000),
    PriceRange(label="¥5k – ¥15k", min=5000, max=15000),
    PriceRange(label="¥15k – ¥30k", min=15000, max=30000),
    PriceRange(label="¥30k – ¥60k", min=30000, max=60000),
    PriceRange(label="Over ¥60k", min=60000),
)


def resolve_price_range(
    index: int,
    ranges: Sequence[PriceRange] = PRICE_RANGES,
) -> Optional[PriceRange]:
    """
    Look up the bracket selected by ``index``.

    Returns:
        The bracket, or None when it imposes no constraint

    Raises:
        AppException: INVALID_PRICE_RANGE for an index outside ``ranges``
    """
    if not 0 <= index < len(ranges):
        raise exceptions.invalid_price_range(index, len(ranges))

    price_range = ranges[index]
    if price_range.is_unrestricted:
        return None
    return price_range
