"""
Roll Expansion

Builds the per-roll breakdown of a wrapping paper pack: one Roll per
unit of quantity, each carrying its share of the pack's area and a
print name assigned cyclically by position.
"""

import math
import re
from typing import List, Optional, Sequence, Union

from ..models import Roll

Number = Union[int, float]

REVERSE_SIDE_PHRASES = ('reverse', 'both sides', 'cut lines on reverse')

_AREA_RE = re.compile(
    r'(\d+(?:\.\d+)?)\s*(?:sq\.?\s*ft\.?|sqft|square\s+f(?:ee|oo)t)',
    re.IGNORECASE,
)
_PER_ROLL_RE = re.compile(r'^\s*(?:per|each|/|a)\s*roll', re.IGNORECASE)


def assign_print_name(index: int, print_names: Optional[Sequence[str]]) -> Optional[str]:
    """Print name for the roll at a 0-based index, cycling through the names."""
    if not print_names:
        return None
    return print_names[index % len(print_names)]


def has_reverse_side(description: Optional[str]) -> bool:
    """True if the description mentions printing or cut lines on the reverse."""
    if not description:
        return False
    lowered = description.lower()
    return any(phrase in lowered for phrase in REVERSE_SIDE_PHRASES)


def parse_area(text: Optional[str]) -> Optional[float]:
    """Return the first square-footage figure in the text ("88 sq. ft." -> 88.0)."""
    if not text:
        return None
    match = _AREA_RE.search(text)
    return float(match.group(1)) if match else None


def parse_roll_area(text: Optional[str]) -> Optional[float]:
    """Return a square-footage figure explicitly stated per roll ("22 sq. ft. per roll")."""
    if not text:
        return None
    for match in _AREA_RE.finditer(text):
        if _PER_ROLL_RE.match(text[match.end():]):
            return float(match.group(1))
    return None


def per_roll_area(
    quantity: Number,
    total_size: Optional[Number] = None,
    per_roll_size: Optional[Number] = None,
) -> Number:
    """
    Area of one roll.

    A stated per-roll size wins; otherwise the total is divided evenly.
    """
    if per_roll_size is not None:
        return _tidy(per_roll_size)
    if total_size is not None and quantity:
        return _tidy(total_size / quantity)
    return 0


def expand_rolls(
    quantity: Optional[Number],
    print_names: Optional[Sequence[str]] = None,
    total_size: Optional[Number] = None,
    per_roll_size: Optional[Number] = None,
    reverse_side: bool = False,
) -> Optional[List[Roll]]:
    """
    Expand a pack into individual rolls.

    Args:
        quantity: Number of rolls in the pack
        print_names: Design names, assigned to rolls cyclically
        total_size: Total pack area in sqft
        per_roll_size: Area of each roll in sqft
        reverse_side: Whether the paper is printed on the back

    Returns:
        Rolls numbered 1..quantity, or None if quantity is not a positive whole number
    """
    if isinstance(quantity, bool) or not isinstance(quantity, (int, float)):
        return None
    if not math.isfinite(quantity) or quantity <= 0 or quantity != int(quantity):
        return None

    count = int(quantity)
    area = per_roll_area(count, total_size, per_roll_size)

    return [
        Roll(
            roll_number=index + 1,
            on_hand=area,
            max_area=area,
            image=None,
            print_name=assign_print_name(index, print_names),
            has_reverse_side=reverse_side,
            paired_roll_number=None,
        )
        for index in range(count)
    ]


def _tidy(value: Number) -> Number:
    """Drop a redundant .0 so 88 / 4 reads as 22."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return round(value, 2) if isinstance(value, float) else value
