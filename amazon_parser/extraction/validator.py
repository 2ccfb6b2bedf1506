"""
Product Validator

Checks a resolved product for out-of-range or malformed values.
Violations are advisory: they are reported, never raised, and the
record is never modified.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Union

from ..models import PRODUCT_TYPES, ProductRecord

_ASIN_RE = re.compile(r"[A-Z0-9]{10}")

MAX_PRICE = 100000
MAX_QUANTITY = 100000
MAX_ROLL_DIMENSION = 100


def _in_range(value: Any, low: float, high: float) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return low <= value <= high


class ProductValidator:
    """Validates a product record's field values."""

    def __init__(self, product: Union[ProductRecord, Dict[str, Any]]):
        self.data = product.to_dict() if isinstance(product, ProductRecord) else dict(product)

    def validate(self) -> List[str]:
        """
        Run all checks.

        Returns:
            List of violation messages, empty when the record is clean
        """
        errors: list[str] = []
        d = self.data

        asin = d.get("asin")
        if asin and not (isinstance(asin, str) and _ASIN_RE.fullmatch(asin)):
            errors.append("ASIN must be 10 alphanumeric characters")

        product_type = d.get("type")
        if product_type and product_type not in PRODUCT_TYPES:
            errors.append(f"Type must be one of: {', '.join(PRODUCT_TYPES)}")

        if d.get("price") is not None and not _in_range(d["price"], 0, MAX_PRICE):
            errors.append(f"Price must be a number between 0 and {MAX_PRICE}")

        if d.get("quantity") is not None and not _in_range(d["quantity"], 0, MAX_QUANTITY):
            errors.append(f"Quantity must be a number between 0 and {MAX_QUANTITY}")

        if d.get("rollWidth") is not None and not _in_range(d["rollWidth"], 0, MAX_ROLL_DIMENSION):
            errors.append(f"Roll width must be a number between 0 and {MAX_ROLL_DIMENSION}")

        if d.get("rollLength") is not None and not _in_range(d["rollLength"], 0, MAX_ROLL_DIMENSION):
            errors.append(f"Roll length must be a number between 0 and {MAX_ROLL_DIMENSION}")

        return errors


def validate_product(product: Union[ProductRecord, Dict[str, Any]]) -> List[str]:
    """Return the list of validation violations for a product."""
    return ProductValidator(product).validate()
