"""
Product data models.

Pure data classes for representing extracted product information.
No business logic - only data structure definitions and the mapping
between Python attribute names and the camelCase JSON wire keys.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

Number = Union[int, float]


class ProductType(str, Enum):
    """Product categories the parser recognises."""
    WRAPPING_PAPER = "wrapping_paper"
    RIBBON = "ribbon"
    BOX = "box"
    TAG = "tag"
    BOW = "bow"


PRODUCT_TYPES = tuple(t.value for t in ProductType)


@dataclass(frozen=True)
class ExtractedText:
    """
    Plain-text sections pulled out of a product page.

    Every field is optional; a missing field means the landmark
    was not found on the page.
    """
    title: Optional[str] = None
    price: Optional[str] = None         # Raw price phrase, e.g. "$24.99 $24.99"
    description: Optional[str] = None   # Feature bullets, newline-joined
    product_details: Dict[str, str] = field(default_factory=dict)
    thumbnail: Optional[str] = None

    def is_empty(self) -> bool:
        return not (
            self.title or self.price or self.description
            or self.product_details or self.thumbnail
        )


@dataclass(frozen=True)
class Roll:
    """One physical roll within a wrapping paper pack."""
    roll_number: int
    on_hand: Number = 0
    max_area: Number = 0
    image: Optional[str] = None
    print_name: Optional[str] = None
    has_reverse_side: bool = False
    paired_roll_number: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rollNumber": self.roll_number,
            "onHand": self.on_hand,
            "maxArea": self.max_area,
            "image": self.image,
            "printName": self.print_name,
            "hasReverseSide": self.has_reverse_side,
            "pairedRollNumber": self.paired_roll_number,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Roll":
        return cls(
            roll_number=data["rollNumber"],
            on_hand=data.get("onHand", 0),
            max_area=data.get("maxArea", 0),
            image=data.get("image"),
            print_name=data.get("printName"),
            has_reverse_side=data.get("hasReverseSide", False),
            paired_roll_number=data.get("pairedRollNumber"),
        )


# Attribute name -> JSON key, in schema order
_WIRE_KEYS = {
    "asin": "asin",
    "product_type": "type",
    "title": "title",
    "price": "price",
    "brand": "brand",
    "description": "description",
    "size": "size",
    "quantity": "quantity",
    "dimensions": "dimensions",
    "roll_length": "rollLength",
    "roll_width": "rollWidth",
    "print_names": "printNames",
    "rolls": "rolls",
    "thumbnail": "thumbnail",
    "images": "images",
    "url": "url",
}


@dataclass(frozen=True)
class ProductRecord:
    """
    Canonical product record, identified by ASIN.

    Field Groups:
    - Identity: asin, url
    - Core fields: type, title, price, brand, description
    - Packaging: size, quantity, dimensions, roll_length, roll_width
    - Wrapping paper: print_names, rolls
    - Media: thumbnail, images

    print_names and rolls are None when the model affirmatively reported
    "none", and an empty list when nothing usable came back.
    """

    asin: Optional[str] = None
    product_type: Optional[str] = None
    title: Optional[str] = None
    price: Optional[Number] = None
    brand: Optional[str] = None
    description: Optional[str] = None
    size: Optional[str] = None          # e.g. "88 sqft"
    quantity: Optional[Number] = None
    dimensions: Optional[str] = None    # "WxLxH" in inches, for boxes
    roll_length: Optional[Number] = None  # feet
    roll_width: Optional[Number] = None   # inches
    print_names: Optional[List[str]] = field(default_factory=list)
    rolls: Optional[List[Roll]] = field(default_factory=list)
    thumbnail: Optional[str] = None
    images: List[str] = field(default_factory=list)
    url: Optional[str] = None

    def has_core_fields(self) -> bool:
        """True if any of title, price or brand was extracted."""
        return bool(self.title) or self.price is not None or bool(self.brand)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase JSON shape."""
        data = {}
        for attr, key in _WIRE_KEYS.items():
            value = getattr(self, attr)
            if attr == "rolls" and value is not None:
                value = [roll.to_dict() for roll in value]
            elif isinstance(value, list):
                value = list(value)
            data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProductRecord":
        """Build from an already-normalized camelCase dict."""
        kwargs = {attr: data.get(key) for attr, key in _WIRE_KEYS.items()}
        if kwargs["rolls"] is not None:
            kwargs["rolls"] = [Roll.from_dict(r) for r in kwargs["rolls"]]
        if kwargs["images"] is None:
            kwargs["images"] = []
        return cls(**kwargs)


@dataclass
class ParseResult:
    """A parsed product plus its advisory validation warnings."""
    product: ProductRecord
    warnings: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.warnings

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": True,
            "data": self.product.to_dict(),
            "valid": self.valid,
            "warnings": list(self.warnings),
        }
