"""
Data models for product parsing.

This module contains pure data classes with no business logic.
"""

from .product import (
    PRODUCT_TYPES,
    ExtractedText,
    ParseResult,
    ProductRecord,
    ProductType,
    Roll,
)

__all__ = [
    'PRODUCT_TYPES',
    'ExtractedText',
    'ParseResult',
    'ProductRecord',
    'ProductType',
    'Roll',
]
