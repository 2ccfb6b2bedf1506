"""
Page section parsers.

- AmazonSectionParser: title, bullets, price, detail tables, main image
"""

from .section_parser import AmazonSectionParser, extract_sections

__all__ = [
    'AmazonSectionParser',
    'extract_sections',
]
