"""
Amazon page fetching.

Modules:
    amazon_fetcher - Page download, ASIN helpers and block-page detection
"""

from .amazon_fetcher import (
    build_product_url,
    extract_asin,
    fetch_amazon_page,
    find_block_indicators,
    has_product_content,
    is_block_page,
    is_valid_asin,
    is_valid_url,
)

__all__ = [
    'build_product_url',
    'extract_asin',
    'fetch_amazon_page',
    'find_block_indicators',
    'has_product_content',
    'is_block_page',
    'is_valid_asin',
    'is_valid_url',
]
