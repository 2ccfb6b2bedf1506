"""
Amazon Page Fetcher

Downloads product pages and recognises the pages Amazon serves to
automated clients instead of product content.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional
from urllib.parse import urlparse

import requests

from ..errors import FetchError, InvalidInputError

logger = logging.getLogger(__name__)

AMAZON_PRODUCT_URL = "https://www.amazon.com/dp/{asin}"

_ASIN_RE = re.compile(r'(?:dp|product|gp/product)/([A-Z0-9]{10})')
_VALID_ASIN_RE = re.compile(r'[A-Z0-9]{10}')

# Phrases that only appear on Amazon's "continue shopping" interstitial
BLOCK_PAGE_PHRASES = (
    'continue shopping',
    'click the button below',
)

# Broader hints, used for warnings only
BLOCK_INDICATORS = BLOCK_PAGE_PHRASES + (
    'to discuss automated access',
    'captcha',
    'robot',
    'bot detection',
    'access denied',
)

PRODUCT_INDICATORS = (
    'id="producttitle"',
    'producttitle',
    'data-asin',
    'id="priceblock',
    'a-price',
)

REQUEST_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
                  "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,"
              "image/apng,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Accept-Encoding": "gzip, deflate",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
    "Cache-Control": "max-age=0",
}


def extract_asin(text: Optional[str]) -> Optional[str]:
    """
    Find an ASIN in a URL or page.

    Args:
        text: URL or HTML, e.g. "https://www.amazon.com/dp/B08XYZ1234"

    Returns:
        10-character ASIN or None
    """
    if not text:
        return None
    match = _ASIN_RE.search(text)
    return match.group(1) if match else None


def is_valid_asin(asin: Optional[str]) -> bool:
    """True if asin is a string of exactly 10 upper-case alphanumeric characters."""
    return isinstance(asin, str) and bool(_VALID_ASIN_RE.fullmatch(asin))


def is_valid_url(url: Optional[str]) -> bool:
    """True if url is an absolute http(s) URL."""
    if not url or not isinstance(url, str) or not url.strip():
        return False
    parsed = urlparse(url.strip())
    return parsed.scheme in ('http', 'https') and bool(parsed.netloc)


def build_product_url(asin: str) -> str:
    """Canonical product URL for an ASIN."""
    return AMAZON_PRODUCT_URL.format(asin=asin)


def find_block_indicators(html: Optional[str]) -> List[str]:
    """Return the block-page hints present in the page (case-insensitive)."""
    if not html:
        return []
    lowered = html.lower()
    return [indicator for indicator in BLOCK_INDICATORS if indicator in lowered]


def is_block_page(html: Optional[str]) -> bool:
    """True if the page contains one of the interstitial's own phrases."""
    if not html:
        return False
    lowered = html.lower()
    return any(phrase in lowered for phrase in BLOCK_PAGE_PHRASES)


def has_product_content(html: Optional[str]) -> bool:
    """True if the page carries any usual product page markers."""
    if not html:
        return False
    lowered = html.lower()
    return any(indicator in lowered for indicator in PRODUCT_INDICATORS)


def fetch_amazon_page(
    url: Optional[str] = None,
    asin: Optional[str] = None,
    session: requests.Session | None = None,
    timeout: float = 30,
) -> str:
    """
    Fetch an Amazon product page.

    Args:
        url: Product URL (used if valid)
        asin: ASIN, used to build the URL when no valid URL is given
        session: Optional requests session
        timeout: Seconds allowed for connecting and for the response

    Returns:
        Page HTML

    Raises:
        InvalidInputError: Neither a valid URL nor an ASIN, or malformed ASIN
        FetchError: Network failure or error status
    """
    fetch_url = None
    if is_valid_url(url):
        fetch_url = url.strip()
    elif url:
        logger.warning("Invalid URL format: %s, falling back to ASIN", url)

    if not fetch_url and asin:
        fetch_url = build_product_url(asin)

    if not fetch_url:
        raise InvalidInputError("Valid URL or ASIN is required")

    if asin and not is_valid_asin(asin):
        raise InvalidInputError("Invalid ASIN format. ASIN must be 10 alphanumeric characters.")

    requester = session or requests
    try:
        response = requester.get(fetch_url, headers=REQUEST_HEADERS, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        reason = e.response.reason if e.response is not None else str(e)
        raise FetchError(f"Amazon returned status {status}: {reason}", status_code=status) from e
    except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
        raise FetchError(
            "Failed to connect to Amazon. The request timed out or Amazon blocked the connection."
        ) from e
    except requests.exceptions.RequestException as e:
        raise FetchError(f"Error fetching Amazon page: {e}") from e

    html = response.text
    if is_block_page(html):
        logger.warning("Amazon may have served a block page instead of product content")

    return html
