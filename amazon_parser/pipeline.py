"""
Amazon Product Parser Pipeline

End-to-end parsing of one product: fetch the page (unless HTML is
supplied), extract its sections, prompt the model, resolve the answer
into a ProductRecord and validate it.

Every call is independent; the parser keeps no per-request state, so
one instance can serve concurrent callers.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from .common.config_loader import ParserConfig
from .common.text_utils import truncate
from .errors import FetchError, InvalidInputError
from .extraction.completion import invoke_completion
from .extraction.parsers import extract_sections
from .extraction.prompt import compose_prompt
from .extraction.resolver import resolve_response
from .extraction.validator import validate_product
from .fetching.amazon_fetcher import (
    build_product_url,
    extract_asin,
    fetch_amazon_page,
    find_block_indicators,
    has_product_content,
    is_valid_url,
)
from .llm import OllamaClient
from .models import ParseResult

logger = logging.getLogger(__name__)


class AmazonProductParser:
    """
    Parses Amazon product pages with an Ollama model.

    Usage:
        parser = AmazonProductParser(load_parser_config())
        result = parser.parse(url="https://www.amazon.com/dp/B08XYZ1234")
        print(result.product.title, result.warnings)
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        client=None,
        session: requests.Session | None = None,
    ):
        """
        Initialize the parser.

        Args:
            config: Parser settings (defaults used if None)
            client: Completion client with a generate() method
                (an OllamaClient for config.ollama_host if None)
            session: Optional requests session for page fetches
        """
        self.config = config or ParserConfig()
        self.client = client or OllamaClient(self.config.ollama_host, timeout=self.config.ollama_timeout)
        self.session = session

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self):
        if hasattr(self.client, 'close'):
            self.client.close()

    def parse(
        self,
        url: Optional[str] = None,
        asin: Optional[str] = None,
        html: Optional[str] = None,
    ) -> ParseResult:
        """
        Parse one product.

        Args:
            url: Product URL
            asin: Product ASIN
            html: Pre-fetched page HTML (skips the network fetch)

        Returns:
            ParseResult with the product and any validation warnings

        Raises:
            InvalidInputError: No url, asin or html given
            FetchError: The page could not be fetched
            AmazonParserError: Any completion or resolving failure
        """
        if not (url or asin or html):
            raise InvalidInputError("At least one of url, asin, or html is required")

        product_asin = asin or extract_asin(url)
        product_url = url or (build_product_url(product_asin) if product_asin else None)

        if product_url and not is_valid_url(product_url):
            logger.warning("Invalid URL format: %s, will try with ASIN instead", product_url)
            product_url = None

        if not html:
            html = self._fetch(product_url, product_asin)

        if not product_asin:
            product_asin = extract_asin(html) or extract_asin(product_url)

        extracted = extract_sections(html)
        prompt = compose_prompt(extracted, product_asin, product_url)
        completion = invoke_completion(
            self.client,
            self.config.model,
            prompt,
            temperature=self.config.temperature,
            top_p=self.config.top_p,
        )

        product = resolve_response(completion, product_asin, product_url, html=html)

        warnings = validate_product(product)
        if warnings:
            logger.warning("Validation warnings: %s", '; '.join(warnings))

        logger.info(
            "Parsed product: asin=%s type=%s title=%s",
            product.asin, product.product_type, truncate(product.title, 50),
        )
        return ParseResult(product=product, warnings=warnings)

    def _fetch(self, url: Optional[str], asin: Optional[str]) -> str:
        """Fetch the page and log block-page or missing-content hints."""
        try:
            html = fetch_amazon_page(url, asin, session=self.session, timeout=self.config.fetch_timeout)
        except FetchError as e:
            raise FetchError(f"Failed to fetch Amazon page: {e}", status_code=e.status_code) from e

        logger.info("Fetched HTML (%d characters)", len(html))

        indicators = find_block_indicators(html)
        if indicators:
            logger.warning(
                "Amazon may have blocked the request - detected block page indicators: %s",
                ', '.join(indicators),
            )
        elif not has_product_content(html):
            logger.warning("HTML may not contain product information - no product indicators found")

        return html
