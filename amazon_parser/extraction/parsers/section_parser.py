"""
Amazon Section Parser

Extracts the product page sections the model needs as plain text:
- Title from the productTitle element
- Feature bullets from the feature-bullets list
- Raw price phrase from the core price block
- Heading/value pairs from the product overview and details tables
- Main image URL from the landing image

No model is involved here. Amazon markup is untrusted and often
malformed, so every landmark is optional and a missing one just
leaves its field empty.
"""

import logging
import re
from typing import Dict, List, Optional

from bs4 import BeautifulSoup, Comment, Tag

from ...common.text_utils import clean_text
from ...models import ExtractedText

logger = logging.getLogger(__name__)

# Bidi marks Amazon sprinkles through detail tables
_BIDI_MARKS = re.compile('[\u200e\u200f\u202a-\u202e]')


class AmazonSectionParser:
    """
    Parses the known sections of an Amazon product page.

    Usage:
        parser = AmazonSectionParser(soup)
        title = parser.extract_title()
        details = parser.extract_product_details()
        extracted = parser.extract()
    """

    TITLE_IDS = ['productTitle', 'title']
    BULLETS_ID = 'featurebullets_feature_div'
    PRICE_ID = 'coreprice_feature_div'
    OVERVIEW_ID = 'poExpander'
    DETAILS_ID = 'prodDetails'
    DETAILS_TABLE_PREFIX = 'productDetails'

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    def extract(self) -> ExtractedText:
        """Extract every known section into an ExtractedText."""
        return ExtractedText(
            title=self.extract_title() or None,
            price=self.extract_price() or None,
            description=self.extract_description() or None,
            product_details=self.extract_product_details(),
            thumbnail=self.extract_thumbnail() or None,
        )

    def extract_title(self) -> str:
        """
        Extract the product title.

        Only the element's own text nodes are used, so a heading that
        merely wraps other elements does not count as a title.

        Returns:
            Product title or empty string
        """
        for element_id in self.TITLE_IDS:
            element = self._find_by_id(element_id)
            if element is None:
                continue
            if element_id == 'title' and element.name != 'h1':
                continue
            text = self._clean_text(''.join(
                s for s in element.find_all(string=True, recursive=False)
                if not isinstance(s, Comment)
            ))
            if text:
                return text

        return ""

    def extract_description(self) -> str:
        """
        Extract the feature bullets as newline-joined lines.

        Each bullet prefers the text of its first span, falling back
        to the whole list item.

        Returns:
            Bullet text or empty string
        """
        container = self._find_by_id(self.BULLETS_ID)
        if container is None:
            return ""

        ul = container.find('ul')
        if ul is None:
            return ""

        lines = []
        for li in ul.find_all('li'):
            span = li.find('span')
            source = span if span is not None else li
            text = self._clean_text(source.get_text(' '))
            if text:
                lines.append(text)

        return '\n'.join(lines)

    def extract_price(self) -> str:
        """
        Extract the raw price phrase.

        The phrase is left unparsed (e.g. "$24.99 $ 24 . 99"); the model
        turns it into a number.

        Returns:
            Price text or empty string
        """
        container = self._find_by_id(self.PRICE_ID)
        if container is None:
            return ""
        return self._clean_text(container.get_text(' '))

    def extract_product_details(self) -> Dict[str, str]:
        """
        Extract heading/value pairs from the product tables.

        The product overview table is read first, then the legacy
        details table. A heading already taken from an earlier table
        is never overwritten.

        Returns:
            Ordered mapping of heading to value
        """
        details: Dict[str, str] = {}

        for table in self._detail_tables():
            for heading, value in self._parse_table(table).items():
                details.setdefault(heading, value)

        return details

    def extract_thumbnail(self) -> str:
        """
        Extract the main product image URL.

        Returns:
            Image URL or empty string
        """
        landing = self._find_by_id('landingImage')
        if landing is not None:
            src = landing.get('data-old-hires') or landing.get('src')
            if src:
                return src.strip()

        wrapper = self._find_by_id('imgTagWrapperId')
        if wrapper is not None:
            img = wrapper.find('img')
            if img is not None and img.get('src'):
                return img['src'].strip()

        return ""

    def _detail_tables(self) -> List[Tag]:
        """Return the overview table and the legacy details table, if present."""
        tables = []

        overview = self._find_by_id(self.OVERVIEW_ID)
        if overview is not None:
            table = overview.find('table')
            if table is not None:
                tables.append(table)

        legacy = self._find_by_id(self.DETAILS_ID)
        table = legacy.find('table') if legacy is not None else None
        if table is None:
            table = self.soup.find(
                'table',
                id=re.compile(rf'^{self.DETAILS_TABLE_PREFIX}', re.IGNORECASE),
            )
        if table is not None:
            tables.append(table)

        return tables

    def _parse_table(self, table: Tag) -> Dict[str, str]:
        """Read rows with at least two cells; later rows win within a table."""
        rows: Dict[str, str] = {}

        for row in table.find_all('tr'):
            cells = row.find_all(['th', 'td'], recursive=False)
            if len(cells) < 2:
                continue
            heading = self._clean_text(cells[0].get_text(' '))
            value = self._clean_text(cells[1].get_text(' '))
            if heading and value:
                rows[heading] = value

        return rows

    def _find_by_id(self, element_id: str) -> Optional[Tag]:
        """Find the first element whose id matches, ignoring case."""
        pattern = re.compile(rf'^{re.escape(element_id)}$', re.IGNORECASE)
        return self.soup.find(id=pattern)

    def _clean_text(self, text: str) -> str:
        """Clean and normalize text."""
        if not text:
            return ""
        return clean_text(_BIDI_MARKS.sub('', text))


def extract_sections(html: str) -> ExtractedText:
    """
    Extract the known sections from raw product page HTML.

    Never raises on bad markup; unparseable input yields an empty result.
    """
    soup = BeautifulSoup(html or "", "lxml")
    extracted = AmazonSectionParser(soup).extract()

    logger.info(
        "Extracted sections: title=%s description=%s price=%s details=%d",
        bool(extracted.title), bool(extracted.description),
        bool(extracted.price), len(extracted.product_details),
    )
    if extracted.product_details:
        logger.debug("Product details: %s", ', '.join(list(extracted.product_details)[:10]))

    return extracted
