"""
Response Resolver

Turns the model's free-text answer into a ProductRecord. The model
is not trusted to follow the schema: everything short of a total
parse failure is repaired rather than rejected.
"""

import json
import logging
import re
from typing import Any, Dict, List, Optional

from ..common.text_utils import truncate
from ..errors import BlockedError, MalformedJsonError, NoJsonFoundError
from ..fetching.amazon_fetcher import build_product_url, is_block_page, is_valid_asin
from ..models import ProductRecord

logger = logging.getLogger(__name__)

_FENCE_OPEN_RE = re.compile(r'^```(?:json)?\s*', re.IGNORECASE)
_FENCE_CLOSE_RE = re.compile(r'\s*```$')

TEXT_FIELDS = ('asin', 'type', 'title', 'brand', 'description', 'size', 'dimensions', 'thumbnail', 'url')
NUMBER_FIELDS = ('price', 'quantity', 'rollLength', 'rollWidth')
LIST_FIELDS = ('printNames', 'rolls')


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def extract_json_text(text: str) -> str:
    """
    Cut the JSON object out of the completion text.

    Strips a surrounding ``` / ```json fence, then takes everything from
    the first "{" to the last "}".

    Raises:
        NoJsonFoundError: No object span in the text
    """
    cleaned = (text or "").strip()
    cleaned = _FENCE_OPEN_RE.sub('', cleaned)
    cleaned = _FENCE_CLOSE_RE.sub('', cleaned)

    start = cleaned.find('{')
    end = cleaned.rfind('}')
    if start == -1 or end < start:
        logger.error("No JSON object found in response: %s", truncate(text, 500))
        raise NoJsonFoundError("No JSON object found in Ollama response")

    return cleaned[start:end + 1]


def parse_json_object(json_text: str) -> Dict[str, Any]:
    """
    Parse the extracted object span.

    Raises:
        MalformedJsonError: The span is not valid JSON
    """
    try:
        return json.loads(json_text)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse JSON: %s", truncate(json_text, 500))
        raise MalformedJsonError(f"Failed to parse JSON response: {e}", parser_message=str(e)) from e


def normalize_roll(roll: Any, index: int) -> Dict[str, Any]:
    """Coerce one roll entry, filling defaults for anything missing or mistyped."""
    if not isinstance(roll, dict):
        roll = {}

    on_hand = roll.get('onHand') if _is_number(roll.get('onHand')) else 0

    return {
        'rollNumber': roll.get('rollNumber') if _is_number(roll.get('rollNumber')) else index + 1,
        'onHand': on_hand,
        'maxArea': roll.get('maxArea') if _is_number(roll.get('maxArea')) else on_hand,
        'image': roll.get('image') or None,
        'printName': roll.get('printName') or None,
        'hasReverseSide': roll.get('hasReverseSide') if isinstance(roll.get('hasReverseSide'), bool) else False,
        'pairedRollNumber': roll.get('pairedRollNumber') if _is_number(roll.get('pairedRollNumber')) else None,
    }


def _normalize_list(data: Dict[str, Any], key: str) -> Optional[List[Any]]:
    """
    Lists keep three states: a list stays a list, an explicit null stays
    None ("none stated"), and anything else becomes an empty list.
    """
    value = data.get(key)
    if isinstance(value, list):
        return value
    if key in data and value is None:
        return None
    return []


def normalize_product_data(
    data: Dict[str, Any],
    fallback_asin: Optional[str] = None,
    fallback_url: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Repair a parsed model answer into the canonical camelCase shape.

    Args:
        data: Parsed JSON object from the model
        fallback_asin: ASIN known to the caller
        fallback_url: URL known to the caller

    Returns:
        Dict with every schema key present
    """
    data = dict(data)

    if not data.get('asin') and fallback_asin:
        data['asin'] = fallback_asin

    if not data.get('url'):
        if fallback_url:
            data['url'] = fallback_url
        elif is_valid_asin(data.get('asin')):
            data['url'] = build_product_url(data['asin'])

    if not isinstance(data.get('images'), list):
        data['images'] = []

    normalized: Dict[str, Any] = {}
    for key in TEXT_FIELDS:
        value = data.get(key)
        normalized[key] = None if value is None or value == "" else value
    for key in NUMBER_FIELDS:
        normalized[key] = data.get(key)
    for key in LIST_FIELDS:
        normalized[key] = _normalize_list(data, key)
    normalized['images'] = data['images']

    if normalized['rolls'] is not None:
        normalized['rolls'] = [normalize_roll(roll, i) for i, roll in enumerate(normalized['rolls'])]

    return normalized


def resolve_response(
    completion_text: str,
    fallback_asin: Optional[str] = None,
    fallback_url: Optional[str] = None,
    html: Optional[str] = None,
) -> ProductRecord:
    """
    Resolve a completion into a ProductRecord.

    Args:
        completion_text: Raw model output
        fallback_asin: ASIN to use when the model omitted it
        fallback_url: URL to use when the model omitted it
        html: Source page, checked for block-page phrases when nothing
            useful was extracted

    Returns:
        Normalized ProductRecord (possibly mostly empty)

    Raises:
        NoJsonFoundError: No JSON object in the completion
        MalformedJsonError: Object span could not be parsed
        BlockedError: Nothing extracted and the page is a block page
    """
    json_text = extract_json_text(completion_text)
    logger.debug("Extracted JSON text: %s", truncate(json_text, 500))

    data = parse_json_object(json_text)
    record = ProductRecord.from_dict(normalize_product_data(data, fallback_asin, fallback_url))

    if not record.has_core_fields():
        logger.warning(
            "No product data extracted - Amazon may have blocked the request or page structure changed"
        )
        if is_block_page(html):
            raise BlockedError(
                "Amazon blocked the request. This often happens with automated requests. "
                "Try again later or use a different method to access the product page."
            )

    return record
