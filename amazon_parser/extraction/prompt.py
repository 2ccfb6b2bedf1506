"""
Prompt Composer

Builds the instruction sent to the model: the extracted page text,
the exact JSON schema to return, and the extraction rules. The worked
examples for print names and rolls are rendered by the same code the
library uses, so the prompt and the library never disagree.
"""

import json
from typing import Dict, List, Optional

from ..models import PRODUCT_TYPES, ExtractedText
from .designs import find_design_list, segment_print_names
from .rolls import expand_rolls, has_reverse_side, parse_area, parse_roll_area

NO_DATA_SENTINEL = "No product information extracted from HTML."

PRODUCT_SCHEMA: Dict[str, str] = {
    'asin': 'string (10 alphanumeric characters)',
    'type': f"string (one of: {', '.join(PRODUCT_TYPES)})",
    'title': 'string (product title)',
    'price': 'number (price in USD, without $ symbol)',
    'brand': 'string (brand name)',
    'description': 'string (product description or additional details)',
    'size': 'string (e.g., "88 sqft" for wrapping paper)',
    'quantity': 'number (number of items in pack)',
    'dimensions': 'string (for boxes: "WxLxH" format, e.g., "12x12x6")',
    'rollLength': 'number (roll length in feet, for wrapping paper)',
    'rollWidth': 'number (roll width in inches, for wrapping paper)',
    'printNames': 'array of strings (individual print/design names explicitly mentioned in description)',
    'rolls': 'array of Roll objects (one for each roll in the pack, only for wrapping_paper type)',
    'thumbnail': 'string (main product image URL)',
    'images': 'array of strings (additional image URLs)',
    'url': 'string (Amazon product URL)',
}

PLAIN_DESIGNS_EXAMPLE = (
    "Bold plaid, stripes, dots, colorful houses, crafty trees and snowmen, "
    "'Merry Everything' lettering"
)
REVERSIBLE_DESIGNS_EXAMPLE = (
    "SIX CUTE DESIGNS: Bundle of reversible holiday wrapping paper features 6 adorable "
    "designs: Skiing Santa, zebras and penguins / Snowflakes and trees on red, "
    "'Joy to you, Fa la la, Ho ho ho' on blue / Rainbow stripes, Snowmen and puppies/ Green trees"
)
ROLLS_EXAMPLE_NAMES = ["Bold plaid", "Stripes", "Dots", "Merry Everything"]
ROLLS_EXAMPLE_SIZE = "4 rolls, 88 sq. ft. total (22 sq. ft. per roll), cut lines on reverse"


def _print_name_examples() -> List[str]:
    plain = segment_print_names(PLAIN_DESIGNS_EXAMPLE, description="")
    reversible = segment_print_names(
        find_design_list(REVERSIBLE_DESIGNS_EXAMPLE),
        description=REVERSIBLE_DESIGNS_EXAMPLE,
    )
    return [
        f'- "{PLAIN_DESIGNS_EXAMPLE}" (not reversible) → {json.dumps(plain)}',
        f'- "{REVERSIBLE_DESIGNS_EXAMPLE}" (REVERSIBLE - note "reversible" in description) '
        f'→ {json.dumps(reversible)} ({len(reversible)} designs total)',
    ]


def _rolls_example() -> str:
    rolls = expand_rolls(
        4,
        ROLLS_EXAMPLE_NAMES,
        total_size=parse_area(ROLLS_EXAMPLE_SIZE),
        per_roll_size=parse_roll_area(ROLLS_EXAMPLE_SIZE),
        reverse_side=has_reverse_side(ROLLS_EXAMPLE_SIZE),
    )
    lines = ',\n'.join(f"      {json.dumps(roll.to_dict())}" for roll in rolls)
    return f"    [\n{lines}\n    ]"


PRINT_NAME_EXAMPLES = '\n  '.join(_print_name_examples())
ROLLS_EXAMPLE = _rolls_example()
FIELD_NOTES = "\n".join(f"- {key}: {meaning}" for key, meaning in PRODUCT_SCHEMA.items())


def format_extracted_text(extracted: ExtractedText) -> str:
    """Render the extracted sections as labelled plain text."""
    parts = []

    if extracted.title:
        parts.append(f"PRODUCT TITLE:\n{extracted.title}\n")
    if extracted.price:
        parts.append(f"PRICE:\n{extracted.price}\n")
    if extracted.description:
        parts.append(f"DESCRIPTION / FEATURE BULLETS:\n{extracted.description}\n")
    if extracted.product_details:
        rows = '\n'.join(f"{heading}: {value}" for heading, value in extracted.product_details.items())
        parts.append(f"PRODUCT DETAILS:\n{rows}\n")
    if extracted.thumbnail:
        parts.append(f"THUMBNAIL IMAGE: {extracted.thumbnail}\n")

    if not parts:
        return NO_DATA_SENTINEL
    return '\n'.join(parts)


def compose_prompt(extracted: ExtractedText, asin: Optional[str] = None, url: Optional[str] = None) -> str:
    """
    Build the extraction prompt.

    Args:
        extracted: Sections pulled from the page
        asin: Known ASIN, if any
        url: Known product URL, if any

    Returns:
        Prompt text
    """
    asin_value = asin or 'extract from URL'
    url_value = url or f"https://www.amazon.com/dp/{asin or ''}"
    types = ' | '.join(PRODUCT_TYPES)

    return f"""Extract product information from the following Amazon product data and return ONLY a valid JSON object matching the schema.

Extract and map the following fields from the text below:

Required JSON schema (all fields required, use null if not found):
{{
  "asin": "{asin_value}",
  "type": "{types} | null",
  "title": "string | null",
  "price": number | null,
  "brand": "string | null",
  "description": "string | null",
  "size": "string | null",
  "quantity": number | null,
  "dimensions": "string | null",
  "rollLength": number | null,
  "rollWidth": number | null,
  "printNames": ["string"] | null,
  "rolls": [{{"rollNumber": number, "onHand": number, "maxArea": number, "image": "string | null", "printName": "string | null", "hasReverseSide": boolean, "pairedRollNumber": number | null}}] | null,
  "thumbnail": "string | null",
  "images": ["string"],
  "url": "{url_value}"
}}

Field meanings:
{FIELD_NOTES}

EXTRACTION RULES:
- type: Detect from title/description (wrapping/wrap/paper = wrapping_paper, ribbon = ribbon, box = box, tag/gift tag = tag, bow = bow)
- title: Use PRODUCT TITLE if available
- price: Extract number from PRICE section (remove $, commas, convert to number)
- brand: Look for "Brand:" in PRODUCT DETAILS
- description: Use DESCRIPTION section, combine all bullet points
- size: Look for size info in PRODUCT DETAILS or DESCRIPTION (e.g., "88 sq. ft.", "22 sq. ft. per roll") - format as "88 sqft" or "22 sqft"
- quantity: Look for "Pack of 4" (quantity=4), "4 Pack" (quantity=4), "Number of Items: 4" (quantity=4) in PRODUCT DETAILS or DESCRIPTION
- rollWidth: Look for width in inches in PRODUCT DETAILS or DESCRIPTION (e.g., "30 inches", "30\"", "30\" x 8.8'" means 30)
- rollLength: Look for length in feet in PRODUCT DETAILS or DESCRIPTION (e.g., "8.8 feet", "8.8'", "30\" x 8.8'" means 8.8)
- dimensions: For boxes, format as "WxLxH" in inches
- printNames: Extract individual print/design names ONLY from what is explicitly mentioned in the title or description. IMPORTANT: Only extract names that are directly stated in the text - do NOT infer, guess, or make up names.

  CRITICAL RULE FOR REVERSIBLE DESIGNS: If the description mentions "reversible" or "both sides", and you see a comma before a forward slash (/), treat the comma-separated items as ONE reversible design name. For example: "Skiing Santa, zebras and penguins /" means ONE design with two sides, so extract as ["Skiing Santa, zebras and penguins"] NOT ["Skiing Santa", "zebras and penguins"].

  Parsing patterns:
  * Forward slash (/) is the PRIMARY separator between different designs. Split on forward slashes first.
  * Within each slash-separated section, if there's a comma:
    - If description mentions "reversible" or "both sides": Keep comma-separated items together as one design name (e.g., "Skiing Santa, zebras and penguins" = one design)
    - If description does NOT mention "reversible": Split on commas (e.g., "Bold plaid, stripes, dots" = three designs)
  * Quoted text: Never split inside quotes; drop the quote marks, e.g., 'Joy to you, Fa la la, Ho ho ho' on blue → "Joy to you, Fa la la, Ho ho ho on blue"
  * "X on Y" format: Include both parts, e.g., "Snowflakes and trees on red" → "Snowflakes and trees on red"
  * Count validation: Check for explicit counts (e.g., "6 designs", "SIX CUTE DESIGNS") and ensure you extract exactly that many designs

  Examples:
  {PRINT_NAME_EXAMPLES}

  Return as array of strings. Use null or empty array if no print names are explicitly mentioned.
- rolls: IMPORTANT - Only create if type is wrapping_paper AND quantity is found. Create an array with exactly quantity Roll objects, one for each roll in the pack.
  * For each roll, set: rollNumber (1, 2, 3, ...), onHand (calculate from size per roll - e.g., if "22 sqft per roll" use 22, or if total size is "88 sqft" and quantity is 4, use 88/4 = 22), maxArea (same as onHand), image (null), printName (assign from printNames array if available, cycling through them - roll 1 gets printNames[0], roll 2 gets printNames[1], etc. If no printNames, use null), hasReverseSide (look for "reverse", "both sides", "cut lines on reverse" in description - set true if found, false otherwise), pairedRollNumber (null)
  * Example: If quantity=4 and printNames={json.dumps(ROLLS_EXAMPLE_NAMES)} and size per roll is 22 sqft, create:
{ROLLS_EXAMPLE}
  * If type is not wrapping_paper or quantity is not found, set rolls to null.

PRODUCT DATA:
{format_extracted_text(extracted)}

Return ONLY the raw JSON object. No markdown, no explanations, no code blocks. Start with {{ and end with }}."""
