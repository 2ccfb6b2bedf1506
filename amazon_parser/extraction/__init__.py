"""
Product extraction modules.

Modules:
    parsers - Section extraction from raw HTML
    prompt - Prompt composition for the model
    completion - Model invocation and response envelope handling
    resolver - JSON extraction, parsing and normalization
    validator - Advisory field validation
    designs - Print name segmentation
    rolls - Roll expansion and cyclic print name assignment
"""

from .completion import invoke_completion, response_text
from .designs import find_design_count, find_design_list, is_reversible, segment_print_names
from .parsers import AmazonSectionParser, extract_sections
from .prompt import NO_DATA_SENTINEL, PRODUCT_SCHEMA, compose_prompt
from .resolver import extract_json_text, normalize_product_data, resolve_response
from .rolls import assign_print_name, expand_rolls, has_reverse_side, per_roll_area
from .validator import ProductValidator, validate_product

__all__ = [
    # Section extraction
    'AmazonSectionParser',
    'extract_sections',
    # Prompt
    'NO_DATA_SENTINEL',
    'PRODUCT_SCHEMA',
    'compose_prompt',
    # Completion
    'invoke_completion',
    'response_text',
    # Resolving
    'extract_json_text',
    'normalize_product_data',
    'resolve_response',
    # Validation
    'ProductValidator',
    'validate_product',
    # Print names and rolls
    'find_design_count',
    'find_design_list',
    'is_reversible',
    'segment_print_names',
    'assign_print_name',
    'expand_rolls',
    'has_reverse_side',
    'per_roll_area',
]
