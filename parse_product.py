#!/usr/bin/env python3
"""
Single Product Parse

Parses one Amazon product with a local Ollama model and prints a report.

Usage:
    python3 parse_product.py --url https://www.amazon.com/dp/B08XYZ1234
    python3 parse_product.py --asin B08XYZ1234 --model llama3.2
    python3 parse_product.py --html-file page.html --output-json output/product.json
"""

import argparse
import json
import os
import sys

from dotenv import load_dotenv

from amazon_parser.common import load_parser_config, setup_logging
from amazon_parser.errors import AmazonParserError, TransportTimeoutError
from amazon_parser.models import ParseResult
from amazon_parser.pipeline import AmazonProductParser


def print_report(result: ParseResult):
    """Print a summary of the parsed product."""
    product = result.product

    print("\n" + "="*80)
    print("PARSE REPORT")
    print("="*80)

    print("\nCORE FIELDS:")
    fields = [
        ("ASIN", product.asin),
        ("Type", product.product_type),
        ("Title", product.title),
        ("Price", product.price),
        ("Brand", product.brand),
        ("Size", product.size),
        ("Quantity", product.quantity),
        ("Roll width (in)", product.roll_width),
        ("Roll length (ft)", product.roll_length),
        ("URL", product.url),
    ]

    for label, value in fields:
        status = "OK" if value is not None else "MISSING"
        print(f"  [{status:7}] {label:20} {value if value is not None else 'MISSING'}")

    if product.print_names:
        print(f"\nPRINT NAMES ({len(product.print_names)}):")
        for idx, name in enumerate(product.print_names, 1):
            print(f"  {idx}. {name}")

    if product.rolls:
        print(f"\nROLLS ({len(product.rolls)}):")
        for roll in product.rolls:
            reverse = " (reverse side)" if roll.has_reverse_side else ""
            print(f"  {roll.roll_number}. {roll.print_name or '-'}: {roll.on_hand} sqft{reverse}")

    if result.warnings:
        print("\nWARNINGS:")
        for warning in result.warnings:
            print(f"  - {warning}")
    else:
        print("\nNo issues found!")

    print("\n" + "="*80)


def main():
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Parse a single Amazon product with an Ollama model"
    )
    parser.add_argument("--url", help="Amazon product URL")
    parser.add_argument("--asin", help="Amazon ASIN")
    parser.add_argument("--html-file", help="Parse saved HTML instead of fetching")
    parser.add_argument("--model", help="Ollama model (default: OLLAMA_MODEL or config)")
    parser.add_argument("--host", help="Ollama host (default: OLLAMA_HOST or config)")
    parser.add_argument("--output-json", help="Write the result JSON to this path")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--quiet", action="store_true", help="Warnings only")

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    if not (args.url or args.asin or args.html_file):
        parser.error("At least one of --url, --asin or --html-file is required")

    config = load_parser_config()
    if args.model:
        config.model = args.model
    if args.host:
        config.ollama_host = args.host

    html = None
    if args.html_file:
        with open(args.html_file, 'r', encoding='utf-8') as f:
            html = f.read()

    try:
        with AmazonProductParser(config) as product_parser:
            result = product_parser.parse(url=args.url, asin=args.asin, html=html)
    except TransportTimeoutError as e:
        print(f"\nTimed out (the model may still be working, retrying can help): {e}")
        sys.exit(1)
    except AmazonParserError as e:
        print(f"\nParse failed: {e}")
        sys.exit(1)

    print_report(result)

    if args.output_json:
        os.makedirs(os.path.dirname(args.output_json) or ".", exist_ok=True)
        with open(args.output_json, 'w', encoding='utf-8') as f:
            json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)
        print(f"\nResults saved to: {args.output_json}")

    sys.exit(0)


if __name__ == "__main__":
    main()
