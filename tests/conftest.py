"""Shared test fixtures."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def product_page_html():
    """Load the wrapping paper product page fixture."""
    return (FIXTURES_DIR / "product_page.html").read_text(encoding="utf-8")


@pytest.fixture
def block_page_html():
    """Load the "continue shopping" interstitial fixture."""
    return (FIXTURES_DIR / "block_page.html").read_text(encoding="utf-8")


@pytest.fixture
def wrapping_paper_data():
    """A well-formed model answer for a 4-roll wrapping paper bundle."""
    return {
        "asin": "B08XYZ1234",
        "type": "wrapping_paper",
        "title": "Hallmark Reversible Christmas Wrapping Paper Bundle (4 Rolls: 88 sq. ft. ttl.)",
        "price": 24.99,
        "brand": "Hallmark",
        "description": "SIX CUTE DESIGNS: Bundle of reversible holiday wrapping paper",
        "size": "88 sqft",
        "quantity": 4,
        "dimensions": None,
        "rollLength": 8.8,
        "rollWidth": 30,
        "printNames": ["Bold plaid", "Stripes", "Dots", "Merry Everything"],
        "rolls": [
            {"rollNumber": i + 1, "onHand": 22, "maxArea": 22, "image": None,
             "printName": name, "hasReverseSide": True, "pairedRollNumber": None}
            for i, name in enumerate(["Bold plaid", "Stripes", "Dots", "Merry Everything"])
        ],
        "thumbnail": "https://m.media-amazon.com/images/I/71abc._AC_SL1500_.jpg",
        "images": [],
        "url": "https://www.amazon.com/dp/B08XYZ1234",
    }


@pytest.fixture
def wrapping_paper_completion(wrapping_paper_data):
    """The model answer as raw completion text."""
    return json.dumps(wrapping_paper_data)


@pytest.fixture
def ollama_client(wrapping_paper_completion):
    """Mock Ollama client answering with the wrapping paper completion."""
    client = MagicMock()
    client.generate.return_value = {
        "model": "llama3.2",
        "response": wrapping_paper_completion,
        "done": True,
    }
    return client
