"""Tests for amazon_parser/extraction/resolver.py"""

import json

import pytest

from amazon_parser.errors import BlockedError, MalformedJsonError, NoJsonFoundError
from amazon_parser.extraction.resolver import (
    extract_json_text,
    normalize_product_data,
    normalize_roll,
    parse_json_object,
    resolve_response,
)
from amazon_parser.models import ProductRecord, Roll


class TestExtractJsonText:
    @pytest.mark.parametrize("text", [
        '```json\n{"asin": "B08XYZ1234"}\n```',
        '```\n{"asin": "B08XYZ1234"}\n```',
        'Here is the product:\n{"asin": "B08XYZ1234"}\nLet me know if you need more.',
        '  {"asin": "B08XYZ1234"}  ',
    ])
    def test_finds_object(self, text):
        assert extract_json_text(text) == '{"asin": "B08XYZ1234"}'

    def test_spans_first_to_last_brace(self):
        text = 'x {"rolls": [{"rollNumber": 1}]} y'
        assert extract_json_text(text) == '{"rolls": [{"rollNumber": 1}]}'

    @pytest.mark.parametrize("text", ["", "I could not find a product.", "} backwards {"])
    def test_no_object(self, text):
        with pytest.raises(NoJsonFoundError, match="No JSON object found"):
            extract_json_text(text)


class TestParseJsonObject:
    def test_valid(self):
        assert parse_json_object('{"price": 9.5}') == {"price": 9.5}

    def test_malformed_keeps_parser_message(self):
        with pytest.raises(MalformedJsonError) as exc_info:
            parse_json_object('{"price": 9.5,}')

        assert str(exc_info.value).startswith("Failed to parse JSON response:")
        assert exc_info.value.parser_message


class TestNormalizeRoll:
    def test_defaults_for_empty_entry(self):
        assert normalize_roll({}, 2) == {
            "rollNumber": 3, "onHand": 0, "maxArea": 0, "image": None,
            "printName": None, "hasReverseSide": False, "pairedRollNumber": None,
        }

    def test_non_dict_entry(self):
        assert normalize_roll("roll", 0)["rollNumber"] == 1

    def test_max_area_follows_on_hand(self):
        roll = normalize_roll({"rollNumber": 1, "onHand": 22}, 0)
        assert roll["maxArea"] == 22

    def test_mistyped_values_replaced(self):
        roll = normalize_roll({
            "rollNumber": "1", "onHand": "22", "maxArea": True,
            "printName": "", "hasReverseSide": "yes", "pairedRollNumber": "2",
        }, 4)
        assert roll == {
            "rollNumber": 5, "onHand": 0, "maxArea": 0, "image": None,
            "printName": None, "hasReverseSide": False, "pairedRollNumber": None,
        }

    def test_well_formed_roll_kept(self):
        roll = {"rollNumber": 2, "onHand": 20, "maxArea": 25, "image": "a.jpg",
                "printName": "Dots", "hasReverseSide": True, "pairedRollNumber": 1}
        assert normalize_roll(roll, 0) == roll


class TestNormalizeProductData:
    def test_backfills_asin_and_builds_url(self):
        data = normalize_product_data({"asin": None, "url": None}, fallback_asin="B08XYZ1234")
        assert data["asin"] == "B08XYZ1234"
        assert data["url"] == "https://www.amazon.com/dp/B08XYZ1234"

    def test_fallback_url_preferred(self):
        data = normalize_product_data({}, "B08XYZ1234", "https://www.amazon.com/gp/product/B08XYZ1234")
        assert data["url"] == "https://www.amazon.com/gp/product/B08XYZ1234"

    def test_model_values_win_over_fallbacks(self):
        data = normalize_product_data(
            {"asin": "B000000001", "url": "https://www.amazon.com/dp/B000000001"},
            fallback_asin="B08XYZ1234",
            fallback_url="https://www.amazon.com/dp/B08XYZ1234",
        )
        assert data["asin"] == "B000000001"
        assert data["url"] == "https://www.amazon.com/dp/B000000001"

    def test_no_url_from_invalid_asin(self):
        data = normalize_product_data({"asin": "abc"})
        assert data["url"] is None

    @pytest.mark.parametrize("asin", [1234567890, ["B08XYZ1234"], {"value": "B08XYZ1234"}])
    def test_non_string_asin_passed_through_without_url(self, asin):
        data = normalize_product_data({"asin": asin})
        assert data["asin"] == asin
        assert data["url"] is None

    @pytest.mark.parametrize("images", [None, "a.jpg", {"main": "a.jpg"}])
    def test_images_always_list(self, images):
        assert normalize_product_data({"images": images})["images"] == []

    def test_empty_strings_become_none(self):
        data = normalize_product_data({"title": "", "brand": "Hallmark"})
        assert data["title"] is None
        assert data["brand"] == "Hallmark"

    def test_every_key_present(self):
        data = normalize_product_data({})
        assert set(data) == {
            "asin", "type", "title", "price", "brand", "description", "size", "quantity",
            "dimensions", "rollLength", "rollWidth", "printNames", "rolls", "thumbnail",
            "images", "url",
        }

    @pytest.mark.parametrize("payload,expected", [
        ({"printNames": ["Dots"]}, ["Dots"]),
        ({"printNames": None}, None),
        ({}, []),
        ({"printNames": "Dots"}, []),
    ])
    def test_print_names_three_states(self, payload, expected):
        assert normalize_product_data(payload)["printNames"] == expected

    def test_rolls_null_stays_null(self):
        assert normalize_product_data({"rolls": None})["rolls"] is None

    def test_rolls_coerced(self):
        data = normalize_product_data({"rolls": [{"onHand": 22}, None]})
        assert [r["rollNumber"] for r in data["rolls"]] == [1, 2]
        assert data["rolls"][0]["maxArea"] == 22


class TestResolveResponse:
    def test_well_formed_answer(self, wrapping_paper_completion, wrapping_paper_data):
        record = resolve_response(wrapping_paper_completion)

        assert isinstance(record, ProductRecord)
        assert record.to_dict() == wrapping_paper_data
        assert record.rolls[0] == Roll(
            roll_number=1, on_hand=22, max_area=22, print_name="Bold plaid", has_reverse_side=True,
        )

    def test_fenced_answer(self, wrapping_paper_completion):
        record = resolve_response(f"```json\n{wrapping_paper_completion}\n```")
        assert record.asin == "B08XYZ1234"

    def test_asin_backfilled(self):
        record = resolve_response('{"title": "Gift Bow", "type": "bow"}', fallback_asin="B08XYZ1234")
        assert record.asin == "B08XYZ1234"
        assert record.url == "https://www.amazon.com/dp/B08XYZ1234"

    def test_resolving_is_idempotent(self, wrapping_paper_completion):
        first = resolve_response(wrapping_paper_completion, "B08XYZ1234")
        second = resolve_response(json.dumps(first.to_dict()), "B08XYZ1234")
        assert second == first

    def test_partial_answer_resolved(self):
        record = resolve_response('{"asin": "B08XYZ1234", "title": "Ribbon"}')
        assert record.title == "Ribbon"
        assert record.price is None
        assert record.print_names == []
        assert record.rolls == []

    def test_no_json(self):
        with pytest.raises(NoJsonFoundError):
            resolve_response("Sorry, I can't help with that.")

    def test_malformed_json(self):
        with pytest.raises(MalformedJsonError):
            resolve_response('{"title": "Ribbon",, }')

    def test_empty_answer_on_block_page(self, block_page_html):
        with pytest.raises(BlockedError, match="Amazon blocked the request"):
            resolve_response('{"asin": "B08XYZ1234", "title": null}', html=block_page_html)

    def test_empty_answer_on_ordinary_page(self, caplog):
        record = resolve_response('{"asin": "B08XYZ1234", "title": null}', html="<html>Sold out</html>")

        assert record.has_core_fields() is False
        assert "No product data extracted" in caplog.text
    @pytest.mark.parametrize("asin", ["1234567890", '["B08XYZ1234"]'])
    def test_non_string_asin_resolved(self, asin):
        record = resolve_response(f'{{"asin": {asin}, "title": "Bow"}}')
        assert record.title == "Bow"
        assert record.url is None

    def test_core_fields_bypass_block_check(self, block_page_html):
        record = resolve_response('{"brand": "Hallmark"}', html=block_page_html)
        assert record.brand == "Hallmark"
