"""Tests for amazon_parser/extraction/designs.py"""

import pytest

from amazon_parser.extraction.designs import (
    find_design_count,
    find_design_list,
    is_reversible,
    segment_print_names,
)

SIX_DESIGNS = (
    "SIX CUTE DESIGNS: Bundle of reversible holiday wrapping paper features 6 adorable designs: "
    "Skiing Santa, zebras and penguins / Snowflakes and trees on red, "
    "'Joy to you, Fa la la, Ho ho ho' on blue / Rainbow stripes, Snowmen and puppies/ Green trees"
)


class TestIsReversible:
    @pytest.mark.parametrize("text", [
        "Reversible wrapping paper",
        "printed on BOTH SIDES",
    ])
    def test_detects_reversible_wording(self, text):
        assert is_reversible(text) is True

    def test_plain_text(self):
        assert is_reversible("Classic kraft paper") is False

    def test_empty(self):
        assert is_reversible(None) is False


class TestFindDesignCount:
    @pytest.mark.parametrize("text,expected", [
        ("SIX CUTE DESIGNS: bundle", 6),
        ("features 6 adorable designs", 6),
        ("Includes 3 prints", 3),
        ("twelve holiday patterns", 12),
    ])
    def test_counts(self, text, expected):
        assert find_design_count(text) == expected

    def test_no_count(self):
        assert find_design_count("Pack of 4 rolls") is None


class TestFindDesignList:
    def test_takes_text_after_last_label(self):
        assert find_design_list(SIX_DESIGNS).startswith("Skiing Santa, zebras and penguins /")

    def test_no_label(self):
        assert find_design_list("Just some paper") is None


class TestSegmentPrintNames:
    def test_reversible_segment_kept_whole(self):
        names = segment_print_names(
            "Skiing Santa, zebras and penguins /",
            description="Bundle of reversible holiday wrapping paper",
        )
        assert names == ["Skiing Santa, zebras and penguins"]

    def test_both_sides_counts_as_reversible(self):
        names = segment_print_names("Red dots, green dots / Stars", description="Printed on both sides")
        assert names == ["Red dots, green dots", "Stars"]

    def test_plain_commas_split(self):
        assert segment_print_names("Bold plaid, stripes, dots") == ["Bold plaid", "Stripes", "Dots"]

    def test_slashes_split_first(self):
        names = segment_print_names("Candy canes / Holly, ivy / Gold stars", description="")
        assert names == ["Candy canes", "Holly", "Ivy", "Gold stars"]

    def test_quoted_text_not_split(self):
        names = segment_print_names("Bold plaid, 'Merry Everything' lettering", description="")
        assert names == ["Bold plaid", "Merry Everything lettering"]

    def test_quoted_commas_and_slashes_preserved(self):
        names = segment_print_names('"Peace/Love, Joy" on white, Pine cones', description="")
        assert names == ["Peace/Love, Joy on white", "Pine cones"]

    def test_apostrophes_are_not_quotes(self):
        names = segment_print_names("Santa's sleigh, Rudolph's nose", description="")
        assert names == ["Santa's sleigh", "Rudolph's nose"]

    def test_on_phrase_kept_together(self):
        names = segment_print_names("Snowflakes and trees, on red / Stripes", description="")
        assert names == ["Snowflakes and trees on red", "Stripes"]

    def test_stated_count_refines_reversible_segments(self):
        names = segment_print_names(find_design_list(SIX_DESIGNS), description=SIX_DESIGNS)
        assert names == [
            "Skiing Santa, zebras and penguins",
            "Snowflakes and trees on red",
            "Joy to you, Fa la la, Ho ho ho on blue",
            "Rainbow stripes",
            "Snowmen and puppies",
            "Green trees",
        ]

    def test_explicit_count_overrides_description(self):
        names = segment_print_names(
            "Rainbow stripes, Snowmen and puppies",
            description="reversible paper",
            expected_count=1,
        )
        assert names == ["Rainbow stripes, Snowmen and puppies"]

    def test_count_mismatch_logged(self, caplog):
        segment_print_names("Plaid, dots", description="3 designs")
        assert "states 3 designs" in caplog.text

    def test_trailing_conjunction_removed(self):
        assert segment_print_names("Stripes, and dots.") == ["Stripes", "Dots"]

    @pytest.mark.parametrize("text", [None, "", "   ", " / / "])
    def test_nothing_stated(self, text):
        assert segment_print_names(text) == []
