"""
Tests for order-preserving deduplication.

These tests verify:
    - First occurrence wins, original order kept
    - Delimited, character and element variants
    - Unhashable elements fall back to equality checks
"""

import random

from sequtils.dedup import (
    unique_in_order,
    deduplicate_delimited,
    deduplicate_characters,
    deduplicate_elements,
)


class TestDeduplicateDelimited:
    """Test deduplicate_delimited()."""

    def test_comma_numbers(self):
        assert deduplicate_delimited("1,5,6,4,5", ",") == "1,5,6,4"

    def test_default_delimiter(self):
        assert deduplicate_delimited("kailash,shaw,shaw") == "kailash,shaw"

    def test_not_sorted(self):
        """Dedup must not reorder tokens."""
        assert deduplicate_delimited("9,1,9,3,1") == "9,1,3"

    def test_whitespace_is_significant(self):
        """' shaw' and 'shaw' are distinct tokens."""
        assert deduplicate_delimited("shaw, shaw,shaw") == "shaw, shaw"

    def test_empty_tokens_collapse(self):
        assert deduplicate_delimited("a,,b,,") == "a,,b"

    def test_empty_text(self):
        assert deduplicate_delimited("") == ""

    def test_custom_delimiter(self):
        assert deduplicate_delimited("x;y;x;z", ";") == "x;y;z"

    def test_property_no_repeats_in_first_occurrence_order(self):
        rng = random.Random(42)
        for _ in range(25):
            tokens = [rng.choice("abcde") for _ in range(rng.randint(1, 12))]
            text = ",".join(tokens)
            out = deduplicate_delimited(text).split(",")
            assert len(out) == len(set(out))
            assert all(t in tokens for t in out)
            assert out == sorted(set(tokens), key=tokens.index)


class TestDeduplicateCharacters:
    """Test deduplicate_characters()."""

    def test_hello(self):
        assert deduplicate_characters("hello") == "helo"

    def test_empty_and_single(self):
        assert deduplicate_characters("") == ""
        assert deduplicate_characters("a") == "a"

    def test_case_sensitive(self):
        assert deduplicate_characters("aAaA") == "aA"


class TestDeduplicateElements:
    """Test deduplicate_elements()."""

    def test_strings(self):
        assert deduplicate_elements(["kailash", "shaw", "kailash"]) == ["kailash", "shaw"]

    def test_numbers(self):
        assert deduplicate_elements([5, 9, 8, 7, 5, 8, 9, 7]) == [5, 9, 8, 7]

    def test_empty(self):
        assert deduplicate_elements([]) == []

    def test_property_first_occurrence_order(self):
        rng = random.Random(2024)
        for _ in range(25):
            data = [rng.randint(0, 6) for _ in range(rng.randint(0, 15))]
            out = deduplicate_elements(data)
            assert len(out) == len(set(out))
            assert set(out) == set(data)
            assert out == sorted(set(data), key=data.index)

    def test_does_not_mutate_input(self):
        data = [1, 1, 2]
        result = deduplicate_elements(data)
        assert data == [1, 1, 2]
        assert result is not data


class TestUniqueInOrder:
    """Test the shared unique_in_order() scan."""

    def test_unhashable_elements(self):
        """Lists are compared by equality instead of hashing."""
        assert unique_in_order([[1], [2], [1]]) == [[1], [2]]

    def test_mixed_hashable_and_unhashable(self):
        assert unique_in_order([1, [1], 1, [1], "a"]) == [1, [1], "a"]

    def test_set_and_equal_frozenset(self):
        """A frozenset equal to an earlier set is a repeat."""
        assert unique_in_order([{1}, frozenset({1})]) == [{1}]
        assert deduplicate_elements([{1}, frozenset({1})]) == [{1}]

    def test_frozenset_then_equal_set(self):
        result = unique_in_order([frozenset({1}), {1}, frozenset({2})])
        assert result == [frozenset({1}), frozenset({2})]

    def test_accepts_iterators(self):
        assert unique_in_order(iter("abcabc")) == ["a", "b", "c"]
