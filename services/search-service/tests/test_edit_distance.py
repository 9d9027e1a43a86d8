"""
Tests for Levenshtein edit distance.

Tests cover:
- Known distances
- Empty strings
- Metric properties (identity, symmetry, triangle inequality)
- Agreement with rapidfuzz on a sample of word pairs
"""

import itertools

import pytest
from rapidfuzz.distance import Levenshtein

from app.search.edit_distance import levenshtein_distance

WORDS = [
    "",
    "a",
    "ab",
    "abc",
    "math",
    "maths",
    "mathematics",
    "chemistry",
    "chemisty",
    "kitten",
    "sitting",
    "flaw",
    "lawn",
    "Biology",
    "biology",
]


class TestKnownDistances:
    """Test distances with known answers."""

    def test_kitten_sitting(self):
        """Test the classic kitten/sitting example."""
        assert levenshtein_distance("kitten", "sitting") == 3

    def test_single_substitution(self):
        """Test one substituted character."""
        assert levenshtein_distance("math", "moth") == 1

    def test_single_insertion(self):
        """Test one inserted character."""
        assert levenshtein_distance("math", "maths") == 1

    def test_single_deletion(self):
        """Test one deleted character."""
        assert levenshtein_distance("chemistry", "chemisty") == 1

    def test_flaw_lawn(self):
        """Test deletion plus insertion."""
        assert levenshtein_distance("flaw", "lawn") == 2

    def test_completely_different(self):
        """Test strings sharing no characters."""
        assert levenshtein_distance("abc", "xyz") == 3

    def test_case_sensitive(self):
        """Test characters are compared exactly, without case folding."""
        assert levenshtein_distance("Biology", "biology") == 1
        assert levenshtein_distance("ABC", "abc") == 3


class TestEmptyStrings:
    """Test empty string handling."""

    def test_both_empty(self):
        """Test two empty strings."""
        assert levenshtein_distance("", "") == 0

    @pytest.mark.parametrize("value", ["a", "math", "senior 1"])
    def test_empty_against_string(self, value):
        """Test distance from empty string equals length."""
        assert levenshtein_distance("", value) == len(value)
        assert levenshtein_distance(value, "") == len(value)


class TestMetricProperties:
    """Test edit distance behaves as a metric."""

    @pytest.mark.parametrize("value", WORDS)
    def test_identity(self, value):
        """Test distance to self is zero."""
        assert levenshtein_distance(value, value) == 0

    def test_symmetry(self):
        """Test distance(a, b) == distance(b, a)."""
        for a, b in itertools.combinations(WORDS, 2):
            assert levenshtein_distance(a, b) == levenshtein_distance(b, a)

    def test_triangle_inequality(self):
        """Test distance(a, c) <= distance(a, b) + distance(b, c)."""
        for a, b, c in itertools.permutations(WORDS[:10], 3):
            assert levenshtein_distance(a, c) <= (
                levenshtein_distance(a, b) + levenshtein_distance(b, c)
            )

    def test_bounded_by_longer_length(self):
        """Test distance never exceeds the longer string length."""
        for a, b in itertools.combinations(WORDS, 2):
            assert levenshtein_distance(a, b) <= max(len(a), len(b))


class TestAgainstRapidfuzz:
    """Test results agree with rapidfuzz's Levenshtein implementation."""

    def test_matches_rapidfuzz(self):
        """Test every word pair gives the same distance as rapidfuzz."""
        for a, b in itertools.product(WORDS, repeat=2):
            assert levenshtein_distance(a, b) == Levenshtein.distance(a, b)
