"""Unit tests for localization.management.similarity module."""

import pytest

from localization.management.similarity import levenshtein_distance, similarity

pytestmark = pytest.mark.unit


class TestLevenshteinDistance:
    def test_classic_pair(self):
        assert levenshtein_distance("kitten", "sitting") == 3

    def test_argument_order_does_not_matter(self):
        assert levenshtein_distance("nav", "nav.home") == levenshtein_distance("nav.home", "nav")

    def test_empty(self):
        assert levenshtein_distance("", "abc") == 3


class TestSimilarity:
    def test_identical_and_empty(self):
        assert similarity("nav.home", "nav.home") == 1.0
        assert similarity("", "") == 1.0

    def test_normalized_by_longer_string(self):
        assert similarity("nav.hom", "nav.home") == pytest.approx(0.875)
        assert similarity("nav", "nav.home") == pytest.approx(0.375)
