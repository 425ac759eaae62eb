"""Tests for string similarity."""

from fluent_text.similar import similarity


class TestSimilarity:
    def test_identical(self):
        assert similarity("hello", "hello") == 1

    def test_ignores_case(self):
        assert similarity("Hello", "hELLO") == 1

    def test_disjoint(self):
        assert similarity("abc", "xyz") == 0

    def test_partial(self):
        assert 0 < similarity("hello", "help") < 1
