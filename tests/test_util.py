"""Tests for shared helpers."""

from election.util import has_duplicates


class TestHasDuplicates:
    def test_empty(self):
        assert not has_duplicates([])

    def test_distinct(self):
        assert not has_duplicates([1, 2, 3])

    def test_duplicate(self):
        assert has_duplicates([1, 2, 1])

    def test_generator(self):
        assert has_duplicates(x % 3 for x in range(4))

    def test_key(self):
        words = ["apple", "avocado", "banana"]
        assert has_duplicates(words, key=lambda w: w[0])
        assert not has_duplicates(words, key=len)
