"""Unit tests for word embeddings."""

import math

import pytest

from fuzzy_lexicon.core.embedding import DIMENSIONS, WordEmbedding, embed


class TestWordEmbedding:
    """Test cases for WordEmbedding."""

    def test_dimensions(self):
        """Test every embedding has the fixed dimensionality."""
        for word in ["a", "hello", "dictionary", "", "123"]:
            assert len(embed(word).coords) == DIMENSIONS

    def test_known_coordinates(self):
        """Test the coordinates of a hand-computed word."""
        coords = embed("hello").coords

        assert coords[0] == pytest.approx(0.25)
        assert coords[1] == pytest.approx(0.4)
        assert coords[2] == pytest.approx(0.4)
        assert coords[3] == pytest.approx(0.6)
        assert coords[4] == pytest.approx(8 / 26)

    def test_deterministic(self):
        """Test embedding the same word twice gives the same point."""
        assert embed("spelling") == embed("spelling")
        assert WordEmbedding.from_word("spelling").coords == embed("spelling").coords

    def test_case_insensitive(self):
        """Test letters are lowercased before counting."""
        assert embed("HeLLo").coords == embed("hello").coords

    def test_words_without_letters_map_to_origin(self):
        """Test empty and non-alphabetic words."""
        assert embed("").coords == (0.0,) * DIMENSIONS
        assert embed("123").coords == (0.0,) * DIMENSIONS
        assert embed("--").coords == (0.0,) * DIMENSIONS

    def test_first_letter_skips_non_letters(self):
        """Test the first-letter coordinate uses the first alphabetic character."""
        assert embed("1zebra").coords[4] == pytest.approx(26 / 26)
        assert embed("'apple").coords[4] == pytest.approx(1 / 26)

    def test_length_capped(self):
        """Test the length coordinate saturates at 1.0."""
        assert embed("a" * 20).coords[0] == pytest.approx(1.0)
        assert embed("a" * 45).coords[0] == pytest.approx(1.0)

    def test_coordinate_ranges(self, vocabulary):
        """Test coordinates stay inside their documented ranges."""
        for word in vocabulary:
            length, vowels, common, halves, first = embed(word).coords
            assert 0.0 < length <= 1.0
            assert 0.0 <= vowels <= 1.0
            assert 0.0 <= common <= 1.0
            assert -1.0 <= halves <= 1.0
            assert 0.0 < first <= 1.0

    def test_anagram_like_collision(self):
        """Test words with the same letter statistics share a point."""
        assert embed("hello").coords == embed("hallo").coords
        assert embed("hello").distance(embed("hallo")) == 0.0

    def test_distance(self):
        """Test Euclidean distance against a manual computation."""
        a, b = embed("cat"), embed("dictionary")
        expected = math.sqrt(sum((x - y) ** 2 for x, y in zip(a.coords, b.coords)))

        assert a.distance(b) == pytest.approx(expected)
        assert a.squared_distance(b) == pytest.approx(expected ** 2)
        assert a.distance(b) == pytest.approx(b.distance(a))
