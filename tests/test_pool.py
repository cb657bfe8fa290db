"""Tests for WordPool."""

import random

import pytest
from wordrush.errors import EmptyPoolError, TrainerError
from wordrush.pool import WordPool


class TestWordPoolConstruction:
    """Tests for building a pool."""

    def test_empty_list_rejected(self):
        """An empty word list cannot start a session."""
        with pytest.raises(EmptyPoolError):
            WordPool([])

    def test_empty_generator_rejected(self):
        with pytest.raises(EmptyPoolError):
            WordPool(w for w in [])

    def test_empty_pool_error_is_value_error(self):
        """Callers catching ValueError also catch pool errors."""
        with pytest.raises(ValueError):
            WordPool([])
        assert issubclass(EmptyPoolError, TrainerError)

    def test_keeps_order_and_duplicates(self):
        pool = WordPool(["b", "a", "b"])
        assert pool.words == ("b", "a", "b")
        assert len(pool) == 3

    def test_input_list_copied(self):
        """Mutating the source list does not change the pool."""
        words = ["cat", "dog"]
        pool = WordPool(words)
        words.append("bird")
        assert pool.words == ("cat", "dog")

    def test_repr(self):
        assert "2 words" in repr(WordPool(["a", "b"]))


class TestWordPoolSample:
    """Tests for sample()."""

    def test_sample_from_pool(self, animal_pool):
        for _ in range(50):
            assert animal_pool.sample() in {"cat", "dog", "bird"}

    def test_single_word(self):
        pool = WordPool(["only"])
        assert {pool.sample() for _ in range(10)} == {"only"}

    def test_seeded_reproducible(self):
        """Same seed gives the same sequence."""
        words = ["a", "b", "c", "d", "e"]
        p1 = WordPool(words, rng=random.Random(7))
        p2 = WordPool(words, rng=random.Random(7))
        assert [p1.sample() for _ in range(20)] == [p2.sample() for _ in range(20)]

    def test_sampling_with_replacement(self):
        """Every word can be drawn more than once."""
        pool = WordPool(["x", "y"], rng=random.Random(3))
        drawn = [pool.sample() for _ in range(100)]
        assert drawn.count("x") > 1
        assert drawn.count("y") > 1
