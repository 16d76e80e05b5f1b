"""Tests for seeded deck generation."""

import random

import pytest
from wardeck.simulation.deck import (
    DECK_SIZE,
    RAND_MAX,
    deal,
    generate_deck,
    random_permutation,
    uniform_draw,
)


class ExplodingRandom(random.Random):
    """Generator that fails the test if a raw draw is requested."""

    def getrandbits(self, k: int) -> int:  # type: ignore[override]
        raise AssertionError("generator should not be called")


def test_uniform_draw_degenerate_range_skips_generator() -> None:
    """Test a single-value range returns it without drawing."""
    rng = ExplodingRandom(0)
    assert uniform_draw(rng, 5, 5) == 5
    assert uniform_draw(rng, -3, -3) == -3


def test_uniform_draw_stays_in_range() -> None:
    """Test draws fall inside [a, b]."""
    rng = random.Random(7)
    values = {uniform_draw(rng, 10, 13) for _ in range(500)}
    assert values <= {10, 11, 12, 13}
    assert len(values) == 4


def test_uniform_draw_rejects_empty_range() -> None:
    """Test a > b is rejected."""
    with pytest.raises(ValueError):
        uniform_draw(random.Random(0), 3, 2)


def test_uniform_draw_rejects_oversized_range() -> None:
    """Test a span wider than the raw generator is rejected."""
    with pytest.raises(ValueError):
        uniform_draw(random.Random(0), 0, RAND_MAX + 1)


def test_random_permutation_single_element() -> None:
    """Test a one-element permutation needs no draws."""
    assert random_permutation(ExplodingRandom(0), 1) == [0]


def test_random_permutation_rejects_empty() -> None:
    """Test n < 1 is rejected."""
    with pytest.raises(ValueError):
        random_permutation(random.Random(0), 0)


def test_generate_deck_is_permutation() -> None:
    """Test the deck holds each of 0..51 exactly once."""
    deck = generate_deck(1)
    assert len(deck) == DECK_SIZE
    assert sorted(deck) == list(range(DECK_SIZE))


def test_generate_deck_deterministic() -> None:
    """Test the same seed produces the same deck."""
    assert generate_deck(1234) == generate_deck(1234)


def test_generate_deck_differs_by_seed() -> None:
    """Test different seeds shuffle differently."""
    assert generate_deck(1) != generate_deck(2)


def test_deal_splits_in_order() -> None:
    """Test the first half goes to player A, the second to player B."""
    pile_a, pile_b = deal(list(range(10)))
    assert pile_a == [0, 1, 2, 3, 4]
    assert pile_b == [5, 6, 7, 8, 9]


def test_deal_generated_deck() -> None:
    """Test dealing a full deck gives 26 cards each."""
    deck = generate_deck(99)
    pile_a, pile_b = deal(deck)
    assert len(pile_a) == 26
    assert len(pile_b) == 26
    assert pile_a + pile_b == deck
