"""Seeded deck generation (Fisher-Yates over a uniform range draw)."""

from __future__ import annotations

import logging
import random
from typing import List, Sequence, Tuple

logger = logging.getLogger(__name__)

DECK_SIZE = 52

# Raw draws are 31-bit, matching a C rand() with RAND_MAX = 2**31 - 1.
RAND_MAX = 2**31 - 1


def raw_draw(rng: random.Random) -> int:
    """Draw one raw value in [0, RAND_MAX]."""
    return rng.getrandbits(31)


def uniform_draw(rng: random.Random, a: int, b: int) -> int:
    """Draw an integer uniformly from [a, b] using modulo reduction.

    Returns ``a`` directly when ``a == b`` without consuming a draw.

    Raises:
        ValueError: If a > b, or the span is wider than RAND_MAX + 1.
    """
    if a > b:
        raise ValueError(f"Empty range [{a}, {b}]")
    if a == b:
        return a

    span = b - a + 1
    if span > RAND_MAX + 1:
        raise ValueError(f"Range [{a}, {b}] is wider than the generator ({RAND_MAX + 1} values)")
    return raw_draw(rng) % span + a


def random_permutation(rng: random.Random, n: int) -> List[int]:
    """Return a uniformly shuffled permutation of 0..n-1."""
    if n < 1:
        raise ValueError(f"Permutation size must be positive, got {n}")

    perm = list(range(n))
    for i in range(n - 1):
        k = uniform_draw(rng, i, n - 1)
        perm[i], perm[k] = perm[k], perm[i]
    return perm


def generate_deck(seed: int, size: int = DECK_SIZE) -> List[int]:
    """Generate the shuffled card pool for a seed.

    Args:
        seed: Generator seed; the same seed always yields the same deck
        size: Number of cards (default: 52)

    Returns:
        A permutation of 0..size-1
    """
    rng = random.Random(seed)
    deck = random_permutation(rng, size)
    logger.debug(f"Generated {size}-card deck for seed {seed}")
    return deck


def deal(deck: Sequence[int]) -> Tuple[List[int], List[int]]:
    """Split a deck at its midpoint into (player A, player B) piles.

    Order is preserved, so the first card of each pile is that player's front card.
    """
    half = len(deck) // 2
    return list(deck[:half]), list(deck[half:half * 2])
