"""Integer card encoding and rank comparison."""

from __future__ import annotations

from enum import Enum

# Every 4 consecutive values share a rank; the low two bits are the suit.
RANK_MASK = 0xFC


class CardOrder(Enum):
    """Result of comparing two cards by rank."""

    EQ = 0
    A_GREATER = 1
    B_GREATER = -1


def card_rank(card: int) -> int:
    """Return the comparable rank of a card."""
    return card & RANK_MASK


def compare_cards(card_a: int, card_b: int) -> CardOrder:
    """Order two cards by rank, ignoring the suit bits."""
    rank_a = card_rank(card_a)
    rank_b = card_rank(card_b)

    if rank_a == rank_b:
        return CardOrder.EQ
    return CardOrder.A_GREATER if rank_a > rank_b else CardOrder.B_GREATER


def format_card(card: int) -> str:
    return str(card)
