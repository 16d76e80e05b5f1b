"""Machine-readable result lines."""

from __future__ import annotations

from typing import List

from wardeck.simulation.cards import format_card
from wardeck.simulation.war import GameResult, Outcome


def summary_fields(result: GameResult) -> List[int]:
    """Return the outcome-specific summary values.

    - MAX_CONFLICTS / NO_RESOLUTION: both hand sizes
    - PLAYER_A_WINS: the conflict count
    - PLAYER_B_WINS: player B's hand, front to back
    """
    if result.outcome in (Outcome.MAX_CONFLICTS, Outcome.NO_RESOLUTION):
        return [result.hand_a_size, result.hand_b_size]
    if result.outcome is Outcome.PLAYER_A_WINS:
        return [result.conflicts]
    return list(result.hand_b)


def format_result(result: GameResult) -> str:
    """Render ``"<outcome code> <summary...>"``."""
    if result.outcome is Outcome.PLAYER_B_WINS:
        fields = [format_card(card) for card in result.hand_b]
    else:
        fields = [str(value) for value in summary_fields(result)]
    return " ".join([str(result.outcome.value), *fields])
