"""Tests for result line formatting."""

from wardeck.simulation.report import format_result, summary_fields
from wardeck.simulation.war import GameResult, Outcome


def make_result(outcome: Outcome, hand_b: tuple[int, ...] = (3, 1, 2)) -> GameResult:
    """Helper to create a finished-game result."""
    return GameResult(
        outcome=outcome,
        conflicts=17,
        ticks=20,
        hand_a_size=49,
        hand_b_size=len(hand_b),
        hand_b=hand_b,
    )


def test_max_conflicts_reports_hand_sizes() -> None:
    result = make_result(Outcome.MAX_CONFLICTS)
    assert summary_fields(result) == [49, 3]
    assert format_result(result) == "0 49 3"


def test_no_resolution_reports_hand_sizes() -> None:
    result = make_result(Outcome.NO_RESOLUTION)
    assert format_result(result) == "1 49 3"


def test_player_a_reports_conflicts() -> None:
    result = make_result(Outcome.PLAYER_A_WINS)
    assert summary_fields(result) == [17]
    assert format_result(result) == "2 17"


def test_player_b_reports_hand() -> None:
    """Test B's win lists B's cards front to back."""
    result = make_result(Outcome.PLAYER_B_WINS, hand_b=(51, 0, 7))
    assert summary_fields(result) == [51, 0, 7]
    assert format_result(result) == "3 51 0 7"
