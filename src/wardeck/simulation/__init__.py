"""War simulation: hands, deck generation, rank comparison and the round engine."""

from wardeck.simulation.queue import (
    AllocationError,
    BoundedCircularQueue,
    QueueError,
    QueueFull,
)
from wardeck.simulation.cards import CardOrder, card_rank, compare_cards
from wardeck.simulation.deck import DECK_SIZE, deal, generate_deck, random_permutation, uniform_draw
from wardeck.simulation.war import (
    GameConfig,
    GameMode,
    GameResult,
    GameState,
    Outcome,
    SimulationStalled,
    WarGame,
    WarOutcome,
    WarRules,
    play_war_game,
)
from wardeck.simulation.report import format_result, summary_fields

__all__ = [
    "AllocationError",
    "BoundedCircularQueue",
    "QueueError",
    "QueueFull",
    "CardOrder",
    "card_rank",
    "compare_cards",
    "DECK_SIZE",
    "deal",
    "generate_deck",
    "random_permutation",
    "uniform_draw",
    "GameConfig",
    "GameMode",
    "GameResult",
    "GameState",
    "Outcome",
    "SimulationStalled",
    "WarGame",
    "WarOutcome",
    "WarRules",
    "play_war_game",
    "format_result",
    "summary_fields",
]
