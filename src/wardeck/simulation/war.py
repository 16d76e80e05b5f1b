"""War card game engine: tick-based round resolution with a recursive war tie-break."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Tuple

from wardeck.simulation.cards import CardOrder, compare_cards
from wardeck.simulation.deck import DECK_SIZE, deal, generate_deck
from wardeck.simulation.queue import BoundedCircularQueue

logger = logging.getLogger(__name__)


class GameMode(Enum):
    """How a tie between front cards is handled."""

    STANDARD = 0  # Tie starts a war
    SIMPLE = 1  # Tie rotates both front cards to the back


class Outcome(Enum):
    """Terminal game outcomes, valued by their machine-readable code."""

    MAX_CONFLICTS = 0
    NO_RESOLUTION = 1
    PLAYER_A_WINS = 2
    PLAYER_B_WINS = 3


class WarOutcome(Enum):
    """Terminal results of the war sub-protocol."""

    MAX_CONFLICTS = "max_conflicts"
    NO_CARDS = "no_cards"
    PLAYER_A = "player_a"
    PLAYER_B = "player_b"


class SimulationStalled(Exception):
    """Game did not reach a terminal outcome within the tick cap."""

    pass


@dataclass(frozen=True)
class WarRules:
    """Policy for resolving a war.

    start_depth is the first hand position compared once the front cards tie;
    each further round looks two cards deeper. With recycle_winner_cards the
    winner's own first ``depth + 2`` cards go to the back of their hand before
    the loser's cards are added; otherwise the winner's cards stay in place.
    """

    start_depth: int = 0
    recycle_winner_cards: bool = True

    def __post_init__(self):
        if self.start_depth < 0:
            raise ValueError(f"start_depth must be >= 0, got {self.start_depth}")


@dataclass
class GameConfig:
    """Configuration for a single simulation run."""

    seed: Optional[int] = None
    mode: GameMode = GameMode.STANDARD
    max_conflicts: int = 1000
    rules: WarRules = field(default_factory=WarRules)

    def __post_init__(self):
        """Generate seed if not provided and normalize the mode."""
        if self.seed is None:
            self.seed = random.randint(0, 2**31 - 1)
        self.mode = GameMode(self.mode)
        if self.max_conflicts < 0:
            raise ValueError(f"max_conflicts must be >= 0, got {self.max_conflicts}")


@dataclass
class GameState:
    """Mutable state of one simulation; both hands are owned here."""

    hand_a: BoundedCircularQueue[int]
    hand_b: BoundedCircularQueue[int]
    seed: int
    max_conflicts: int
    mode: GameMode = GameMode.STANDARD
    conflicts: int = 0

    @classmethod
    def new(cls, config: GameConfig) -> "GameState":
        """Shuffle a deck for the configured seed and deal it to both players."""
        pile_a, pile_b = deal(generate_deck(config.seed, DECK_SIZE))
        return cls.from_cards(
            pile_a,
            pile_b,
            seed=config.seed,
            max_conflicts=config.max_conflicts,
            mode=config.mode,
        )

    @classmethod
    def from_cards(
        cls,
        cards_a: Iterable[int],
        cards_b: Iterable[int],
        max_conflicts: int,
        mode: GameMode = GameMode.STANDARD,
        seed: int = 0,
        capacity: int = DECK_SIZE,
    ) -> "GameState":
        """Build a state from explicit hands, front card first."""
        hand_a: BoundedCircularQueue[int] = BoundedCircularQueue(capacity)
        hand_b: BoundedCircularQueue[int] = BoundedCircularQueue(capacity)
        for card in cards_a:
            hand_a.push(card)
        for card in cards_b:
            hand_b.push(card)
        return cls(
            hand_a=hand_a,
            hand_b=hand_b,
            seed=seed,
            max_conflicts=max_conflicts,
            mode=GameMode(mode),
        )

    def total_cards(self) -> int:
        return self.hand_a.size + self.hand_b.size


@dataclass(frozen=True)
class GameResult:
    """Final outcome and summary counters of a finished simulation."""

    outcome: Outcome
    conflicts: int
    ticks: int
    hand_a_size: int
    hand_b_size: int
    hand_b: Tuple[int, ...]


def _grab_cards(
    source: BoundedCircularQueue[int],
    target: BoundedCircularQueue[int],
    amount: int,
) -> None:
    """Move up to ``amount`` cards from the front of source to the back of target."""
    for _ in range(amount):
        card = source.pop()
        if card is None:
            return
        target.push(card)


class WarGame:
    """Two-player War engine.

    Each call to tick() resolves one conflict (or one war) and returns None
    while the game continues, or the terminal Outcome once it has ended.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        state: Optional[GameState] = None,
    ) -> None:
        """Initialize the engine.

        Args:
            config: Run configuration (default: GameConfig())
            state: Prepared state to play from instead of dealing a fresh deck
        """
        self.config = config or GameConfig()
        self.rules = self.config.rules
        self.state = state if state is not None else GameState.new(self.config)
        self.ticks = 0

    def tick(self) -> Optional[Outcome]:
        """Advance the game by one step."""
        state = self.state

        if state.conflicts >= state.max_conflicts:
            return Outcome.MAX_CONFLICTS
        if state.hand_b.is_empty():
            return Outcome.PLAYER_A_WINS
        if state.hand_a.is_empty():
            return Outcome.PLAYER_B_WINS

        card_a = state.hand_a.front()
        card_b = state.hand_b.front()
        order = compare_cards(card_a, card_b)  # type: ignore[arg-type]
        logger.debug(
            f"Tick {self.ticks}: {card_a} vs {card_b} -> {order.name} "
            f"(conflicts {state.conflicts}/{state.max_conflicts})"
        )

        if order is CardOrder.A_GREATER:
            _grab_cards(state.hand_a, state.hand_a, 1)
            _grab_cards(state.hand_b, state.hand_a, 1)
            state.conflicts += 1
        elif order is CardOrder.B_GREATER:
            _grab_cards(state.hand_b, state.hand_b, 1)
            _grab_cards(state.hand_a, state.hand_b, 1)
            state.conflicts += 1
        elif state.mode is GameMode.STANDARD:
            war_result = self.enter_war()
            if war_result is WarOutcome.MAX_CONFLICTS:
                return Outcome.MAX_CONFLICTS
            if war_result is WarOutcome.NO_CARDS:
                return Outcome.NO_RESOLUTION
        else:
            self._cycle_cards()

        return None

    def war_tick(self, depth: int) -> Optional[WarOutcome]:
        """Play one war round comparing the cards at ``depth`` in both hands."""
        state = self.state

        if depth >= state.hand_a.size or depth >= state.hand_b.size:
            return WarOutcome.NO_CARDS

        card_a = state.hand_a.peek(depth)
        card_b = state.hand_b.peek(depth)

        if state.conflicts > state.max_conflicts:
            return WarOutcome.MAX_CONFLICTS

        state.conflicts += 2
        order = compare_cards(card_a, card_b)  # type: ignore[arg-type]
        logger.debug(f"  War at depth {depth}: {card_a} vs {card_b} -> {order.name}")

        if order is CardOrder.A_GREATER:
            return WarOutcome.PLAYER_A
        if order is CardOrder.B_GREATER:
            return WarOutcome.PLAYER_B
        return None

    def enter_war(self) -> WarOutcome:
        """Resolve a tie by comparing deeper and deeper until a round is decisive.

        The winner collects the first ``depth + 2`` cards of the loser's hand.
        Nothing moves when the war runs out of cards or conflicts.
        """
        depth = self.rules.start_depth
        while True:
            result = self.war_tick(depth)
            if result is not None:
                break
            depth += 2

        state = self.state
        if result is WarOutcome.PLAYER_A:
            self._award_war(state.hand_a, state.hand_b, depth + 2)
        elif result is WarOutcome.PLAYER_B:
            self._award_war(state.hand_b, state.hand_a, depth + 2)
        else:
            logger.debug(f"  War ended without a winner: {result.name}")

        return result

    def _award_war(
        self,
        winner: BoundedCircularQueue[int],
        loser: BoundedCircularQueue[int],
        amount: int,
    ) -> None:
        if self.rules.recycle_winner_cards:
            _grab_cards(winner, winner, amount)
        _grab_cards(loser, winner, amount)

    def _cycle_cards(self) -> None:
        """Rotate each player's front card to the back of their own hand."""
        state = self.state
        _grab_cards(state.hand_a, state.hand_a, 1)
        _grab_cards(state.hand_b, state.hand_b, 1)

    def run(self, max_ticks: Optional[int] = None) -> GameResult:
        """Tick until the game ends.

        Args:
            max_ticks: Optional cap on tick() calls; SIMPLE games on a
                pathological deal can cycle without consuming conflicts

        Raises:
            SimulationStalled: If max_ticks is reached before a terminal outcome.
        """
        state = self.state
        logger.info(
            f"Starting game: seed={state.seed} mode={state.mode.name} "
            f"max_conflicts={state.max_conflicts}"
        )

        while True:
            if max_ticks is not None and self.ticks >= max_ticks:
                raise SimulationStalled(
                    f"No outcome after {self.ticks} ticks "
                    f"({state.conflicts} conflicts, hands {state.hand_a.size}/{state.hand_b.size})"
                )
            self.ticks += 1
            outcome = self.tick()
            if outcome is not None:
                break

        logger.info(f"Game over after {self.ticks} ticks: {outcome.name} ({state.conflicts} conflicts)")
        return self.result(outcome)

    def result(self, outcome: Outcome) -> GameResult:
        state = self.state
        return GameResult(
            outcome=outcome,
            conflicts=state.conflicts,
            ticks=self.ticks,
            hand_a_size=state.hand_a.size,
            hand_b_size=state.hand_b.size,
            hand_b=tuple(state.hand_b),
        )


def play_war_game(
    seed: int,
    mode: GameMode = GameMode.STANDARD,
    max_conflicts: int = 1000,
    rules: Optional[WarRules] = None,
    max_ticks: Optional[int] = None,
) -> GameResult:
    """Play a complete War game and return its result."""
    config = GameConfig(
        seed=seed,
        mode=mode,
        max_conflicts=max_conflicts,
        rules=rules or WarRules(),
    )
    return WarGame(config).run(max_ticks=max_ticks)
