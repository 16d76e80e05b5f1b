"""CLI command for running a single War simulation."""

from __future__ import annotations

import logging
import sys

import click

from wardeck.simulation.report import format_result
from wardeck.simulation.war import (
    GameConfig,
    GameMode,
    SimulationStalled,
    WarGame,
    WarRules,
)

logger = logging.getLogger(__name__)

MODE_NAMES = {
    "0": GameMode.STANDARD,
    "1": GameMode.SIMPLE,
    "standard": GameMode.STANDARD,
    "simple": GameMode.SIMPLE,
}


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration.

    Logs go to stderr so the result line on stdout stays machine-readable.

    Args:
        verbose: Enable verbose (DEBUG) logging
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


@click.command()
@click.option("--seed", type=int, prompt="seed", help="Deck shuffle seed")
@click.option(
    "--mode",
    type=click.Choice(sorted(MODE_NAMES), case_sensitive=False),
    prompt="mode",
    help="0/standard: ties start a war, 1/simple: ties rotate both cards",
)
@click.option(
    "--max-conflicts",
    type=click.IntRange(min=0),
    prompt="max conflicts",
    help="Conflict budget before the game is stopped",
)
@click.option("--start-depth", type=click.IntRange(min=0), default=0, help="First hand position compared in a war")
@click.option(
    "--recycle-winner/--no-recycle-winner",
    default=True,
    help="Move the war winner's own cards to the back of their hand",
)
@click.option("--max-ticks", type=click.IntRange(min=1), default=None, help="Abort if no outcome after N ticks")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    seed: int,
    mode: str,
    max_conflicts: int,
    start_depth: int,
    recycle_winner: bool,
    max_ticks: int | None,
    verbose: bool,
):
    """Simulate a two-player game of War and print the outcome line.

    The line starts with the outcome code (0 max conflicts, 1 no resolution,
    2 player A wins, 3 player B wins) followed by its summary values.
    """
    setup_logging(verbose)

    config = GameConfig(
        seed=seed,
        mode=MODE_NAMES[mode.lower()],
        max_conflicts=max_conflicts,
        rules=WarRules(start_depth=start_depth, recycle_winner_cards=recycle_winner),
    )
    logger.debug(f"Running with {config}")
    game = WarGame(config)

    try:
        result = game.run(max_ticks=max_ticks)
    except SimulationStalled as e:
        click.echo(f"Simulation stalled: {e}", err=True)
        sys.exit(1)

    click.echo(format_result(result))


if __name__ == "__main__":
    main()
