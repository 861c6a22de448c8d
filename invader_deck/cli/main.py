"""Typer entry-point wiring for the Invader deck CLI."""

from __future__ import annotations

import logging
from typing import Sequence

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..cards import MAX_LEVEL, MIN_LEVEL, Card, Nation, NationConfig
from ..engine import InvaderEngine
from ..state import TableSnapshot, dealt_card_count
from .render import format_card, render_table
from .textual import run_textual_app

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _configure_logging(level: str) -> None:
    name = level.upper()
    if name not in LOG_LEVELS:
        raise typer.BadParameter(f"log level must be one of {', '.join(LOG_LEVELS)}")
    logging.basicConfig(
        level=name,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _make_config(nation: Nation, level: int) -> NationConfig:
    try:
        return NationConfig(nation=nation, level=level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _pile_lines(cards: Sequence[Card]) -> str:
    """Return ``cards`` top first, one per line."""

    if not cards:
        return "[dim]empty[/dim]"
    return "\n".join(f"{idx:>2}. {format_card(card)}" for idx, card in enumerate(reversed(cards), start=1))


def _deal_table(snapshot: TableSnapshot) -> Table:
    """Return a table listing the freshly dealt piles."""

    table = Table(title=f"{snapshot.config.label()} Invader Deck", box=box.SIMPLE_HEAVY)
    table.add_column("Explore (top first)", justify="left")
    table.add_column("Discard", justify="left")
    if snapshot.russia_visible:
        table.add_column("Russia", justify="left")

    row = [_pile_lines(snapshot.explore), _pile_lines(snapshot.discard)]
    if snapshot.russia_visible:
        row.append(_pile_lines(snapshot.russia_hidden))
    table.add_row(*row)
    return table


def _sizes_table(nations: Sequence[Nation]) -> Table:
    """Return the number of dealt cards for every nation and level."""

    table = Table(title="Dealt Cards", box=box.SIMPLE_HEAVY)
    table.add_column("Adversary", justify="left")
    for level in range(MIN_LEVEL, MAX_LEVEL + 1):
        table.add_column(f"L{level}", justify="right")

    for nation in nations:
        counts = [
            str(dealt_card_count(NationConfig(nation=nation, level=level)))
            for level in range(MIN_LEVEL, MAX_LEVEL + 1)
        ]
        table.add_row(nation.value, *counts)
    return table


@app.callback()
def main_callback(
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging verbosity for the engine."),
) -> None:
    """Track the Invader deck of a Spirit Island game."""

    _configure_logging(log_level)


@app.command()
def deal(
    nation: Nation = typer.Option(Nation.NONE, case_sensitive=False, help="Adversary that shapes the deck."),
    level: int = typer.Option(1, help="Adversary level (1-6)."),
    seed: int | None = typer.Option(None, help="Random seed for a reproducible deck (omit for randomness)."),
) -> None:
    """Build a deck and print the dealt piles."""

    engine = InvaderEngine(_make_config(nation, level), seed=seed)
    console.print(_deal_table(engine.snapshot()))


@app.command()
def sizes() -> None:
    """Show how many cards every adversary and level deals."""

    console.print(_sizes_table(list(Nation)))


@app.command()
def play(
    nation: Nation = typer.Option(Nation.NONE, case_sensitive=False, help="Adversary that shapes the deck."),
    level: int = typer.Option(1, help="Adversary level (1-6)."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible games (omit for randomness)."),
) -> None:
    """Open the interactive board."""

    run_textual_app(config=_make_config(nation, level), seed=seed)


@app.command()
def show(
    nation: Nation = typer.Option(Nation.NONE, case_sensitive=False, help="Adversary that shapes the deck."),
    level: int = typer.Option(1, help="Adversary level (1-6)."),
    seed: int | None = typer.Option(None, help="Random seed for a reproducible deck (omit for randomness)."),
    explores: int = typer.Option(0, min=0, help="Explore steps to play before printing the board."),
) -> None:
    """Print the board after ``explores`` full explore steps."""

    engine = InvaderEngine(_make_config(nation, level), seed=seed)
    for _ in range(explores):
        engine.explore()
        engine.explore()
    console.print(render_table(engine.snapshot()))


def main() -> None:
    """Entry-point for ``python -m invader_deck.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
