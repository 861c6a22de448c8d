"""Composable view primitives for the Invader CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from ..cards import Card
from ..state import PileName, TableSnapshot

_PILE_LABELS = {
    PileName.DISCARD: "Discard",
    PileName.IMMIGRATION: "Immigration",
    PileName.RAVAGE: "Ravage",
    PileName.BUILDING: "Build",
    PileName.EXPLORE: "Explore",
    PileName.RUSSIA_HIDDEN: "Russia",
}


def pile_label(name: PileName) -> str:
    return _PILE_LABELS[name]


@dataclass(slots=True)
class TableView:
    """Renderable summarising every pile of the board."""

    snapshot: TableSnapshot
    card_formatter: Callable[[Card], str]
    back_formatter: Callable[[int | None], str]

    def visible_piles(self) -> list[PileName]:
        """Return piles in board order, skipping adversary piles not in play."""

        names = [PileName.DISCARD]
        if self.snapshot.immigration_visible or self.snapshot.immigration:
            names.append(PileName.IMMIGRATION)
        names.extend([PileName.RAVAGE, PileName.BUILDING, PileName.EXPLORE])
        if self.snapshot.russia_visible or self.snapshot.russia_hidden:
            names.append(PileName.RUSSIA_HIDDEN)
        return names

    def _cards_markup(self, cards: Sequence[Card]) -> str:
        if not cards:
            return "—"
        return " ".join(self.card_formatter(card) for card in reversed(cards))

    def _top_markup(self, name: PileName) -> str:
        snapshot = self.snapshot
        if name == PileName.EXPLORE:
            if snapshot.explore_top is not None:
                return self.card_formatter(snapshot.explore_top)
            return self.back_formatter(snapshot.explore_top_generation)
        if name == PileName.RUSSIA_HIDDEN:
            if snapshot.russia_top is not None:
                return self.card_formatter(snapshot.russia_top)
            top = snapshot.russia_hidden[-1].generation if snapshot.russia_hidden else None
            return self.back_formatter(top)
        cards = snapshot.pile(name)
        return self.card_formatter(cards[-1]) if cards else "—"

    def _metadata_panel(self) -> Panel:
        snapshot = self.snapshot
        grid = Table.grid(expand=True)
        grid.add_column(justify="left")
        grid.add_row(f"[cyan]Adversary[/cyan]: {snapshot.config.label()}")
        grid.add_row(f"[cyan]Cards in play[/cyan]: {snapshot.total_cards()}")
        revealed = "face up" if snapshot.explore_revealed else "face down"
        grid.add_row(f"[cyan]Explore top[/cyan]: {revealed}")
        if snapshot.removed:
            grid.add_row(f"[cyan]Removed[/cyan]: {self._cards_markup(snapshot.removed)}")
        return Panel(grid, title="Game", box=box.SQUARE, border_style="blue")

    def render(self) -> RenderableType:
        table = Table(box=box.ROUNDED, expand=True)
        table.add_column("Pile", justify="left", style="bold")
        table.add_column("#", justify="right")
        table.add_column("Top", justify="left")
        table.add_column("Below (top first)", justify="left")

        for name in self.visible_piles():
            cards = self.snapshot.pile(name)
            if name in (PileName.EXPLORE, PileName.RUSSIA_HIDDEN):
                below = f"{max(len(cards) - 1, 0)} hidden"
            else:
                below = self._cards_markup(cards[:-1])
            table.add_row(pile_label(name), str(len(cards)), self._top_markup(name), below)

        return Group(table, self._metadata_panel())
