"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from rich.console import RenderableType
from rich.panel import Panel

from ..cards import Card, Terrain
from ..state import TableSnapshot
from .views import TableView

_TERRAIN_STYLES = {
    Terrain.SWAMP: "rgb(184,230,228)",
    Terrain.COAST: "rgb(55,100,178)",
    Terrain.MOUNTAIN: "rgb(100,100,100)",
    Terrain.DESERT: "rgb(255,197,81)",
    Terrain.JUNGLE: "rgb(14,81,7)",
}
_SENTINEL_STYLE = "rgb(200,200,200)"
_STAGES = {1: "I", 2: "II", 3: "III"}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    if card.is_sentinel:
        return f"[bold {_SENTINEL_STYLE}]{card.label()}[/bold {_SENTINEL_STYLE}]"
    stage = _STAGES[card.generation]
    lands = []
    for terrain in card.terrains:
        style = _TERRAIN_STYLES[terrain]
        lands.append(f"[{style}]{terrain.value.title()}[/{style}]")
    marker = "[red]*[/red]" if card.is_escalation else ""
    return f"[bold]{stage}[/bold] {'/'.join(lands)}{marker}"


def format_back(generation: int | None) -> str:
    """Return the face-down label showing only the invader stage."""

    if generation is None:
        return "—"
    return f"[on red] {_STAGES.get(generation, '?')} [/on red]"


def render_table(snapshot: TableSnapshot, *, title: str = "Invader Deck") -> RenderableType:
    """Return a Rich panel describing every pile."""

    view = TableView(snapshot=snapshot, card_formatter=format_card, back_formatter=format_back)
    return Panel(view.render(), title=title, padding=(0, 1), border_style="cyan")
