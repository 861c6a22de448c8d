"""Textual-powered interactive Invader board."""

from __future__ import annotations

from collections import deque
from typing import Sequence

from rich.panel import Panel
from rich.text import Text
from textual import events, on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import Footer, Header, OptionList, Static
from textual.widgets.option_list import Option

from ...cards import MAX_LEVEL, MIN_LEVEL, Card, Nation, NationConfig
from ...engine import InvaderEngine
from ...rules import PileInvariantError
from ...state import PileName, TableSnapshot
from ..render import format_card, render_table
from ..views import pile_label

MAX_EVENT_LINES = 18


class EventLog(Static):
    """Most recent board events, newest last."""

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self._entries: deque[str] = deque(maxlen=MAX_EVENT_LINES)

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def on_mount(self) -> None:
        self._show()

    def add(self, message: str) -> None:
        self._entries.append(message)
        self._show()

    def _show(self) -> None:
        if self._entries:
            body = Text.from_markup("\n".join(self._entries))
        else:
            body = Text("No events yet", style="dim")
        self.update(Panel(body, title="Events", border_style="magenta"))


class BoardPanel(Static):
    """Shows every pile of the current snapshot."""

    def update_board(self, snapshot: TableSnapshot) -> None:
        self.update(render_table(snapshot, title="Board"))


class StatusStrip(Static):
    """Prompt or warning shown above the board."""

    def set_message(self, message: str) -> None:
        self.update(Text.from_markup(message or "[dim]Ready[/dim]"))


class ActionPalette(OptionList):
    """Interactive list used for card, pile and adversary selection."""

    class Choice(Message):
        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    def __init__(self, prompt: str, entries: Sequence[str]) -> None:
        self.prompt = prompt
        options = [
            Option(f"[bold]{idx + 1}[/bold] {entry}", id=str(idx))
            for idx, entry in enumerate(entries)
        ]
        super().__init__(*options)

    def on_mount(self) -> None:  # pragma: no cover - widget lifecycle glue
        if self.option_count:
            self.highlighted = 0

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:  # pragma: no cover - Textual glue
        event.stop()
        option_id = event.option.id
        if option_id is None:
            return
        self.post_message(self.Choice(int(option_id)))

    def on_key(self, event: events.Key) -> None:  # pragma: no cover - driven by UI interaction
        if event.key.isdigit() and event.key != "0":
            index = int(event.key) - 1
            if 0 <= index < self.option_count:
                self.highlighted = index
                self.post_message(self.Choice(index))
                event.stop()


def _all_cards(snapshot: TableSnapshot) -> list[tuple[Card, PileName]]:
    """Return every card on the board with the pile holding it."""

    found: list[tuple[Card, PileName]] = []
    for name in PileName:
        for card in reversed(snapshot.pile(name)):
            found.append((card, name))
    return found


class InvaderTextualApp(App):
    """Textual Invader board."""

    CSS = """
    Screen {
        layout: vertical;
        height: 100%;
    }

    #main {
        layout: horizontal;
        height: 1fr;
    }

    #left {
        width: 2fr;
        height: 1fr;
        padding: 0 1;
        overflow-y: auto;
    }

    #right {
        width: 1fr;
        height: 1fr;
        padding: 0 1;
    }

    ActionPalette {
        border: heavy $accent;
        height: auto;
        max-height: 16;
    }

    StatusStrip {
        width: 100%;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("e", "explore", "Explore"),
        Binding("r", "reveal_russia", "Russia"),
        Binding("m", "move", "Move card"),
        Binding("f", "fractured", "Fractured Days"),
        Binding("s", "settlers", "Settlers"),
        Binding("i", "rising_interest", "Rising Interest"),
        Binding("v", "visions", "Visions"),
        Binding("c", "choose_adversary", "Adversary"),
        Binding("n", "new_game", "New game"),
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    def __init__(self, *, config: NationConfig, seed: int | None) -> None:
        super().__init__()
        self.engine = InvaderEngine(config, seed=seed)
        self.snapshot = self.engine.snapshot()

        self._active_palette: ActionPalette | None = None
        self._pending_kind: str | None = None
        self._pending_values: list[object] | None = None
        self._picked_card: Card | None = None
        self._picked_nation: Nation | None = None

        self.status_strip: StatusStrip | None = None
        self.board_panel: BoardPanel | None = None
        self.event_log: EventLog | None = None
        self.actions_container: Vertical | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        self.status_strip = StatusStrip(id="status")
        yield self.status_strip

        self.board_panel = BoardPanel(id="board")
        self.event_log = EventLog(id="events")
        self.actions_container = Vertical(id="actions")

        yield Horizontal(
            Vertical(self.board_panel, id="left"),
            Vertical(self.event_log, self.actions_container, id="right"),
            id="main",
        )
        yield Footer()

    def on_mount(self) -> None:
        self._log(f"[bold cyan]New game[/bold cyan] {self.snapshot.config.label()}")
        self._refresh_ui()

    def _log(self, message: str) -> None:
        if self.event_log:
            self.event_log.add(message)

    def _set_status(self, message: str) -> None:
        if self.status_strip:
            self.status_strip.set_message(message)

    def _refresh_ui(self, snapshot: TableSnapshot | None = None) -> None:
        if snapshot is not None:
            self.snapshot = snapshot
        if self.board_panel:
            self.board_panel.update_board(self.snapshot)
        self.title = f"Invader Deck • {self.snapshot.config.label()} • {len(self.snapshot.explore)} to explore"

    def action_explore(self) -> None:
        before = self.snapshot
        after = self.engine.explore()
        if not before.explore_revealed and after.explore_revealed and after.explore_top is not None:
            self._log(f"Revealed {format_card(after.explore_top)}")
        elif before.explore and len(after.explore) < len(before.explore):
            self._log(f"Explored {format_card(after.building[-1])}")
        elif not after.explore:
            self._set_status("[yellow]The explore pile is empty.[/yellow]")
        self._refresh_ui(after)

    def action_reveal_russia(self) -> None:
        if not self.snapshot.russia_hidden:
            self._set_status("[yellow]No Russian cards in play.[/yellow]")
            return
        self._refresh_ui(self.engine.reveal_russia())

    def action_settlers(self) -> None:
        removed, snapshot = self.engine.hard_working_settlers()
        if removed:
            self._log("Hard-Working Settlers removed " + " ".join(format_card(card) for card in removed))
        else:
            self._log("Hard-Working Settlers found nothing to remove")
        self._refresh_ui(snapshot)

    def action_rising_interest(self) -> None:
        try:
            card, snapshot = self.engine.rising_interest_in_the_island()
        except PileInvariantError as exc:
            self._set_status(f"[red]{exc}[/red]")
            return
        self._log(f"Rising Interest removed {format_card(card)}")
        self._refresh_ui(snapshot)

    def action_visions(self) -> None:
        swapped, snapshot = self.engine.visions_of_a_shifting_future()
        self._log("Visions swapped the top two cards" if swapped else "Visions left the explore pile as it was")
        self._refresh_ui(snapshot)

    def action_new_game(self) -> None:
        self._start_game(self.snapshot.config)

    async def action_cancel(self) -> None:
        await self._dismiss_palette()
        self._set_status("")

    async def action_fractured(self) -> None:
        if not self.snapshot.discard or not self.snapshot.explore:
            self._set_status("[yellow]Fractured Days needs a discard and an explore card.[/yellow]")
            return
        cards = list(reversed(self.snapshot.discard))
        await self._prompt("fractured", "Card to return from discard", [format_card(card) for card in cards], cards)

    async def action_move(self) -> None:
        entries = _all_cards(self.snapshot)
        labels = [f"{format_card(card)} [dim]({pile_label(name)})[/dim]" for card, name in entries]
        await self._prompt("move_card", "Card to move", labels, [card for card, _ in entries])

    async def action_choose_adversary(self) -> None:
        nations = list(Nation)
        await self._prompt("nation", "Adversary", [nation.value for nation in nations], nations)

    async def _prompt(self, kind: str, prompt: str, entries: Sequence[str], values: Sequence[object]) -> None:
        if not entries:
            self._set_status(f"[yellow]Nothing to choose for {prompt.lower()}.[/yellow]")
            return
        await self._dismiss_palette()
        palette = ActionPalette(prompt, entries)
        self._active_palette = palette
        self._pending_kind = kind
        self._pending_values = list(values)
        self._set_status(f"[bold]{prompt}[/bold]: use arrows or number keys, Esc to cancel")
        if self.actions_container is not None:
            await self.actions_container.mount(palette)
            palette.focus()

    async def _dismiss_palette(self) -> None:
        palette = self._active_palette
        self._active_palette = None
        self._pending_kind = None
        self._pending_values = None
        if palette is None:
            return
        await palette.remove()

    @on(ActionPalette.Choice)
    async def _on_palette_choice(self, message: ActionPalette.Choice) -> None:
        message.stop()
        kind = self._pending_kind
        values = self._pending_values
        if kind is None or values is None or not 0 <= message.index < len(values):
            return
        value = values[message.index]
        await self._dismiss_palette()
        self._set_status("")

        if kind == "fractured" and isinstance(value, Card):
            self._log(f"Fractured Days returned {format_card(value)} to explore")
            self._refresh_ui(self.engine.fractured_days_split_the_sky(value))
        elif kind == "move_card" and isinstance(value, Card):
            self._picked_card = value
            piles = list(PileName)
            await self._prompt("move_pile", f"Move {value.label()} to", [pile_label(name) for name in piles], piles)
        elif kind == "move_pile" and isinstance(value, PileName) and self._picked_card is not None:
            card = self._picked_card
            self._picked_card = None
            self._log(f"Moved {format_card(card)} to {pile_label(value)}")
            self._refresh_ui(self.engine.relocate(card, value))
        elif kind == "nation" and isinstance(value, Nation):
            self._picked_nation = value
            levels = list(range(MIN_LEVEL, MAX_LEVEL + 1))
            await self._prompt("level", "Level", [f"Level {level}" for level in levels], levels)
        elif kind == "level" and isinstance(value, int) and self._picked_nation is not None:
            config = NationConfig(nation=self._picked_nation, level=value)
            self._picked_nation = None
            self._start_game(config)

    def _start_game(self, config: NationConfig) -> None:
        snapshot = self.engine.new_game(config)
        self._log(f"[bold cyan]New game[/bold cyan] {config.label()}")
        self._refresh_ui(snapshot)


def run_textual_app(*, config: NationConfig, seed: int | None) -> None:
    """Launch the Textual UI."""

    app = InvaderTextualApp(config=config, seed=seed)
    app.run()
