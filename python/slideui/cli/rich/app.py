"""Rich terminal frontend with tables, colours and panels.

Arrow keys move a cell cursor and Enter / Space "clicks" the cell under
it, so whole rows and columns can be slid in one move.  WASD still slide
the neighbouring tile.  Includes a built-in menu for size selection.
"""

from __future__ import annotations

import sys

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slidecore.config import MAX_SIZE, MIN_SIZE, GameConfig
from slidecore.engine.gameplay import BoardSnapshot, GamePlay, SolvedEvent
from slidecore.engine.gamestate import Ticker
from slidecore.models.board import Direction
from slideui.cli.input_handler import get_key, get_key_timeout

console = Console()

_CURSOR_STEPS: dict[str, tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}

_SLIDES: dict[str, Direction] = {
    "slide_up": Direction.UP,
    "slide_down": Direction.DOWN,
    "slide_left": Direction.LEFT,
    "slide_right": Direction.RIGHT,
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: int) -> str:
    m, s = divmod(seconds, 60)
    return f"{m:02d}:{s:02d}"


def _move_cursor(cursor: tuple[int, int], key: str, size: int) -> tuple[int, int]:
    dr, dc = _CURSOR_STEPS[key]
    r = min(max(cursor[0] + dr, 0), size - 1)
    c = min(max(cursor[1] + dc, 0), size - 1)
    return r, c


# -- board rendering ----------------------------------------------------------


def _render_board(snap: BoardSnapshot, cursor: tuple[int, int] | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(snap.size * snap.size - 1))
    br, bc = snap.blank_pos
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(snap.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(snap.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                text = f"{'·':>{width}}"
                style = "dim"
            elif (r, c) in snap.correct:
                text = f"{val:>{width}}"
                style = "bold green"
            elif r == br or c == bc:
                text = f"{val:>{width}}"
                style = "bold cyan"
            else:
                text = f"{val:>{width}}"
                style = "bold white"
            if cursor == (r, c):
                style += " reverse"
            cells.append(f"[{style}]{text}[/{style}]")
        table.add_row(*cells)

    return table


def _stats(snap: BoardSnapshot) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(snap.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(snap.elapsed_seconds), style="bold yellow")
    return stats


# -- menu screen --------------------------------------------------------------


def _draw_menu(sel_size: int) -> None:
    """Draw the main menu."""
    console.clear()

    sizes = Text()
    for s in range(MIN_SIZE, MAX_SIZE + 1):
        if s > MIN_SIZE:
            sizes.append(" ")
        if s == sel_size:
            sizes.append(f" {s}×{s} ", style="bold green on #313244")
        else:
            sizes.append(f" {s}×{s} ", style="dim")

    nav = Text("  ← →  change size", style="dim")

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Play    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]S L I D I N G   P U Z Z L E[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


# -- game screens -------------------------------------------------------------


def _draw_game(snap: BoardSnapshot, cursor: tuple[int, int], status: str = "") -> None:
    console.clear()

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append("  cursor   ", style="dim")
    controls.append("Enter", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  step   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  reshuffle   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    panel = Panel(
        Align.center(_render_board(snap, cursor)),
        title=f"[bold cyan]Sliding Puzzle  {snap.size}×{snap.size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    # Save cursor position right before the stats line so _update_time()
    # can later restore to this exact spot and overwrite only this line.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(_stats(snap)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _update_time(snap: BoardSnapshot) -> None:
    """Overwrite just the stats line using the saved cursor position.

    Uses raw ANSI codes (bypassing Rich) so only the single stats
    line is repainted.
    """
    _DIM = "\033[2m"
    _YB = "\033[33;1m"
    _RS = "\033[0m"

    clock = _format_time(snap.elapsed_seconds)
    stats_raw = (
        f"{_DIM}Moves: {_RS}{_YB}{snap.moves}{_RS}"
        f"    {_DIM}Time: {_RS}{_YB}{clock}{_RS}"
    )

    # Centre the visible text to match what Rich would produce.
    visible_len = len(f"Moves: {snap.moves}    Time: {clock}")
    pad = max(0, (console.width - visible_len) // 2)

    sys.stdout.write(f"\033[u\033[K{' ' * pad}{stats_raw}")
    sys.stdout.flush()


def _draw_win(snap: BoardSnapshot, event: SolvedEvent) -> None:
    console.clear()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append("  You solved it!  ", style="green")
    congrats.append("★\n", style="bold yellow")

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(event.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(event.elapsed_seconds), style="bold yellow")

    panel = Panel(
        Group(
            Align.center(_render_board(snap)),
            Align.center(congrats),
            Align.center(stats),
        ),
        title=f"[bold green]Sliding Puzzle  {event.size}×{event.size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to play again, Q to go back.\n", style="dim"))
    )


# -- game loop ----------------------------------------------------------------


def _wait_for_key(game: GamePlay, ticker: Ticker) -> str:
    """Block until a key arrives, ticking the clock once per second."""
    while True:
        key = get_key_timeout(0.25)
        ticks = ticker.due()
        for _ in range(ticks):
            game.tick()
        if key is not None:
            return key
        if ticks:
            _update_time(game.snapshot())


def _play_game(size: int, config: GameConfig) -> None:
    game = GamePlay(size, config)
    ticker = Ticker()
    cursor = (0, 0)
    status = ""

    while True:
        snap = game.snapshot()
        _draw_game(snap, cursor, status)
        status = ""
        key = _wait_for_key(game, ticker)

        if key in _CURSOR_STEPS:
            cursor = _move_cursor(cursor, key, size)
            continue
        if key == "restart":
            game.initialize()
            ticker.reset()
            status = "[yellow]Reshuffled![/yellow]"
            continue
        if key == "quit":
            game.stop()
            return

        if key == "activate":
            result = game.activate(*cursor)
        elif key in _SLIDES:
            result = game.move(_SLIDES[key])
        else:
            continue

        if not result.accepted:
            status = "[dim]Pick a tile in the blank's row or column.[/dim]"
        elif result.solved_event is not None:
            _draw_win(result.snapshot, result.solved_event)
            while True:
                key = get_key()
                if key == "restart":
                    game.initialize()
                    ticker.reset()
                    break
                if key == "quit":
                    return


# -- menu loop ----------------------------------------------------------------


def _menu_loop(config: GameConfig) -> None:
    sel_size = config.size

    while True:
        _draw_menu(sel_size)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key == "left":
            sel_size = max(MIN_SIZE, sel_size - 1)
        elif key == "right":
            sel_size = min(MAX_SIZE, sel_size + 1)
        elif key == "activate":
            _play_game(sel_size, config)


# -- public entry point -------------------------------------------------------


def run(config: GameConfig) -> None:
    """Launch the Rich CLI with interactive menu."""
    _menu_loop(config)
