"""Command line boundary checks and terminal input mapping."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

import main
from slideui.cli.input_handler import _decode, _resolve
from slideui.cli.rich import app as rich_app
from slideui.cli.rich.app import _format_time, _move_cursor, _render_board, _wait_for_key
from slidecore.engine.gameplay import BoardSnapshot, GamePlay
from slidecore.engine.gamegenerator import GameGenerator
from slidecore.engine.gamestate import Ticker

runner = CliRunner()


# -- launcher -----------------------------------------------------------------


@pytest.mark.parametrize("size", ["1", "11", "four"])
def test_invalid_size_rejected(size: str) -> None:
    result = runner.invoke(main.app, ["--frontend", "rich", "--size", size])
    assert result.exit_code == 2


def test_unknown_frontend_rejected() -> None:
    result = runner.invoke(main.app, ["--frontend", "curses"])
    assert result.exit_code == 2


def test_frontend_receives_config(monkeypatch: pytest.MonkeyPatch) -> None:
    launched = []
    monkeypatch.setattr(main, "_launch", lambda frontend, config: launched.append((frontend, config)))
    result = runner.invoke(
        main.app, ["-f", "pygame", "-s", "5", "--strategy", "walk", "--seed", "9"]
    )
    assert result.exit_code == 0, result.output
    frontend, config = launched[0]
    assert frontend == main.Frontend.pygame
    assert config.size == 5
    assert config.strategy == "walk"
    assert config.seed == 9


# -- terminal input -----------------------------------------------------------


@pytest.mark.parametrize(
    "ch, action",
    [
        ("w", "slide_up"),
        ("D", "slide_right"),
        ("\r", "activate"),
        (" ", "activate"),
        ("q", "quit"),
        ("r", "restart"),
        ("7", "7"),
        ("\x07", ""),
    ],
)
def test_key_mapping(ch: str, action: str) -> None:
    assert _resolve(ch) == action


@pytest.mark.parametrize(
    "seq, action",
    [
        ("\x1b[A", "up"),
        ("\x1b[D", "left"),
        ("\x1b", "quit"),  # bare Escape, nothing follows
        ("\x1b[", ""),  # truncated sequence
        ("s", "slide_down"),
    ],
)
def test_escape_sequences(seq: str, action: str) -> None:
    rest = iter(seq[1:])
    assert _decode(seq[0], lambda: next(rest, "")) == action


# -- rich rendering helpers ---------------------------------------------------


def test_cursor_stays_on_board() -> None:
    assert _move_cursor((0, 0), "up", 4) == (0, 0)
    assert _move_cursor((0, 0), "right", 4) == (0, 1)
    assert _move_cursor((3, 3), "down", 4) == (3, 3)


def test_format_time() -> None:
    assert _format_time(0) == "00:00"
    assert _format_time(125) == "02:05"


def test_render_board_has_one_row_per_board_row() -> None:
    game = GamePlay.from_board(GameGenerator.solved(5))
    table = _render_board(game.snapshot(), cursor=(0, 0))
    assert table.row_count == 5
    assert len(table.columns) == 5


def test_wait_for_key_ticks_while_idle(monkeypatch: pytest.MonkeyPatch) -> None:
    now = [0.0]
    keys = iter([None, None, "activate"])

    def fake_key_timeout(timeout: float) -> str | None:
        now[0] += 0.6
        return next(keys)

    repaints: list[int] = []

    def fake_update_time(snap: BoardSnapshot) -> None:
        repaints.append(snap.elapsed_seconds)

    monkeypatch.setattr(rich_app, "get_key_timeout", fake_key_timeout)
    monkeypatch.setattr(rich_app, "_update_time", fake_update_time)

    game = GamePlay.from_board(GameGenerator.solved(3))
    ticker = Ticker(clock=lambda: now[0])

    assert _wait_for_key(game, ticker) == "activate"
    # 1.8s elapsed: one whole tick, repainted while still waiting for input.
    assert game.state.elapsed_seconds == 1
    assert repaints == [1]
