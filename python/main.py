#!/usr/bin/env python3
"""Sliding Puzzle Game.

Usage::

    python main.py                         # interactive menu
    python main.py -f rich -s 3            # Rich terminal, 3×3
    python main.py -f pygame --seed 7      # Pygame GUI, reproducible shuffles
    python main.py -f rich --strategy walk # random-walk shuffling
"""

import importlib
import logging
import sys
from dataclasses import replace
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slidecore.config import (  # noqa: E402
    DEFAULT_SIZE,
    MAX_SIZE,
    MIN_SIZE,
    GameConfig,
    ShuffleStrategy,
    parse_size,
)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.rich: "slideui.cli.rich.app",
    Frontend.pygame: "slideui.gui.pygame.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def _ask_size(default: int) -> int:
    while True:
        raw = input(f"  Grid size ({MIN_SIZE}-{MAX_SIZE}, default {default}): ").strip()
        if not raw:
            return default
        try:
            return parse_size(raw)
        except ValueError as exc:
            print(f"  {exc}")


def _launch(frontend: Frontend, config: GameConfig) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(config=config)


def _menu_loop(config: GameConfig) -> None:
    while True:
        print()
        print("  ====================================")
        print("       S L I D I N G   P U Z Z L E    ")
        print("  ====================================")
        print()
        print("  1.  Play  (Rich Terminal)")
        print("  2.  Play  (Pygame GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in ("1", "2"):
            size = _ask_size(config.size)
            frontend = {"1": Frontend.rich, "2": Frontend.pygame}[choice]
            _launch(frontend, replace(config, size=size))
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        envvar="SLIDE_PUZZLE_FRONTEND",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        envvar="SLIDE_PUZZLE_SIZE",
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    strategy: ShuffleStrategy = typer.Option(
        ShuffleStrategy.PERMUTATION, "--strategy",
        envvar="SLIDE_PUZZLE_STRATEGY",
        help="How boards are shuffled.",
    ),
    walk_steps: Optional[int] = typer.Option(
        None, "--walk-steps",
        min=1,
        help="Random-walk length (default: 100 × size²).",
    ),
    anti_reversal: bool = typer.Option(
        True, "--anti-reversal/--no-anti-reversal",
        help="Skip the step that undoes the previous one while walking.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="SLIDE_PUZZLE_SEED",
        help="Seed for reproducible shuffles.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine activity.",
    ),
) -> None:
    """Sliding Puzzle Game."""
    _configure_logging(verbose)
    config = GameConfig(
        size=size,
        strategy=strategy,
        walk_steps=walk_steps,
        anti_reversal=anti_reversal,
        seed=seed,
    )

    if frontend is None:
        _menu_loop(config)
        return

    _launch(frontend, config)


if __name__ == "__main__":
    app()
