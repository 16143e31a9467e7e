"""Cross-platform single-keypress reader for CLI frontends.

Arrow keys move the cell cursor, Enter / Space activate the cell under
it (a click), and WASD slide the neighbouring tile directly.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "slide_up",
    "W": "slide_up",
    "s": "slide_down",
    "S": "slide_down",
    "a": "slide_left",
    "A": "slide_left",
    "d": "slide_right",
    "D": "slide_right",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "R": "restart",
    " ": "activate",
    "\r": "activate",
    "\n": "activate",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


def _decode(ch: str, read_next: Callable[[], str]) -> str:
    """Map *ch* to an action, pulling the rest of an escape sequence if needed.

    *read_next* returns the next pending character, or "" when none arrives.
    Arrow keys arrive as ESC [ A/B/C/D; a lone ESC means quit.
    """
    if ch != "\x1b":
        return _resolve(ch)
    if read_next() != "[":
        return "quit"
    return _ARROW_MAP.get(read_next(), "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"   : cursor movement (arrow keys)
        "slide_up" … "slide_right"      : WASD, slide the adjacent tile
        "activate"                      : Enter / Return / Space
        "quit"                          : q / Ctrl-C / Escape
        "restart"                       : r
        "<char>"                        : unmapped printable char
        ""                              : unrecognised key
    """
    return _decode(_getch(), _getch)


def get_key_timeout(timeout: float) -> str | None:
    """Read a single keypress with a timeout.

    Returns the normalised action string (same as ``get_key``) or
    ``None`` if no key was pressed within *timeout* seconds.

    Uses ``os.read`` (unbuffered) so that ``select`` accurately
    reflects pending bytes of multi-byte escape sequences.
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time as _time

        end = _time.monotonic() + timeout
        while _time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            _time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None

        def read_pending() -> str:
            pending, _, _ = select.select([fd], [], [], 0.1)
            return os.read(fd, 1).decode("utf-8", errors="ignore") if pending else ""

        return _decode(os.read(fd, 1).decode("utf-8", errors="ignore"), read_pending)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
