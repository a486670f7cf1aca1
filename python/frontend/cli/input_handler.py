"""Keypress reader for the tile-merge terminal game.

The board is driven with single keys: arrows or WASD move the cursor,
space / Enter picks up a tile and drops it on a neighbour to swap.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager


# -- raw terminal reads --------------------------------------------------------


@contextmanager
def _raw_mode() -> Iterator[int]:
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        yield fd
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _read_posix() -> str:
    with _raw_mode():
        return sys.stdin.read(1)


def _read_msvcrt() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_read_char: Callable[[], str] = _read_msvcrt if os.name == "nt" else _read_posix


# -- key -> action -------------------------------------------------------------

_ACTIONS: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    " ": "select",
    "\r": "select",
    "\n": "select",
    "n": "hint",
    "r": "restart",
    "h": "scores",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
}

# Final byte of the ESC [ x cursor sequences.
_CURSOR_KEYS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def _action_for(ch: str) -> str:
    return _ACTIONS.get(ch.lower(), ch if ch.isprintable() else "")


def decode_key(read: Callable[[], str]) -> str:
    """Pull one keypress from *read* and name the game action it stands for.

    *read* returns one character per call. Escape starts a cursor
    sequence; a lone Escape quits. Letters are case-insensitive.
    """
    ch = read()
    if ch != "\x1b":
        return _action_for(ch)
    if read() != "[":
        return "quit"
    return _CURSOR_KEYS.get(read(), "")


def get_key() -> str:
    """Block for one keypress on stdin and return its action.

    One of ``up``/``down``/``left``/``right`` (cursor), ``select``
    (pick / swap), ``hint``, ``restart``, ``scores`` or ``quit``; any
    other printable key comes back as itself, anything else as ``""``.
    """
    return decode_key(_read_char)
