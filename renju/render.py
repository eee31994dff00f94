"""Console drawing of the board and game messages."""

from __future__ import annotations

import subprocess
import sys
from typing import TextIO

from renju.board import Color, Situation, Status

_ANSI_CLEAR = "\033[2J\033[1;1H"
_PROMPT = "Введите ход (x y): "
_SYMBOLS = {Color.NONE: "_ ", Color.BLACK: "O ", Color.WHITE: "X "}
_RESULTS = {
    Status.WHITE_WINS: "Белые выиграли!!!",
    Status.BLACK_WINS: "Черные выиграли!!!",
    Status.DRAW: "Ничья",
}


def _target(out: TextIO | None) -> TextIO:
    return out if out is not None else sys.stdout


def clear_console(out: TextIO | None = None) -> None:
    """Clear the console, using the system command on a real terminal."""
    target = _target(out)
    if out is None and target.isatty():
        target.flush()
        try:
            if sys.platform.startswith("win"):
                subprocess.run("cls", shell=True, check=False)
                return
            if sys.platform.startswith(("linux", "darwin")):
                subprocess.run(["clear"], check=False)
                return
        except OSError:
            pass
    target.write(_ANSI_CLEAR)
    target.flush()


def board_text(situation: Situation) -> str:
    """Text picture of the board, one line per value of the first coordinate."""
    cells = range(situation.size)
    return "".join(
        "".join(_SYMBOLS[situation.stone_color(i, j)] for j in cells) + "\n" for i in cells
    )


def very_simple_draw(situation: Situation, out: TextIO | None = None) -> None:
    """Clear the console, draw the board and prompt for a move."""
    target = _target(out)
    clear_console(out)
    target.write(board_text(situation))
    target.write(_PROMPT)
    target.flush()


def win(situation: Situation, status: Status, out: TextIO | None = None) -> None:
    """Clear the console, draw the final board and announce the result."""
    target = _target(out)
    clear_console(out)
    target.write(board_text(situation))
    result = _RESULTS.get(status)
    if result is not None:
        target.write(result + "\n")
    target.flush()


def mess(text: str, out: TextIO | None = None) -> None:
    """Write a plain message."""
    _target(out).write(text)