"""Board state, stone colours and win detection."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import TextIO

from renju.constants import MAX_SEARCH_DEPTH

_DIRECTIONS = ((1, 0), (0, 1), (1, 1), (-1, 1))
_FINISHED_MESSAGE = "Это уже завершенная партия."


class Color(Enum):
    """Contents of a board cell."""

    WHITE = 0
    BLACK = 1
    NONE = 2


class Status(Enum):
    """Outcome of a game."""

    WHITE_WINS = 0
    BLACK_WINS = 1
    DRAW = 2
    GAME_END = 3
    ONGOING = 4


class Situation:
    """A square board of stones with a short undo history."""

    def __init__(
        self,
        size: int,
        white: Iterable[Sequence[int]] | None = None,
        black: Iterable[Sequence[int]] | None = None,
        out: TextIO | None = None,
    ) -> None:
        self._size = size
        self._free = size * size
        self._stones = [[Color.NONE] * size for _ in range(size)]
        self._history: deque[tuple[int, int]] = deque(maxlen=MAX_SEARCH_DEPTH)

        if white is None and black is None:
            return

        for positions, color in ((white or (), Color.WHITE), (black or (), Color.BLACK)):
            for pos in positions:
                if len(pos) < 2:
                    continue
                x, y = pos[0], pos[1]
                if self.is_within_bounds(x, y):
                    self._stones[y][x] = color
                    self._free -= 1

        if self.check_win():
            (out if out is not None else sys.stdout).write(_FINISHED_MESSAGE)

    @property
    def size(self) -> int:
        """Side length of the board."""
        return self._size

    def move(self, x: int, y: int, color: Color) -> bool:
        """Place a stone; return False if the cell is off the board or taken."""
        if not self.is_within_bounds(x, y) or self._stones[y][x] is not Color.NONE:
            return False
        self._stones[y][x] = color
        self._free -= 1
        self._history.append((x, y))
        return True

    def un_move(self) -> bool:
        """Take back the most recent remembered move; False if there is none."""
        if not self._history:
            return False
        x, y = self._history.pop()
        self._stones[y][x] = Color.NONE
        self._free += 1
        return True

    def stone_color(self, x: int, y: int) -> Color:
        """Colour of the stone at (x, y)."""
        if not self.is_within_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside a {self._size}x{self._size} board")
        return self._stones[y][x]

    def check_win_at(self, x: int, y: int) -> Status:
        """Game state after a stone was placed at (x, y)."""
        if self._free <= 0:
            return Status.DRAW
        base_color = self.stone_color(x, y)
        if base_color is Color.NONE:
            return Status.ONGOING
        if any(self.has_five_in_a_row(x, y, dx, dy, base_color) for dx, dy in _DIRECTIONS):
            return Status.WHITE_WINS if base_color is Color.WHITE else Status.BLACK_WINS
        return Status.ONGOING

    def check_win(self) -> bool:
        """Whether five in a row exists anywhere on the board."""
        for y, row in enumerate(self._stones):
            for x, base_color in enumerate(row):
                if base_color is Color.NONE:
                    continue
                for dx, dy in _DIRECTIONS:
                    if all(
                        self.is_within_bounds(x + dx * k, y + dy * k)
                        and self._stones[y + dy * k][x + dx * k] is base_color
                        for k in range(5)
                    ):
                        return True
        return False

    def is_within_bounds(self, x: int, y: int) -> bool:
        """Whether (x, y) lies on the board."""
        return 0 <= x < self._size and 0 <= y < self._size

    def has_five_in_a_row(self, x: int, y: int, dx: int, dy: int, base_color: Color) -> bool:
        """Whether a line through (x, y) along (dx, dy) holds five of base_color."""
        streak = 0
        for offset in range(-4, 5):
            nx, ny = x + dx * offset, y + dy * offset
            if self.is_within_bounds(nx, ny) and self._stones[ny][nx] is base_color:
                streak += 1
                if streak >= 5:
                    return True
            else:
                streak = 0
        return False