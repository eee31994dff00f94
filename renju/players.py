"""Participants who choose moves: a console human and a simple bot."""

from __future__ import annotations

import random
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TextIO

from renju.board import Color, Situation
from renju.constants import FIELD_SIZE, SEARCH_ALGORITHM

# Depth-first (1) and heuristic (3) searches always answer with this point.
_FIXED_MOVE: tuple[int, int] = (1, 1)
_RANDOM_SEARCH = 2
_KNOWN_ALGORITHMS = frozenset({1, _RANDOM_SEARCH, 3})


class Player(ABC):
    """Someone who places stones of one colour."""

    def __init__(self, color: Color) -> None:
        self._color = color

    @property
    def color(self) -> Color:
        """Colour of this player's stones."""
        return self._color

    @abstractmethod
    def get_move(self, situation: Situation) -> tuple[int, int]:
        """Choose the coordinates of the next move."""


class Human(Player):
    """A player who types moves as two whitespace-separated integers."""

    def __init__(self, color: Color, stream: TextIO | None = None) -> None:
        super().__init__(color)
        self._stream = stream
        self._token_iter: Iterator[str] | None = None

    def _tokens(self) -> Iterator[str]:
        stream = self._stream if self._stream is not None else sys.stdin
        for line in iter(stream.readline, ""):
            yield from line.split()

    def _next_int(self) -> int:
        if self._token_iter is None:
            self._token_iter = self._tokens()
        try:
            token = next(self._token_iter)
        except StopIteration:
            raise EOFError("no move entered") from None
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"not a coordinate: {token!r}") from None

    def get_move(self, situation: Situation | None = None) -> tuple[int, int]:
        """Read the next move from the input stream."""
        x = self._next_int()
        y = self._next_int()
        return x, y


class Ips(Player):
    """A bot whose move depends on the configured search strategy."""

    def __init__(
        self,
        color: Color,
        algorithm: int = SEARCH_ALGORITHM,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(color)
        if algorithm not in _KNOWN_ALGORITHMS:
            raise ValueError(f"unknown search algorithm: {algorithm}")
        self._algorithm = algorithm
        self._rng = rng if rng is not None else random.Random()

    def get_move(self, situation: Situation) -> tuple[int, int]:
        """Choose a move with the configured strategy."""
        if self._algorithm == _RANDOM_SEARCH:
            return self._rng.randrange(FIELD_SIZE), self._rng.randrange(FIELD_SIZE)
        return _FIXED_MOVE