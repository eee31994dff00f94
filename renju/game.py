"""Turn order and the main loop of a game."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum
from typing import TextIO

from renju import render
from renju.board import Color, Situation, Status
from renju.players import Human, Ips, Player


class GameType(Enum):
    """Who plays against whom."""

    PVP = 0
    PVE = 1
    EVE = 2


class Game:
    """Coordinates the board, the players and the display."""

    def __init__(
        self,
        size: int,
        game_type: GameType = GameType.PVE,
        white: Iterable[Sequence[int]] | None = None,
        black: Iterable[Sequence[int]] | None = None,
        turn: int = 1,
        out: TextIO | None = None,
    ) -> None:
        self._size = size
        self._game_type = game_type
        self._turn = turn
        self._out = out
        self._situation = Situation(size, white, black, out)

    @property
    def situation(self) -> Situation:
        """The board being played on."""
        return self._situation

    @property
    def turn(self) -> int:
        """Side to move: 1 for white, -1 for black."""
        return self._turn

    @property
    def game_type(self) -> GameType:
        """Mode of the game."""
        return self._game_type

    def move(self, x: int, y: int) -> Status:
        """Place a stone for the side to move at 1-based (x, y)."""
        x -= 1
        y -= 1
        color = Color.WHITE if self._turn > 0 else Color.BLACK
        if not self._situation.move(x, y, color):
            return Status.ONGOING
        self._turn = -self._turn

        result = self._situation.check_win_at(x, y)
        if result is Status.ONGOING:
            return Status.ONGOING
        if result is not Status.DRAW:
            result = Status.BLACK_WINS if self._turn > 0 else Status.WHITE_WINS
        render.win(self._situation, result, self._out)
        return Status.GAME_END

    def render(self) -> None:
        """Draw the board and prompt for a move."""
        render.very_simple_draw(self._situation, self._out)

    def run(self, human: Player | None = None, bot: Player | None = None) -> Status:
        """Alternate white (human) and black (bot) moves until the game ends."""
        human = human if human is not None else Human(Color.WHITE)
        bot = bot if bot is not None else Ips(Color.BLACK)
        status = Status.ONGOING
        while status is Status.ONGOING:
            self.render()
            player = human if self._turn > 0 else bot
            status = self.move(*player.get_move(self._situation))
        return status