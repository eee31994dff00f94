import io

import pytest

from renju.board import Color, Status
from renju.game import Game, GameType
from renju.players import Human, Player


class _ScriptedBot(Player):
    def __init__(self, moves):
        super().__init__(Color.BLACK)
        self._moves = iter(moves)

    def get_move(self, situation):
        return next(self._moves)


def test_first_move_is_white_and_one_based():
    game = Game(9, out=io.StringIO())
    assert game.move(3, 5) is Status.ONGOING
    assert game.situation.stone_color(2, 4) is Color.WHITE
    assert game.turn == -1


def test_turns_alternate():
    game = Game(9, out=io.StringIO())
    game.move(1, 1)
    game.move(2, 2)
    assert game.situation.stone_color(1, 1) is Color.BLACK
    assert game.turn == 1


def test_occupied_cell_keeps_turn():
    game = Game(9, out=io.StringIO())
    game.move(1, 1)
    assert game.move(1, 1) is Status.ONGOING
    assert game.turn == -1
    assert game.situation.stone_color(0, 0) is Color.WHITE


def test_off_board_move_keeps_turn():
    game = Game(9, out=io.StringIO())
    assert game.move(0, 0) is Status.ONGOING
    assert game.turn == 1


def test_white_wins_with_five():
    out = io.StringIO()
    game = Game(9, GameType.PVP, out=out)
    for x in range(1, 5):
        assert game.move(x, 1) is Status.ONGOING
        assert game.move(x, 2) is Status.ONGOING
    assert game.move(5, 1) is Status.GAME_END
    assert out.getvalue().endswith("Белые выиграли!!!\n")


def test_black_wins_from_preset_position():
    out = io.StringIO()
    game = Game(
        9,
        white=[[5, 5], [6, 6], [7, 7]],
        black=[[0, 0], [0, 1], [0, 2], [0, 3]],
        turn=-1,
        out=out,
    )
    assert game.move(1, 5) is Status.GAME_END
    assert out.getvalue().endswith("Черные выиграли!!!\n")


def test_full_board_is_draw():
    out = io.StringIO()
    game = Game(2, out=out)
    assert game.move(1, 1) is Status.ONGOING
    assert game.move(2, 1) is Status.ONGOING
    assert game.move(1, 2) is Status.ONGOING
    assert game.move(2, 2) is Status.GAME_END
    assert out.getvalue().endswith("Ничья\n")


def test_finished_preset_is_reported():
    out = io.StringIO()
    Game(9, white=[[x, 0] for x in range(5)], black=[], out=out)
    assert "завершенная партия" in out.getvalue()


def test_render_prompts_for_move():
    out = io.StringIO()
    Game(5, out=out).render()
    assert out.getvalue().endswith("Введите ход (x y): ")


def test_run_plays_until_white_wins():
    out = io.StringIO()
    game = Game(9, out=out)
    human = Human(Color.WHITE, io.StringIO("1 1 2 1 3 1 4 1 5 1"))
    bot = _ScriptedBot([(1, 9), (2, 9), (3, 9), (4, 9)])
    assert game.run(human, bot) is Status.GAME_END
    assert out.getvalue().endswith("Белые выиграли!!!\n")
    assert game.situation.stone_color(3, 8) is Color.BLACK


def test_run_stops_when_input_ends():
    game = Game(9, out=io.StringIO())
    human = Human(Color.WHITE, io.StringIO("1 1"))
    bot = _ScriptedBot([(9, 9)])
    with pytest.raises(EOFError):
        game.run(human, bot)
    assert game.situation.stone_color(8, 8) is Color.BLACK