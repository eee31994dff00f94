# renju

A five-in-a-row board game played in the terminal. You play the white
stones (`X`) and move first; the computer plays the black stones (`O`).
The first side to line up five stones in a row — horizontally,
vertically or diagonally — wins. If the board fills up with no winner,
the game is a draw.

The on-screen prompt and result messages are in Russian.

## Installing

```
pip install .
```

## Playing

```
renju
```

The 9×9 board is redrawn before every move and you are asked for a move
as two whole numbers, `x y`. Coordinates start at 1. A move onto an
occupied or off-board square is ignored and the same side moves again.
Each printed line of the board holds the cells of one `x` value, from
top to bottom; `_` marks an empty cell.

When the game ends, the final board is shown together with the result.
Ending the input (Ctrl-D) or pressing Ctrl-C quits with exit status 0;
typing something that is not a number quits with an error message and
exit status 1.

## Using the library

The game logic can be driven directly from Python:

```python
from renju.board import Color, Situation

board = Situation(9)
for x in range(5):
    board.move(x, 0, Color.WHITE)

print(board.check_win_at(4, 0))   # Status.WHITE_WINS
```

The main pieces are:

- `renju.board` — `Color`, `Status` and `Situation`. A `Situation` can
  start empty or from lists of white and black `(x, y)` positions. It
  places stones (`move`), takes back up to the last three moves
  (`un_move`), checks the result after a move (`check_win_at`, which
  also reports a draw on a full board) and checks a whole board for five
  in a row (`check_win`).
- `renju.players` — `Player`, `Human` (reads moves from a text stream,
  standard input by default) and `Ips`, the computer opponent.
- `renju.game` — `GameType` and `Game`, which takes 1-based moves,
  alternates turns, reports the result and runs the main loop (`run`).
- `renju.render` — plain-text drawing of the board and messages; every
  function takes an optional output stream.
- `renju.constants` — the board size, the undo depth and the computer's
  strategy number.

## Limitations

- The computer does not search for good moves: with the default
  strategy it picks random squares, and with the other two strategies
  it always answers with the same square.
- Only human-against-computer games are played. `GameType` records a
  mode, but `Game.run` always pairs a white player with a black one,
  the computer by default.
- Renju's restrictions on black (forbidden double threes, double fours
  and overlines) are not enforced; any five or more in a row wins.
- Games cannot be saved or loaded.

## Running the tests

```
pip install .[test]
pytest
```