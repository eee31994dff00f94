"""Command-line entry point: a console game against the bot."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from renju.constants import FIELD_SIZE
from renju.game import Game, GameType


def main(argv: Sequence[str] | None = None) -> int:
    """Play a game of renju in the console against the computer."""
    parser = argparse.ArgumentParser(
        prog="renju",
        description="Five in a row on the console against the computer.",
    )
    parser.parse_args(argv)

    game = Game(FIELD_SIZE, GameType.PVE)
    try:
        game.run()
    except (EOFError, KeyboardInterrupt):
        print()
        return 0
    except ValueError as error:
        print(f"renju: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())