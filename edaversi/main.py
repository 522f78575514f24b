"""Entry point: open the game window and run until it is closed."""

from __future__ import annotations

import argparse

from .controller import update_view
from .model import GameModel
from .view import View


def main(argv: list[str] | None = None) -> int:
    """Run the game."""
    parser = argparse.ArgumentParser(
        prog="edaversi", description="Play Reversi against the computer."
    )
    parser.parse_args(argv)

    model = GameModel()
    view = View()
    try:
        while update_view(model, view):
            pass
    finally:
        view.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())