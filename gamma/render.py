"""Board to text conversion."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gamma.game import Game

EMPTY_FIELD = "."
RESET = "\x1b[0m"


def cursor_style() -> str:
    return f"\x1b[{os.getenv('GAMMA_CURSOR_STYLE', '44')}m"


def board_rows(game: Game, cursor: tuple[int, int] | None = None) -> list[str]:
    """Return the rows of the board, top row first, without newlines.

    Player ids are one character wide while the highest id on the board is a
    single digit. Otherwise every field is padded to that id's width and
    fields are separated by single spaces.
    """
    board = game.board
    width = len(str(game.max_active_player()))
    separator = "" if width == 1 else " "
    highlight = cursor_style() if cursor is not None else ""

    rows = []
    for y in range(board.height - 1, -1, -1):
        fields = []
        for x in range(board.width):
            owner = board.owner_at(x, y)
            text = (EMPTY_FIELD if owner is None else str(owner)).ljust(width)
            if cursor == (x, y):
                text = f"{highlight}{text}{RESET}"
            fields.append(text)
        rows.append(separator.join(fields))
    return rows


def render_board(game: Game, cursor: tuple[int, int] | None = None) -> str:
    return "".join(f"{row}\n" for row in board_rows(game, cursor))
