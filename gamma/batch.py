"""Batch mode: line-oriented commands read from a text stream."""

from __future__ import annotations

import logging
from typing import Iterator, TextIO

from gamma.errors import GammaError
from gamma.game import Game
from gamma.models import (
    BusyFieldsCmd,
    Command,
    FreeFieldsCmd,
    GoldenMoveCmd,
    GoldenPossibleCmd,
    ModeSelectionCmd,
    MoveCmd,
    PrintBoardCmd,
    parse_command,
    parse_mode_selection,
)

logger = logging.getLogger(__name__)


def numbered_lines(stream: TextIO) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` pairs, skipping comments and empty lines.

    Skipped lines still count towards the numbering.
    """
    number = 0
    while True:
        line = stream.readline()
        if not line:
            return
        number += 1
        if line.startswith("#") or line == "\n":
            continue
        yield number, line


def select_mode(
    lines: Iterator[tuple[int, str]], out: TextIO, err: TextIO
) -> tuple[ModeSelectionCmd, Game] | None:
    """Read lines until one selects a mode and creates a game.

    Prints ``OK <line>`` on success and ``ERROR <line>`` for every rejected
    line. Returns None when the input ends first.
    """
    for number, line in lines:
        cmd = parse_mode_selection(line)
        if cmd is None:
            logger.debug("line %d: invalid mode selection %r", number, line)
            err.write(f"ERROR {number}\n")
            continue
        try:
            game = Game(cmd.width, cmd.height, cmd.players, cmd.max_regions)
        except GammaError as e:
            logger.debug("line %d: game rejected: %s", number, e)
            err.write(f"ERROR {number}\n")
            continue
        out.write(f"OK {number}\n")
        return cmd, game
    return None


def execute(game: Game, cmd: Command) -> str:
    """Run one parsed command and return its output, newline included."""
    if isinstance(cmd, MoveCmd):
        return f"{int(game.place(cmd.player, cmd.x, cmd.y))}\n"

    elif isinstance(cmd, GoldenMoveCmd):
        return f"{int(game.golden_move(cmd.player, cmd.x, cmd.y))}\n"

    elif isinstance(cmd, BusyFieldsCmd):
        return f"{game.busy_fields(cmd.player)}\n"

    elif isinstance(cmd, FreeFieldsCmd):
        return f"{game.free_fields(cmd.player)}\n"

    elif isinstance(cmd, GoldenPossibleCmd):
        return f"{int(game.golden_move_possible(cmd.player))}\n"

    elif isinstance(cmd, PrintBoardCmd):
        return game.render()

    raise TypeError(f"unsupported command {cmd!r}")


def play_batch(game: Game, lines: Iterator[tuple[int, str]], out: TextIO, err: TextIO):
    for number, line in lines:
        cmd = parse_command(line)
        if cmd is None:
            logger.debug("line %d: invalid command %r", number, line)
            err.write(f"ERROR {number}\n")
            continue
        out.write(execute(game, cmd))
