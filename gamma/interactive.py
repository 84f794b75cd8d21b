"""Interactive mode: a cursor-driven terminal front-end."""

from __future__ import annotations

import logging
import termios
from contextlib import contextmanager
from typing import TextIO

from gamma.game import Game
from gamma.render import board_rows, render_board

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[2J\x1b[H"

KEY_UP = "\x1b[A"
KEY_DOWN = "\x1b[B"
KEY_RIGHT = "\x1b[C"
KEY_LEFT = "\x1b[D"
KEY_END = "\x04"


def read_key(stream: TextIO) -> str:
    """Read one key press; arrow keys come back as their full escape sequence."""
    key = stream.read(1)
    if key != "\x1b":
        return key
    second = stream.read(1)
    if second != "[":
        return key + second
    return key + second + stream.read(1)


@contextmanager
def raw_terminal(stream: TextIO):
    """Turn off line buffering and echo on a tty for the duration of the block."""
    if not stream.isatty():
        yield
        return

    fd = stream.fileno()
    old = termios.tcgetattr(fd)
    new = termios.tcgetattr(fd)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, new)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)


class InteractiveSession:
    def __init__(self, game: Game):
        self.game = game
        self.x = game.width // 2
        self.y = game.height // 2
        self.player = 1
        self.running = True

    def next_player(self):
        self.player = self.player % self.game.player_count + 1

    def player_has_action(self, player: int) -> bool:
        return self.game.free_fields(player) != 0 or self.game.golden_move_possible(player)

    def any_player_has_action(self) -> bool:
        return any(self.player_has_action(p) for p in range(1, self.game.player_count + 1))

    def handle_key(self, key: str):
        game = self.game
        if key == KEY_UP:
            self.y = min(self.y + 1, game.height - 1)
        elif key == KEY_DOWN:
            self.y = max(self.y - 1, 0)
        elif key == KEY_RIGHT:
            self.x = min(self.x + 1, game.width - 1)
        elif key == KEY_LEFT:
            self.x = max(self.x - 1, 0)
        elif key == " ":
            if game.place(self.player, self.x, self.y):
                self.next_player()
        elif key in ("g", "G"):
            if game.golden_move(self.player, self.x, self.y):
                self.next_player()
        elif key in ("c", "C"):
            self.next_player()
        elif key == KEY_END:
            self.running = False

    def player_info(self, player: int) -> str:
        return f"Player: {player}, Busy fields: {self.game.busy_fields(player)}"

    def frame(self) -> str:
        game = self.game
        rows = board_rows(game, cursor=(self.x, self.y))
        status = f"{self.player_info(self.player)}, Free fields: {game.free_fields(self.player)}"
        if game.golden_move_possible(self.player):
            status += ", G"
        return "\n".join(rows) + "\n\n" + status

    def summary(self) -> str:
        infos = "".join(f"{self.player_info(p)}\n" for p in range(1, self.game.player_count + 1))
        return render_board(self.game) + infos


def play_interactive(game: Game, stdin: TextIO, stdout: TextIO):
    session = InteractiveSession(game)
    with raw_terminal(stdin):
        while session.running and session.any_player_has_action():
            if not session.player_has_action(session.player):
                session.next_player()
                continue
            stdout.write(CLEAR_SCREEN + session.frame())
            stdout.flush()
            key = read_key(stdin)
            if not key:
                logger.debug("input closed, ending the game")
                break
            session.handle_key(key)
    stdout.write(CLEAR_SCREEN + session.summary())
    stdout.flush()
