"""Game logic: move validation, golden moves and field counting."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from gamma.board import Board, Cell
from gamma.errors import InvalidParamsError, OutOfMemoryError
from gamma.models import GameParams
from gamma.players import PlayerRegistry
from gamma.regions import RegionEngine
from gamma.render import render_board

logger = logging.getLogger(__name__)


def _is_index(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


class Game:
    """State of one game of gamma.

    Move methods return ``False`` for any illegal request and leave the
    state untouched in that case.
    """

    def __init__(self, width: int, height: int, players: int, max_regions: int):
        try:
            params = GameParams(width=width, height=height, players=players, max_regions=max_regions)
        except ValidationError as e:
            raise InvalidParamsError(str(e)) from e

        try:
            self.board = Board(params.width, params.height)
        except (MemoryError, OverflowError) as e:
            raise OutOfMemoryError(f"cannot allocate a {width}x{height} board") from e

        self.max_regions = params.max_regions
        self.players = PlayerRegistry(params.players, params.max_regions)
        self.regions = RegionEngine(self.board, self.players)

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def player_count(self) -> int:
        return self.players.player_count

    def is_player(self, player) -> bool:
        return _is_index(player) and 1 <= player <= self.player_count

    def on_board(self, x, y) -> bool:
        return _is_index(x) and _is_index(y) and self.board.contains(x, y)

    def cell(self, x: int, y: int) -> Cell:
        if not self.on_board(x, y):
            raise IndexError(f"({x}, {y}) is outside the {self.width}x{self.height} board")
        return self.board.get(x, y)

    def region_count(self, player: int) -> int:
        return self.players.region_count(player) if self.is_player(player) else 0

    def golden_move_used(self, player: int) -> bool:
        return self.is_player(player) and self.players.golden_move_used(player)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _may_claim(self, player: int, x: int, y: int) -> bool:
        """A player at the region limit may only extend an existing region."""
        return not self.players.all_regions_used(player) or self.regions.touches(player, x, y)

    def can_place(self, player, x, y) -> bool:
        if not self.is_player(player) or not self.on_board(x, y):
            return False
        if self.board.owner_at(x, y) is not None:
            return False
        return self._may_claim(player, x, y)

    def can_golden(self, player, x, y) -> bool:
        """Check everything about a golden move except the victim's region limit."""
        if not self.is_player(player) or self.players.golden_move_used(player):
            return False
        if not self.on_board(x, y):
            return False
        owner = self.board.owner_at(x, y)
        if owner is None or owner == player:
            return False
        return self._may_claim(player, x, y)

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def place(self, player, x, y) -> bool:
        if not self.can_place(player, x, y):
            return False
        self.regions.place(player, x, y)
        logger.debug("player %d placed a stone at (%d, %d)", player, x, y)
        return True

    def golden_move(self, player, x, y) -> bool:
        if not self.can_golden(player, x, y):
            return False
        if not self.regions.capture(player, x, y):
            logger.debug("golden move of player %d at (%d, %d) rolled back", player, x, y)
            return False
        return True

    def golden_move_possible(self, player) -> bool:
        if not self.is_player(player) or self.players.golden_move_used(player):
            return False
        if not any(p != player for p in self.players.players_with_fields()):
            return False
        # Expensive: simulates a capture on every candidate field.
        for x, y in self.board.cells():
            if self.can_golden(player, x, y) and self.regions.capture(player, x, y, commit=False):
                return True
        return False

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def busy_fields(self, player) -> int:
        if not self.is_player(player):
            return 0
        return self.players.busy_fields(player)

    def free_fields(self, player) -> int:
        if not self.is_player(player):
            return 0
        if not self.players.all_regions_used(player):
            return self.board.size - self.players.total_busy
        return self._border_size(player)

    def _border_size(self, player: int) -> int:
        board = self.board
        return sum(
            1
            for x, y in board.cells()
            if board.owner_at(x, y) is None and self.regions.touches(player, x, y)
        )

    def max_active_player(self) -> int:
        """Highest player id that owns at least one field, 0 if none does."""
        return max(self.players.players_with_fields(), default=0)

    def render(self) -> str:
        return render_board(self)


def new_game(width: int, height: int, players: int, max_regions: int) -> Game:
    return Game(width, height, players, max_regions)
