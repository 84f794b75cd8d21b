"""Region coloring: placing stones, merging regions and golden-move captures.

Every player's stones are split into regions, the maximal 4-connected groups
of that player's fields. Each region carries an id from ``0`` to
``max_regions - 1`` which is unique among the player's current regions and
is written on every field of the region. Ids are recycled through
:class:`~gamma.players.PlayerRegistry` as regions merge or split.

A golden move is carried out as a speculative mutation: the captured field
is vacated and the victim's neighbouring components are repainted to
:data:`TRANSPARENT`, which tells how many regions the victim would be left
with. The mutation is then either committed or reverted exactly.
"""

from __future__ import annotations

import logging

from gamma.board import Board
from gamma.players import PlayerRegistry

logger = logging.getLogger(__name__)

# Marks fields detached from the victim's region while a capture is evaluated.
TRANSPARENT = -1


class RegionEngine:
    def __init__(self, board: Board, players: PlayerRegistry):
        self.board = board
        self.players = players

    def own_neighbors(self, player: int, x: int, y: int) -> list[tuple[int, int]]:
        board = self.board
        return [(nx, ny) for nx, ny in board.neighbors(x, y) if board.owner_at(nx, ny) == player]

    def touches(self, player: int, x: int, y: int) -> bool:
        board = self.board
        return any(board.owner_at(nx, ny) == player for nx, ny in board.neighbors(x, y))

    def repaint(self, player: int, x: int, y: int, target: int):
        """Paint the component of ``player`` containing (x, y) with ``target``.

        Walks 4-adjacent fields of ``player`` whose region differs from
        ``target``. ``target`` must not occur in the component apart from the
        start field, otherwise the walk stops short of it.
        """
        board = self.board
        board.set_region(x, y, target)
        stack = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            for nx, ny in board.neighbors(cx, cy):
                if board.owner_at(nx, ny) == player and board.region_at(nx, ny) != target:
                    board.set_region(nx, ny, target)
                    stack.append((nx, ny))

    def place(self, player: int, x: int, y: int):
        """Put a stone of ``player`` on the empty field (x, y).

        Legality is checked by the caller.
        """
        board = self.board
        board.set_owner(x, y, player)
        neighbors = self.own_neighbors(player, x, y)

        if not neighbors:
            region = self.players.allocate_region(player)
            board.set_region(x, y, region)
            logger.debug("player %d opened region %d at (%d, %d)", player, region, x, y)
        else:
            survivor = board.region_at(*neighbors[-1])
            board.set_region(x, y, survivor)
            for nx, ny in neighbors:
                absorbed = board.region_at(nx, ny)
                if absorbed != survivor:
                    self.players.release_region(player, absorbed)
                    self.repaint(player, nx, ny, survivor)
                    logger.debug(
                        "player %d merged region %d into %d at (%d, %d)",
                        player, absorbed, survivor, x, y,
                    )

        self.players.add_busy(player)

    def capture(self, attacker: int, x: int, y: int, commit: bool = True) -> bool:
        """Evaluate taking the opponent's field (x, y) for ``attacker``.

        Returns whether the capture keeps the victim within the region limit.
        With ``commit`` false, or when the capture is illegal, the board and
        the registry are left exactly as they were.
        """
        board = self.board
        victim = board.owner_at(x, y)
        vacated = board.region_at(x, y)

        board.clear(x, y)
        self.players.release_region(victim, vacated)

        detached = 0
        for nx, ny in self.own_neighbors(victim, x, y):
            if board.region_at(nx, ny) != TRANSPARENT:
                self.repaint(victim, nx, ny, TRANSPARENT)
                detached += 1

        legal = self.players.region_count(victim) + detached <= self.players.max_regions
        if not legal or not commit:
            self._rollback(victim, vacated, x, y)
            return legal

        self._commit(attacker, victim, x, y)
        return True

    def _rollback(self, victim: int, vacated: int, x: int, y: int):
        board = self.board
        board.set_owner(x, y, victim)
        self.players.claim_region(victim, vacated)
        # The detached components all touch (x, y) again, one walk restores them.
        self.repaint(victim, x, y, vacated)

    def _commit(self, attacker: int, victim: int, x: int, y: int):
        board = self.board
        self.place(attacker, x, y)
        for nx, ny in self.own_neighbors(victim, x, y):
            if board.region_at(nx, ny) == TRANSPARENT:
                region = self.players.allocate_region(victim)
                self.repaint(victim, nx, ny, region)
        self.players.remove_busy(victim)
        self.players.mark_golden_move_used(attacker)
        logger.debug(
            "player %d captured (%d, %d) from player %d, who now has %d regions",
            attacker, x, y, victim, self.players.region_count(victim),
        )
