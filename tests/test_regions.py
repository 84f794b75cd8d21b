"""Tests for region coloring and the capture rollback path."""

import copy

from gamma.game import new_game
from gamma.regions import TRANSPARENT


def state_of(game):
    return (
        [game.cell(x, y) for x, y in game.board.cells()],
        copy.deepcopy(game.players._states),
    )


def regions_on_board(game, player):
    return {game.cell(x, y).region for x, y in game.board.cells() if game.cell(x, y).owner == player}


class TestRepaint:
    def test_repaints_whole_component_only(self):
        game = new_game(4, 3, 2, 3)
        for x, y in [(0, 0), (1, 0), (1, 1), (3, 2)]:
            game.place(1, x, y)
        game.place(2, 2, 0)
        other = game.cell(3, 2).region

        game.regions.repaint(1, 0, 0, 9)

        assert {game.cell(x, y).region for x, y in [(0, 0), (1, 0), (1, 1)]} == {9}
        assert game.cell(3, 2).region == other
        assert game.cell(2, 0).owner == 2

    def test_large_component_does_not_recurse(self):
        game = new_game(200, 200, 1, 1)
        for x, y in game.board.cells():
            assert game.place(1, x, y)
        game.regions.repaint(1, 0, 0, 5)
        assert regions_on_board(game, 1) == {5}


class TestPlace:
    def test_new_stone_opens_region(self):
        game = new_game(3, 3, 1, 2)
        game.regions.place(1, 1, 1)
        assert game.cell(1, 1).region == 0
        assert game.players.region_count(1) == 1
        assert game.players.busy_fields(1) == 1

    def test_merge_keeps_an_adjacent_id(self):
        game = new_game(3, 1, 1, 2)
        game.place(1, 0, 0)
        game.place(1, 2, 0)
        before = {game.cell(0, 0).region, game.cell(2, 0).region}
        game.place(1, 1, 0)
        after = regions_on_board(game, 1)
        assert len(after) == 1
        assert after <= before
        assert game.players[1].regions_in_use == after


class TestCaptureRollback:
    def _ring_game(self):
        # Player 1 surrounds (1, 1) on three sides; player 2 sits in the middle.
        game = new_game(3, 3, 2, 1)
        for x, y in [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)]:
            game.place(1, x, y)
        game.place(2, 1, 1)
        return game

    def test_simulation_only_restores_state(self):
        game = self._ring_game()
        before = state_of(game)
        assert game.regions.capture(2, 0, 1, commit=False) is False
        assert state_of(game) == before
        assert game.regions.capture(2, 0, 0, commit=False) is True
        assert state_of(game) == before

    def test_illegal_capture_rolls_back(self):
        game = self._ring_game()
        before = state_of(game)
        # (0, 2) is the corner joining both arms of player 1's region.
        assert game.regions.capture(2, 0, 2) is False
        assert state_of(game) == before
        assert TRANSPARENT not in regions_on_board(game, 1)

    def test_rollback_preserves_cursor(self):
        game = new_game(3, 2, 2, 2)
        game.place(1, 0, 0)
        game.place(1, 2, 0)
        game.place(1, 1, 0)
        game.place(1, 0, 1)
        game.place(2, 2, 1)
        cursor = game.players[1].next_free_region
        assert game.regions.capture(2, 1, 0, commit=False) is True
        assert game.players[1].next_free_region == cursor

    def test_commit_leaves_no_transparent_fields(self):
        game = new_game(3, 3, 2, 4)
        for x, y in [(1, 0), (0, 1), (1, 1), (2, 1), (1, 2)]:
            game.place(1, x, y)
        game.place(2, 0, 0)
        assert game.regions.capture(2, 1, 1) is True
        assert TRANSPARENT not in regions_on_board(game, 1)
        assert game.players.region_count(1) == 4
        assert len(regions_on_board(game, 1)) == 4
