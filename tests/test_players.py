"""Tests for per-player bookkeeping and region id reuse."""

import pytest

from gamma.errors import RegionLimitError
from gamma.players import PlayerRegistry


class TestRegionIds:
    def test_allocates_in_order(self):
        players = PlayerRegistry(2, 3)
        assert players.allocate_region(1) == 0
        assert players.allocate_region(1) == 1
        assert players.region_count(1) == 2
        assert players.region_count(2) == 0

    def test_ids_are_per_player(self):
        players = PlayerRegistry(2, 3)
        assert players.allocate_region(1) == 0
        assert players.allocate_region(2) == 0

    def test_cursor_wraps_to_released_id(self):
        players = PlayerRegistry(1, 3)
        for _ in range(3):
            players.allocate_region(1)
        assert players.all_regions_used(1)
        players.release_region(1, 0)
        assert players.first_free_region(1) == 0
        assert players[1].next_free_region == 0

    def test_cursor_is_only_a_hint(self):
        players = PlayerRegistry(1, 3)
        players.allocate_region(1)
        players.allocate_region(1)
        players.release_region(1, 0)
        # Cursor still points at 1, which is in use; the scan skips it.
        assert players.first_free_region(1) == 2
        players.claim_region(1, 2)
        assert players.first_free_region(1) == 0

    def test_no_free_id(self):
        players = PlayerRegistry(1, 1)
        players.allocate_region(1)
        with pytest.raises(RegionLimitError):
            players.allocate_region(1)


class TestCounters:
    def test_busy_fields(self):
        players = PlayerRegistry(3, 1)
        players.add_busy(1)
        players.add_busy(3)
        players.add_busy(3)
        players.remove_busy(3)
        assert players.busy_fields(1) == 1
        assert players.busy_fields(2) == 0
        assert players.busy_fields(3) == 1
        assert players.total_busy == 2
        assert sorted(players.players_with_fields()) == [1, 3]

    def test_reads_do_not_create_states(self):
        players = PlayerRegistry(2**32 - 1, 1)
        assert players.busy_fields(12345) == 0
        assert players.golden_move_used(12345) is False
        assert list(players.players_with_fields()) == []
        assert players._states == {}

    def test_golden_flag(self):
        players = PlayerRegistry(2, 1)
        players.mark_golden_move_used(2)
        assert players.golden_move_used(2) is True
        assert players.golden_move_used(1) is False
