"""Per-player bookkeeping: busy fields, region ids and the golden move flag."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from gamma.errors import RegionLimitError


@dataclass
class PlayerState:
    busy_fields: int = 0
    regions_in_use: set[int] = field(default_factory=set)
    next_free_region: int = 0
    golden_move_used: bool = False

    @property
    def region_count(self) -> int:
        return len(self.regions_in_use)


class PlayerRegistry:
    """States for players ``1..player_count``, created on first write.

    Player ids are not range-checked here; the game validates them before
    calling in.
    """

    def __init__(self, player_count: int, max_regions: int):
        self.player_count = player_count
        self.max_regions = max_regions
        self.total_busy = 0
        self._states: dict[int, PlayerState] = {}

    def __getitem__(self, player: int) -> PlayerState:
        state = self._states.get(player)
        if state is None:
            state = self._states[player] = PlayerState()
        return state

    def busy_fields(self, player: int) -> int:
        state = self._states.get(player)
        return state.busy_fields if state else 0

    def region_count(self, player: int) -> int:
        state = self._states.get(player)
        return state.region_count if state else 0

    def golden_move_used(self, player: int) -> bool:
        state = self._states.get(player)
        return state.golden_move_used if state else False

    def all_regions_used(self, player: int) -> bool:
        return self.region_count(player) == self.max_regions

    def players_with_fields(self) -> Iterator[int]:
        for player, state in self._states.items():
            if state.busy_fields > 0:
                yield player

    def add_busy(self, player: int):
        self[player].busy_fields += 1
        self.total_busy += 1

    def remove_busy(self, player: int):
        self[player].busy_fields -= 1
        self.total_busy -= 1

    def mark_golden_move_used(self, player: int):
        self[player].golden_move_used = True

    def claim_region(self, player: int, region: int):
        self[player].regions_in_use.add(region)

    def release_region(self, player: int, region: int):
        self[player].regions_in_use.discard(region)

    def first_free_region(self, player: int) -> int:
        """Return the first unused region id at or after the cursor.

        The scan wraps around; the found id is stored back as the new cursor.
        """
        state = self[player]
        if state.region_count >= self.max_regions:
            raise RegionLimitError(f"player {player} has no free region id")
        region = state.next_free_region
        while region in state.regions_in_use:
            region = (region + 1) % self.max_regions
        state.next_free_region = region
        return region

    def allocate_region(self, player: int) -> int:
        region = self.first_free_region(player)
        self.claim_region(player, region)
        return region
