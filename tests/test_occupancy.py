"""Tests for committing bookings, random occupancy, reset and floor stats."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import random
import pytest

from models.room import RoomStatus
from models.booking import BookingFailure, BookingResult
from engine.inventory import build_inventory
from engine.allocator import allocate
from engine.occupancy import (
    commit_booking,
    randomize_occupancy,
    reset_all,
    get_floor_occupancy,
)


def make_failed_result():
    return BookingResult(
        rooms=(),
        total_travel_time=0,
        success=False,
        message="Maximum 5 rooms per booking allowed",
        failure=BookingFailure.EXCEEDS_MAX_ROOMS,
    )


class TestCommitBooking:
    def test_end_to_end_commit(self):
        inv = build_inventory()
        result = allocate(inv, 2)
        updated = commit_booking(inv, result)

        assert updated.get(101).status is RoomStatus.SELECTED
        assert updated.get(102).status is RoomStatus.SELECTED
        others = [r for r in updated if r.number not in (101, 102)]
        assert all(r.status is RoomStatus.AVAILABLE for r in others)

    def test_original_snapshot_untouched(self):
        inv = build_inventory()
        commit_booking(inv, allocate(inv, 3))
        assert all(r.status is RoomStatus.AVAILABLE for r in inv)

    def test_failed_result_is_noop(self):
        inv = build_inventory().with_statuses({305: RoomStatus.OCCUPIED})
        updated = commit_booking(inv, make_failed_result())
        assert updated == inv

    def test_failed_allocation_is_noop(self):
        inv = build_inventory()
        result = allocate(inv, 6)
        assert commit_booking(inv, result) is inv

    def test_consecutive_bookings_do_not_overlap(self):
        inv = build_inventory()
        first = allocate(inv, 3)
        inv = commit_booking(inv, first)
        second = allocate(inv, 3)
        inv = commit_booking(inv, second)

        assert first.room_numbers == [101, 102, 103]
        assert second.room_numbers == [104, 105, 106]
        assert inv.count_by_status()[RoomStatus.SELECTED] == 6


class TestRandomizeOccupancy:
    def test_only_available_or_occupied(self):
        inv = commit_booking(build_inventory(), allocate(build_inventory(), 5))
        updated = randomize_occupancy(inv, rng=random.Random(1))
        assert all(r.status in (RoomStatus.AVAILABLE, RoomStatus.OCCUPIED) for r in updated)
        assert updated.count_by_status()[RoomStatus.SELECTED] == 0

    def test_seeded_is_reproducible(self):
        inv = build_inventory()
        first = randomize_occupancy(inv, rng=random.Random(7))
        second = randomize_occupancy(inv, rng=random.Random(7))
        assert first == second

    def test_one_draw_per_room_in_order(self):
        inv = build_inventory()
        updated = randomize_occupancy(inv, 0.3, rng=random.Random(11))

        draws = random.Random(11)
        expected = [
            RoomStatus.OCCUPIED if draws.random() < 0.3 else RoomStatus.AVAILABLE
            for _ in inv
        ]
        assert [r.status for r in updated] == expected

    def test_probability_bounds(self):
        inv = build_inventory()
        assert all(r.status is RoomStatus.AVAILABLE
                   for r in randomize_occupancy(inv, 0.0, rng=random.Random(3)))
        assert all(r.status is RoomStatus.OCCUPIED
                   for r in randomize_occupancy(inv, 1.0, rng=random.Random(3)))

    def test_invalid_probability(self):
        with pytest.raises(ValueError):
            randomize_occupancy(build_inventory(), 1.5)

    def test_keeps_topology(self):
        inv = build_inventory()
        updated = randomize_occupancy(inv, rng=random.Random(5))
        assert [r.number for r in updated] == [r.number for r in inv]


class TestResetAll:
    def test_all_available(self):
        inv = randomize_occupancy(build_inventory(), rng=random.Random(2))
        inv = commit_booking(inv, allocate(inv, 2))
        reset = reset_all(inv)

        assert len(reset) == 97
        assert all(r.status is RoomStatus.AVAILABLE for r in reset)
        assert reset == build_inventory()

    def test_keeps_custom_layout(self):
        inv = build_inventory((4, 2))
        reset = reset_all(inv.with_statuses({101: RoomStatus.SELECTED}))
        assert reset.rooms_per_floor == (4, 2)
        assert len(reset) == 6


class TestFloorOccupancy:
    def test_counts_per_floor(self):
        inv = build_inventory().with_statuses({
            101: RoomStatus.OCCUPIED,
            102: RoomStatus.SELECTED,
            1001: RoomStatus.OCCUPIED,
        })
        stats = get_floor_occupancy(inv)

        assert [s["floor"] for s in stats] == list(range(1, 11))
        assert stats[0]["available"] == 8
        assert stats[0]["occupied"] == 1
        assert stats[0]["selected"] == 1
        assert abs(stats[0]["occupancy_pct"] - 0.2) < 0.01
        assert stats[9]["total_rooms"] == 7
        assert stats[9]["occupied"] == 1
        assert stats[4]["occupancy_pct"] == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
