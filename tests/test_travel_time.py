"""Tests for travel-time metrics."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from itertools import product

from models.room import Room
from engine.inventory import build_inventory, room_number
from engine.travel_time import pairwise_travel_time, aggregate_travel_time, sort_rooms


def make_room(floor=1, position=1):
    return Room(room_number(floor, position), floor, position)


class TestPairwiseTravelTime:
    def test_same_room(self):
        room = make_room(4, 6)
        assert pairwise_travel_time(room, room) == 0

    def test_same_floor_counts_positions(self):
        assert pairwise_travel_time(make_room(2, 1), make_room(2, 5)) == 4

    def test_different_floors_ignore_positions(self):
        assert pairwise_travel_time(make_room(1, 1), make_room(3, 9)) == 4
        assert pairwise_travel_time(make_room(1, 9), make_room(3, 9)) == 4

    def test_custom_costs(self):
        a, b = make_room(1, 1), make_room(1, 4)
        assert pairwise_travel_time(a, b, vertical_cost=5, horizontal_cost=3) == 9
        c = make_room(2, 1)
        assert pairwise_travel_time(a, c, vertical_cost=5, horizontal_cost=3) == 5

    def test_symmetric_over_all_rooms(self):
        rooms = list(build_inventory())
        for a, b in product(rooms, rooms):
            assert pairwise_travel_time(a, b) == pairwise_travel_time(b, a)

    def test_zero_only_for_same_room(self):
        rooms = list(build_inventory())
        for a, b in product(rooms, rooms):
            assert (pairwise_travel_time(a, b) == 0) == (a.number == b.number)

    def test_grows_with_distance(self):
        base = make_room(1, 1)
        floor_times = [pairwise_travel_time(base, make_room(f, 1)) for f in range(1, 11)]
        assert floor_times == sorted(floor_times)
        assert len(set(floor_times)) == len(floor_times)

        position_times = [pairwise_travel_time(base, make_room(1, p)) for p in range(1, 11)]
        assert position_times == list(range(10))


class TestAggregateTravelTime:
    def test_empty_and_single(self):
        assert aggregate_travel_time([]) == 0
        assert aggregate_travel_time([make_room(5, 5)]) == 0

    def test_path_not_all_pairs(self):
        rooms = [make_room(1, 1), make_room(1, 2), make_room(1, 3)]
        # 1 + 1, not 1 + 1 + 2
        assert aggregate_travel_time(rooms) == 2

    def test_order_independent(self):
        rooms = [make_room(3, 2), make_room(1, 5), make_room(1, 1), make_room(2, 8)]
        # sorted: 101, 105, 208, 302 -> 4 + 2 + 2
        assert aggregate_travel_time(rooms) == 8
        assert aggregate_travel_time(list(reversed(rooms))) == 8

    def test_does_not_reorder_input(self):
        rooms = [make_room(3, 2), make_room(1, 5)]
        aggregate_travel_time(rooms)
        assert [r.number for r in rooms] == [302, 105]

    def test_sort_rooms(self):
        rooms = [make_room(2, 1), make_room(1, 9), make_room(1, 2)]
        assert [r.number for r in sort_rooms(rooms)] == [102, 109, 201]


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
