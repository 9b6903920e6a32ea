"""Shared test fixtures and data loading for meeting-rooms.

All test data lives in data/fixtures/scenarios/ as JSON files.  This module
loads that data and exposes helper functions + pytest fixtures for the tests.
"""

from __future__ import annotations

import heapq
import json
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def make_pool(room_count: int,
              vacant: list[int] | None = None,
              busy: list[list[int]] | None = None):
    """Build a RoomPool in an arbitrary state.

    With no heaps given, returns a fresh pool (all rooms vacant).
    """
    from meeting_rooms.rooms import RoomPool

    if vacant is None and busy is None:
        return RoomPool.fresh(room_count)

    vacant_heap = list(vacant or [])
    busy_heap = [tuple(b) for b in busy or []]
    heapq.heapify(vacant_heap)
    heapq.heapify(busy_heap)
    return RoomPool(room_count=room_count, vacant=vacant_heap, busy=busy_heap)


def reference_most_booked(room_count: int, meetings) -> tuple[int, list[int]]:
    """Linear-scan oracle: no heaps, just per-room next-available times.

    Returns (winner, usage).
    """
    free_at = [0] * room_count
    usage = [0] * room_count
    for start, end in sorted(meetings, key=lambda m: m[0]):
        room = next((r for r in range(room_count) if free_at[r] <= start), None)
        if room is None:
            room = min(range(room_count), key=lambda r: (free_at[r], r))
            free_at[room] += end - start
        else:
            free_at[room] = end
        usage[room] += 1
    winner = usage.index(max(usage)) if meetings else 0
    return winner, usage


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def deferral_meetings() -> list[list[int]]:
    """Two rooms, four meetings, two of them deferred."""
    return [[0, 10], [1, 5], [2, 7], [3, 4]]


@pytest.fixture
def deferral_result(deferral_meetings):
    from meeting_rooms.simulator import simulate

    return simulate(2, deferral_meetings)
