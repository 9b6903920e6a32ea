"""Room-assignment simulator: replay meetings and find the busiest room.

Meetings are processed in start order. Each one takes the lowest-numbered
vacant room, or, when every room is occupied, waits for the room that frees
up first and keeps its original duration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from meeting_rooms.rooms import RoomPool
from meeting_rooms.schema import (
    validate_meetings,
    validate_room_count,
    validate_timestamp_limit,
)
from meeting_rooms.types import (
    MAX_TIMESTAMP,
    InvalidInputError,
    Meeting,
    RoomAssignment,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    """Immutable outcome of one simulation run.

    Invariants:
        - len(usage) == room_count
        - sum(usage) == len(assignments)
    """

    room_count: int
    assignments: tuple[RoomAssignment, ...]
    usage: tuple[int, ...]

    @property
    def most_booked(self) -> int:
        """Room with the highest usage; lowest index on ties, 0 when empty."""
        winner = 0
        best = 0
        for room, count in enumerate(self.usage):
            if count > best:
                best = count
                winner = room
        return winner

    @property
    def deferred_count(self) -> int:
        return sum(1 for a in self.assignments if a.deferred)

    def assignments_for(self, room: int) -> list[RoomAssignment]:
        """Assignments made to one room, in processing order."""
        return [a for a in self.assignments if a.room == room]


def simulate(
    room_count: int,
    meetings: Iterable[Meeting | tuple[int, int] | list[int]],
    *,
    timestamp_limit: int = MAX_TIMESTAMP,
) -> SimulationResult:
    """Run the greedy room-assignment simulation and keep the full trace.

    Args:
        room_count: Number of rooms, indexed 0..room_count-1.
        meetings: Meeting objects or [start, end] pairs in any order. Any
            iterable; it is read exactly once.
        timestamp_limit: Largest timestamp allowed, given or derived. Must
            be a positive integer.

    Returns:
        SimulationResult with assignments in processing order.

    Raises:
        InvalidInputError: If the room count or any meeting is invalid.
        InternalInvariantViolation: If the room pool loses track of rooms.
        ArithmeticOverflowError: If a deferred meeting would finish past
            timestamp_limit.
    """
    # One pass only: iterators would be exhausted by validation
    try:
        meetings = list(meetings)
    except TypeError:
        raise InvalidInputError(
            [f"Meetings must be iterable, got {type(meetings).__name__}"]
        ) from None

    errors = validate_room_count(room_count)
    limit_errors = validate_timestamp_limit(timestamp_limit)
    errors.extend(limit_errors)
    errors.extend(validate_meetings(
        meetings, MAX_TIMESTAMP if limit_errors else timestamp_limit
    ))
    if errors:
        raise InvalidInputError(errors)

    # sorted() is stable: equal starts keep input order
    ordered = sorted(
        enumerate(Meeting.coerce(m) for m in meetings),
        key=lambda item: item[1].start,
    )

    pool = RoomPool.fresh(room_count)
    usage = [0] * room_count
    assignments: list[RoomAssignment] = []

    for position, meeting in ordered:
        pool.release(meeting.start)
        assignment = pool.assign(
            meeting, position, timestamp_limit=timestamp_limit
        )
        if assignment.deferred:
            logger.debug(
                "Deferred meeting %d [%d, %d) to room %d at %d",
                position, meeting.start, meeting.end,
                assignment.room, assignment.begin,
            )
        usage[assignment.room] += 1
        assignments.append(assignment)

    result = SimulationResult(
        room_count=room_count,
        assignments=tuple(assignments),
        usage=tuple(usage),
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Simulated %d meetings on %d rooms: %d deferred, most booked room %d",
            len(assignments), room_count,
            result.deferred_count, result.most_booked,
        )
    return result


def most_booked(
    room_count: int,
    meetings: Iterable[Meeting | tuple[int, int] | list[int]],
    *,
    timestamp_limit: int = MAX_TIMESTAMP,
) -> int:
    """Index of the room that hosts the most meetings.

    Ties go to the lowest index. An empty meeting list returns 0.
    """
    return simulate(
        room_count, meetings, timestamp_limit=timestamp_limit
    ).most_booked
