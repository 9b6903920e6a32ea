"""RoomPool: the vacant and busy priority queues behind the simulator.

Provides release (fixed-point move of finished rooms back to vacant) and
assign (pick a room, deferring the meeting when every room is busy).
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field

from meeting_rooms.types import (
    MAX_TIMESTAMP,
    ArithmeticOverflowError,
    InternalInvariantViolation,
    Meeting,
    RoomAssignment,
)


@dataclass
class RoomPool:
    """Mutable room state for one simulation run.

    vacant → min-heap of room indices free at the current time
    busy   → min-heap of (next_available, room) pairs

    Every room index lives in exactly one of the two heaps. free_at[room]
    is the room's next-available time and survives release.
    """

    room_count: int
    vacant: list[int]
    busy: list[tuple[int, int]] = field(default_factory=list)
    free_at: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.free_at:
            self.free_at = [0] * self.room_count
            for next_free, room in self.busy:
                self.free_at[room] = next_free

    @classmethod
    def fresh(cls, room_count: int) -> RoomPool:
        """All rooms vacant with next-available time 0."""
        # range() is already in heap order
        return cls(room_count=room_count, vacant=list(range(room_count)))

    @property
    def vacant_rooms(self) -> list[int]:
        return sorted(self.vacant)

    @property
    def busy_rooms(self) -> list[tuple[int, int]]:
        return sorted(self.busy)

    def next_available(self, room: int) -> int:
        """When the room is next free. Rooms never used report 0."""
        if not 0 <= room < self.room_count:
            raise KeyError(room)
        return self.free_at[room]

    def release(self, now: int) -> list[int]:
        """Move every busy room with next_available <= now to vacant.

        Returns the released rooms in release order.
        """
        released: list[int] = []
        while self.busy and self.busy[0][0] <= now:
            _, room = heapq.heappop(self.busy)
            heapq.heappush(self.vacant, room)
            released.append(room)
        return released

    def assign(
        self,
        meeting: Meeting,
        position: int,
        *,
        timestamp_limit: int = MAX_TIMESTAMP,
    ) -> RoomAssignment:
        """Give the meeting a room and mark that room busy.

        Callers run release(meeting.start) first. The lowest vacant index
        wins; with nothing vacant the soonest-free busy room takes the
        meeting, shifted to start when that room frees up.

        Raises:
            InternalInvariantViolation: If neither heap holds a room.
            ArithmeticOverflowError: If the shifted finish passes
                timestamp_limit.
        """
        if self.vacant:
            room = heapq.heappop(self.vacant)
            begin = meeting.start
            finish = meeting.end
            deferred = False
        elif self.busy:
            nearest_end, room = self.busy[0]
            finish = nearest_end + meeting.duration
            if finish > timestamp_limit:
                raise ArithmeticOverflowError(
                    room, nearest_end, meeting.duration, timestamp_limit
                )
            heapq.heappop(self.busy)
            begin = nearest_end
            deferred = True
        else:
            raise InternalInvariantViolation(meeting.start, meeting.end)

        heapq.heappush(self.busy, (finish, room))
        self.free_at[room] = finish
        return RoomAssignment(
            meeting=meeting,
            position=position,
            room=room,
            begin=begin,
            finish=finish,
            deferred=deferred,
        )
