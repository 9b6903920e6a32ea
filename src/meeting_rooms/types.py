"""Shared types: Meeting, RoomAssignment and the error hierarchy."""

from __future__ import annotations

from dataclasses import dataclass

# Upper bound for any timestamp, given or derived (signed 64-bit).
MAX_TIMESTAMP = 2**63 - 1


@dataclass(frozen=True)
class Meeting:
    """A half-open request [start, end) for one room."""

    start: int
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start

    @classmethod
    def coerce(cls, value: Meeting | tuple[int, int] | list[int]) -> Meeting:
        """Accept a Meeting or a plain (start, end) pair."""
        if isinstance(value, Meeting):
            return value
        start, end = value
        return cls(start, end)


@dataclass(frozen=True)
class RoomAssignment:
    """Immutable record of one assignment decision.

    Invariants:
        - finish - begin == meeting.duration
        - begin == meeting.start unless deferred
        - deferred implies begin > meeting.start
    """

    meeting: Meeting
    position: int
    room: int
    begin: int
    finish: int
    deferred: bool

    @property
    def delay(self) -> int:
        """How long the meeting waited past its requested start."""
        return self.begin - self.meeting.start

    @property
    def wall_time(self) -> int:
        return self.finish - self.begin


class InvalidInputError(ValueError):
    """Raised when the room count or the meetings fail validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(
            "Invalid input:\n" + "\n".join(f"  - {e}" for e in self.errors)
        )


class InternalInvariantViolation(RuntimeError):
    """Raised when no room is tracked at assignment time.

    Unreachable for a pool with at least one room; signals a bug in the
    release phase rather than bad input.
    """

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        super().__init__(
            f"Invariant violated: no vacant or busy room while assigning "
            f"meeting [{start}, {end})"
        )


class ArithmeticOverflowError(OverflowError):
    """Raised when a deferred finish time passes the timestamp limit."""

    def __init__(
        self,
        room: int,
        nearest_end: int,
        duration: int,
        limit: int,
    ) -> None:
        self.room = room
        self.nearest_end = nearest_end
        self.duration = duration
        self.limit = limit
        super().__init__(
            f"Overflow: room {room} next-available {nearest_end} + duration "
            f"{duration} exceeds timestamp limit {limit}"
        )
