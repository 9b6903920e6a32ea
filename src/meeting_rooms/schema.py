"""Input validation for the room count and meeting list."""

from __future__ import annotations

from typing import Sequence

from meeting_rooms.types import MAX_TIMESTAMP, Meeting


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_room_count(room_count: object) -> list[str]:
    """Validate the room count. Returns list of error messages (empty = valid)."""
    if not _is_int(room_count):
        return [f"Room count must be an integer, got {room_count!r}"]
    if room_count <= 0:
        return [f"Room count must be positive, got {room_count}"]
    return []


def validate_timestamp_limit(timestamp_limit: object) -> list[str]:
    """Validate the timestamp limit. Returns list of error messages."""
    if not _is_int(timestamp_limit):
        return [f"Timestamp limit must be an integer, got {timestamp_limit!r}"]
    if timestamp_limit <= 0:
        return [f"Timestamp limit must be positive, got {timestamp_limit}"]
    return []


def validate_meetings(
    meetings: Sequence[object],
    timestamp_limit: int = MAX_TIMESTAMP,
) -> list[str]:
    """Validate meetings. Returns list of error messages.

    Checks:
    - Each entry is a Meeting or a [start, end] pair
    - Timestamps are integers (bools rejected)
    - 0 <= start < end <= timestamp_limit
    """
    errors: list[str] = []

    for i, meeting in enumerate(meetings):
        if isinstance(meeting, Meeting):
            pair = (meeting.start, meeting.end)
        elif isinstance(meeting, (list, tuple)) and len(meeting) == 2:
            pair = tuple(meeting)
        else:
            errors.append(f"Meeting {i}: expected [start, end], got {meeting!r}")
            continue

        start, end = pair
        if not (_is_int(start) and _is_int(end)):
            errors.append(
                f"Meeting {i}: timestamps must be integers, got {list(pair)}"
            )
            continue

        if start < 0:
            errors.append(f"Meeting {i}: negative start {start}")
        if start >= end:
            errors.append(
                f"Meeting {i}: start {start} must be before end {end}"
            )
        if end > timestamp_limit:
            errors.append(
                f"Meeting {i}: end {end} exceeds timestamp limit "
                f"{timestamp_limit}"
            )

    return errors
