"""meeting-rooms: Greedy room-assignment simulation for time-bounded meetings."""

from meeting_rooms.rooms import RoomPool
from meeting_rooms.simulator import SimulationResult, most_booked, simulate
from meeting_rooms.types import (
    MAX_TIMESTAMP,
    ArithmeticOverflowError,
    InternalInvariantViolation,
    InvalidInputError,
    Meeting,
    RoomAssignment,
)

__all__ = [
    "ArithmeticOverflowError",
    "InternalInvariantViolation",
    "InvalidInputError",
    "MAX_TIMESTAMP",
    "Meeting",
    "RoomAssignment",
    "RoomPool",
    "SimulationResult",
    "most_booked",
    "simulate",
]
