"""ASCII visualisation for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

_LABELS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def show_rooms(
    result: "SimulationResult",  # noqa: F821 - avoid circular import
    *,
    scale: int = 1,
) -> str:
    """Print ASCII room timeline with assignments.

    Legend: '.' = free, 'A'-'Z' = on-time meeting, 'a'-'z' = deferred meeting.
    Letters follow processing order and wrap after Z. Each row is one room,
    each char covers `scale` time units starting at time 0.
    Returns the string and also prints to stdout.
    """
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")

    lines: list[str] = []
    horizon = max((a.finish for a in result.assignments), default=0)
    width = -(-horizon // scale)

    # Header: a tick every 10 chars
    header = "".join(
        f"{i * scale:<10d}" for i in range(0, width, 10)
    )[:max(width, 1)]
    lines.append(f"{'':>8s}  {header}")

    for room in range(result.room_count):
        row = list("." * width)
        for order, a in enumerate(result.assignments):
            if a.room != room:
                continue
            label = _LABELS[order % len(_LABELS)]
            if a.deferred:
                label = label.lower()
            for char_idx in range(a.begin // scale, -(-a.finish // scale)):
                row[char_idx] = label
        count = result.usage[room]
        lines.append(f"{'room ' + str(room):>8s}  {''.join(row)}  ({count})")

    lines.append(
        f"\nMost booked: room {result.most_booked}, "
        f"{result.deferred_count} deferred"
    )

    text = "\n".join(lines)
    print(text)
    return text
