"""Tests for the ASCII room timeline."""

from __future__ import annotations

import pytest


class TestShowRooms:

    def test_rows_and_labels(self, deferral_result, capsys):
        from meeting_rooms.debug import show_rooms

        text = show_rooms(deferral_result)

        lines = text.splitlines()
        assert lines[1] == "  room 0  AAAAAAAAAAd  (2)"
        assert lines[2] == "  room 1  .BBBBccccc.  (2)"
        assert "Most booked: room 0, 2 deferred" in text
        assert capsys.readouterr().out.strip() == text.strip()

    def test_scale_compresses(self, deferral_result):
        from meeting_rooms.debug import show_rooms

        text = show_rooms(deferral_result, scale=5)
        lines = text.splitlines()
        assert lines[1] == "  room 0  AAd  (2)"

    def test_unused_room_is_blank(self):
        from meeting_rooms.debug import show_rooms
        from meeting_rooms.simulator import simulate

        text = show_rooms(simulate(3, [[0, 4]]))
        assert "  room 2  ....  (0)" in text.splitlines()

    def test_empty_run(self):
        from meeting_rooms.debug import show_rooms
        from meeting_rooms.simulator import simulate

        text = show_rooms(simulate(1, []))
        assert "  room 0    (0)" in text.splitlines()

    def test_bad_scale(self, deferral_result):
        from meeting_rooms.debug import show_rooms

        with pytest.raises(ValueError):
            show_rooms(deferral_result, scale=0)
