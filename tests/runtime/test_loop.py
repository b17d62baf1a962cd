"""PilotLoop — full turns from feed to output lines."""

from __future__ import annotations

import io
import logging
from unittest.mock import MagicMock

import pytest

from pod_racer.geometry.models import Point
from pod_racer.protocol.feed import MatchFeed
from pod_racer.race.models import Pod, RaceState
from pod_racer.runtime.loop import PilotLoop

MATCH = (
    "1\n"
    "2\n"
    "0 0\n"
    "8000 0\n"
    # turn 1: both pods unset, aiming at checkpoint 1
    "4000 0 0 0 -1 1\n"
    "4000 1000 0 0 -1 1\n"
    "3000 0 0 0 -1 1\n"
    "3000 1000 0 0 -1 1\n"
    # turn 2: pod A lined up but slow, pod B about to capture checkpoint 1
    "4000 0 0 0 0 1\n"
    "7500 0 300 0 0 1\n"
    "3000 0 0 0 0 1\n"
    "3000 1000 0 0 0 1\n"
)


def _loop(text: str = MATCH) -> tuple[PilotLoop, io.StringIO]:
    out = io.StringIO()
    return PilotLoop(MatchFeed(io.StringIO(text)), out), out


def test_run_plays_every_turn():
    loop, out = _loop()
    assert loop.run() == 2
    assert out.getvalue().splitlines() == [
        "8000 0 BOOST",
        "8000 0 BOOST",
        "8000 0 100",
        "0 0 0",
    ]


def test_tick_reports_commands_then_none():
    loop, _ = _loop()
    loop.start()
    assert loop.tick() == 2
    assert loop.race.is_first_turn
    assert loop.tick() == 2
    assert loop.race.turn == 2
    assert loop.tick() is None


def test_opponents_carried_on_race_state():
    loop, _ = _loop()
    loop.start()
    loop.tick()
    assert [p.position for p in loop.race.opponents] == [Point(3000, 0), Point(3000, 1000)]


def test_tick_before_start_raises():
    loop, _ = _loop()
    with pytest.raises(RuntimeError):
        loop.tick()


def test_run_logs_end_of_input(caplog):
    loop, _ = _loop()
    with caplog.at_level(logging.INFO, logger="pod_racer.runtime.loop"):
        loop.run()
    assert "No more input after 2 turn(s)" in caplog.text


def test_loop_with_mock_feed_flushes_sink():
    pod = Pod(position=Point(0, 0), velocity=Point(0, 0), angle=0, next_checkpoint_id=0)
    feed = MagicMock()
    feed.read_course.return_value = RaceState(laps=1, checkpoints=(Point(5000, 0),))
    feed.read_turn.side_effect = [([pod], []), None]
    sink = MagicMock()

    loop = PilotLoop(feed, sink)
    assert loop.run() == 1
    sink.write.assert_called_once_with("5000 0 100\n")
    sink.flush.assert_called_once()
