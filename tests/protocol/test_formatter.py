"""CommandFormatter — referee output lines."""

from __future__ import annotations

from pod_racer.geometry.models import Point
from pod_racer.protocol.formatter import CommandFormatter
from pod_racer.race.models import Command


def test_formats_speed():
    assert CommandFormatter().format(Command(Point(8000, -12), 73)) == "8000 -12 73"


def test_formats_boost_marker_instead_of_speed():
    assert CommandFormatter().format(Command(Point(1, 2), 0, boost=True)) == "1 2 BOOST"


def test_custom_boost_marker():
    cmd = Command(Point(1, 2), boost=True)
    assert CommandFormatter("NITRO").format(cmd) == "1 2 NITRO"


def test_speed_already_clamped():
    assert CommandFormatter().format(Command(Point(0, 0), 250)) == "0 0 100"
