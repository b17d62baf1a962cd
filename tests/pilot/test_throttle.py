"""Heading and proximity attenuation factors."""

from __future__ import annotations

import pytest

from pod_racer.geometry.models import Point
from pod_racer.pilot.throttle import (
    desired_speed,
    heading_factor,
    proximity_factor,
    rotational_error,
)
from pod_racer.race.models import Pod


def _make_pod(**kwargs) -> Pod:
    defaults = dict(
        position=Point(0, 0),
        velocity=Point(0, 0),
        angle=0,
        next_checkpoint_id=0,
    )
    defaults.update(kwargs)
    return Pod(**defaults)


FAR_EAST = Point(10000, 0)


def test_rotational_error_against_bearing():
    assert rotational_error(_make_pod(angle=0), FAR_EAST) == 0
    assert rotational_error(_make_pod(angle=90), FAR_EAST) == 90
    assert rotational_error(_make_pod(angle=200), FAR_EAST) == 160


def test_rotational_error_zero_before_first_move():
    assert rotational_error(_make_pod(angle=-1), Point(0, -5000)) == 0


def test_heading_factor_full_when_facing_target():
    assert heading_factor(_make_pod(angle=0), FAR_EAST) == 1.0


def test_heading_factor_linear_then_floored():
    assert heading_factor(_make_pod(angle=25), FAR_EAST) == pytest.approx(0.5)
    assert heading_factor(_make_pod(angle=50), FAR_EAST) == pytest.approx(0.0)
    assert heading_factor(_make_pod(angle=120), FAR_EAST) == 0.0


def test_heading_factor_non_increasing_with_error():
    factors = [heading_factor(_make_pod(angle=a), FAR_EAST) for a in range(0, 181, 5)]
    assert factors[0] == 1.0
    assert all(b <= a for a, b in zip(factors, factors[1:]))
    assert factors[-1] == 0.0


@pytest.mark.parametrize("distance,expected", [
    (0, 0.0), (250, 0.5), (500, 1.0), (20000, 1.0),
])
def test_proximity_factor(distance, expected):
    assert proximity_factor(_make_pod(), Point(distance, 0)) == pytest.approx(expected)


def test_desired_speed_combines_factors():
    pod = _make_pod(angle=25)
    assert desired_speed(pod, Point(250, 0)) == pytest.approx(100 * 0.5 * 0.5)


def test_desired_speed_zero_while_coasting():
    assert desired_speed(_make_pod(), FAR_EAST, coasting=True) == 0.0
