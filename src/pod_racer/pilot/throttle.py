"""Throttle heuristic — attenuate speed for heading error and proximity.

Both factors lie in [0, 1] and are multiplied into the base speed:

  - heading:   ``1 - error° * rotation_slowdown``  (0 from 50° of error)
  - proximity: ``distance * proximity_slowdown``   (1 from 500 units away)
"""

from __future__ import annotations

from pod_racer.geometry.angles import UNSET_ANGLE, angle_diff
from pod_racer.geometry.models import Point
from pod_racer.race.config import DEFAULT_CONFIG, PilotConfig
from pod_racer.race.models import Pod


def _clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, value))


def rotational_error(pod: Pod, target: Point) -> int:
    """Degrees between the pod's facing and the bearing to *target*, in [0, 180]."""
    bearing = (target - pod.position).angle()
    return angle_diff(pod.angle, bearing, unset=UNSET_ANGLE)


def heading_factor(pod: Pod, target: Point, config: PilotConfig = DEFAULT_CONFIG) -> float:
    error = rotational_error(pod, target)
    return _clamp(1.0 - error * config.rotation_slowdown)


def proximity_factor(pod: Pod, target: Point, config: PilotConfig = DEFAULT_CONFIG) -> float:
    return _clamp(pod.distance(target) * config.proximity_slowdown)


def desired_speed(
    pod: Pod,
    target: Point,
    coasting: bool = False,
    config: PilotConfig = DEFAULT_CONFIG,
) -> float:
    """Attenuated throttle toward *target*.

    *coasting* means the current checkpoint is already expected to be
    captured, so the base speed is zero until the feed reports it passed.
    """
    base = 0.0 if coasting else float(config.base_speed)
    return base * heading_factor(pod, target, config) * proximity_factor(pod, target, config)
