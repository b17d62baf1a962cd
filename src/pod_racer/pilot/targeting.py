"""Targeting heuristic — will the pod reach its checkpoint without correction?

The accuracy test projects the pod's direction of travel out to the
*current* distance from the checkpoint and checks that point against the
capture radius. It is a single linear projection, not a line/circle
intersection: a trajectory that grazes the radius at a different range can
be misjudged either way.
"""

from __future__ import annotations

from pod_racer.geometry.models import Point, Vector
from pod_racer.race.config import DEFAULT_CONFIG, PilotConfig
from pod_racer.race.models import Pod, RaceState


def closest_approach(pod: Pod, target: Point) -> Point:
    """Point reached by travelling ``distance(pod, target)`` along the pod's heading."""
    reach = Vector(pod.distance(target), pod.heading())
    return pod.position + reach.to_point()


def has_coast_reach(pod: Pod, target: Point, config: PilotConfig = DEFAULT_CONFIG) -> bool:
    """True if coasting alone covers the distance to *target*."""
    return pod.coast_distance(config.coast_factor) >= pod.distance(target)


def is_on_line(pod: Pod, target: Point, config: PilotConfig = DEFAULT_CONFIG) -> bool:
    """True if the current line of travel passes within the capture radius."""
    return target.distance(closest_approach(pod, target)) <= config.checkpoint_radius


def expect_to_hit_checkpoint(
    race: RaceState,
    pod: Pod,
    config: PilotConfig = DEFAULT_CONFIG,
) -> bool:
    """Return True if the pod will capture its aimed checkpoint by coasting."""
    cp = race.checkpoint_for(pod)
    return has_coast_reach(pod, cp, config) and is_on_line(pod, cp, config)
