"""Per-turn decision: pick a target point, a throttle and the boost flag."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pod_racer.geometry.angles import UNSET_ANGLE
from pod_racer.geometry.models import Point
from pod_racer.pilot.targeting import expect_to_hit_checkpoint
from pod_racer.pilot.throttle import desired_speed
from pod_racer.race.config import DEFAULT_CONFIG, PilotConfig
from pod_racer.race.models import CheckpointRef, Command, Pod, RaceState

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Decision:
    """Everything :func:`plan` worked out for one pod on one turn."""

    checkpoint: CheckpointRef
    """Checkpoint steered at this turn (possibly one past the reported one)."""

    coasting: bool
    """True if the reported checkpoint is expected to be captured by coasting."""

    command: Command


def aim_point(pod: Pod, checkpoint: Point, config: PilotConfig = DEFAULT_CONFIG) -> Point:
    """Checkpoint position, shifted against the pod's drift if configured."""
    if not config.drift_compensation:
        return checkpoint
    return checkpoint - pod.velocity * config.drift_compensation


def plan(pod: Pod, race: RaceState, config: PilotConfig = DEFAULT_CONFIG) -> Decision:
    """Work out this turn's :class:`Decision` for *pod*.

    The advance past a captured checkpoint only affects this turn's target;
    the next turn starts again from the index the feed reports.
    """
    ref = race.checkpoint_ref(pod.next_checkpoint_id)
    coasting = expect_to_hit_checkpoint(race, pod, config)
    if coasting:
        ref = ref.advance()

    target = aim_point(pod, ref.point(), config)
    speed = desired_speed(pod, target, coasting=coasting, config=config)
    command = Command(
        target=target,
        speed=speed,
        boost=pod.angle == UNSET_ANGLE,
        max_speed=config.max_speed,
    )

    if _logger.isEnabledFor(logging.DEBUG):
        _logger.debug(
            "moving from %s to (%d) Distance: %d (%d°) from us. Pointing %d° Velocity %d°",
            pod.position,
            ref.index,
            pod.distance(command.target),
            (command.target - pod.position).angle(),
            pod.angle,
            pod.heading(),
        )

    return Decision(checkpoint=ref, coasting=coasting, command=command)


def decide(pod: Pod, race: RaceState, config: PilotConfig = DEFAULT_CONFIG) -> Command:
    """Return the :class:`Command` for *pod* this turn."""
    return plan(pod, race, config).command
