"""Race data models: pods, the checkpoint ring and the per-turn command."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from pod_racer.geometry.models import Point, Vector
from pod_racer.race.config import DEFAULT_CONFIG, THROTTLE_LIMIT


@dataclass(frozen=True)
class Pod:
    """One craft's telemetry for the current turn. Never mutated."""

    position: Point
    """Current location."""

    velocity: Point
    """Displacement per turn."""

    angle: int
    """Facing in degrees [0, 360], or -1 before the first move."""

    next_checkpoint_id: int
    """Index of the checkpoint this pod is aiming at, as reported by the feed."""

    def distance(self, point: Point) -> int:
        return self.position.distance(point)

    def speed(self) -> int:
        return self.velocity.magnitude()

    def heading(self) -> int:
        """Direction of travel (not facing) in [0, 360)."""
        return self.velocity.angle()

    def coast_offset(self, coast_factor: float = DEFAULT_CONFIG.coast_factor) -> Point:
        """Displacement still to come if thrust stopped now.

        Closed form of the drag series ``v + v*d + v*d² + ...`` rather than a
        turn-by-turn simulation.
        """
        return self.velocity * coast_factor

    def coast_destination(self, coast_factor: float = DEFAULT_CONFIG.coast_factor) -> Point:
        """Where the pod would come to rest."""
        return self.position + self.coast_offset(coast_factor)

    def coast_vector(self, coast_factor: float = DEFAULT_CONFIG.coast_factor) -> Vector:
        return self.coast_offset(coast_factor).to_vector()

    def coast_distance(self, coast_factor: float = DEFAULT_CONFIG.coast_factor) -> int:
        return self.coast_vector(coast_factor).magnitude


@dataclass(frozen=True)
class RaceState:
    """Course layout plus the telemetry of the current turn.

    The checkpoint ring is fixed for the match. :meth:`next_turn` returns a
    new state; nothing here is mutated in place.
    """

    laps: int
    checkpoints: tuple[Point, ...]
    turn: int = 0
    pods: tuple[Pod, ...] = field(default=(), repr=False)
    opponents: tuple[Pod, ...] = field(default=(), repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "checkpoints", tuple(self.checkpoints))
        if not self.checkpoints:
            raise ValueError("A race needs at least one checkpoint")

    @property
    def checkpoint_count(self) -> int:
        return len(self.checkpoints)

    @property
    def is_first_turn(self) -> bool:
        """Turn-counter bookkeeping only; boosting keys off the pod's unset facing."""
        return self.turn == 1

    def get_checkpoint(self, index: int) -> Point:
        """Checkpoint *index*, wrapping around the ring (count → 0)."""
        return self.checkpoints[index % self.checkpoint_count]

    def checkpoint_for(self, pod: Pod) -> Point:
        return self.get_checkpoint(pod.next_checkpoint_id)

    def checkpoint_ref(self, index: int) -> CheckpointRef:
        return CheckpointRef(self, index)

    def next_turn(self, pods, opponents=()) -> RaceState:
        """State for the following turn carrying fresh telemetry."""
        return replace(self, turn=self.turn + 1, pods=tuple(pods), opponents=tuple(opponents))


@dataclass(frozen=True)
class CheckpointRef:
    """A position in the checkpoint ring, bound read-only to a :class:`RaceState`."""

    race: RaceState = field(repr=False)
    index: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "index", self.index % self.race.checkpoint_count)

    @property
    def next_index(self) -> int:
        return (self.index + 1) % self.race.checkpoint_count

    def point(self) -> Point:
        return self.race.get_checkpoint(self.index)

    def next_point(self) -> Point:
        return self.race.get_checkpoint(self.next_index)

    def advance(self) -> CheckpointRef:
        """Reference to the following checkpoint; ``self`` is left unchanged."""
        return CheckpointRef(self.race, self.next_index)


def resolved_point(ref: CheckpointRef, race: RaceState | None = None) -> Point:
    """Resolve *ref* against *race* (defaults to the state it was taken from)."""
    return (race or ref.race).get_checkpoint(ref.index)


@dataclass(frozen=True)
class Command:
    """One pod's order for this turn: steer toward *target* at *speed*.

    *speed* is truncated to an integer and clamped to [0, *max_speed*], and
    never above 100 whatever *max_speed* says.
    """

    target: Point
    speed: int = DEFAULT_CONFIG.max_speed
    boost: bool = False
    max_speed: int = field(default=DEFAULT_CONFIG.max_speed, repr=False)

    def __post_init__(self) -> None:
        ceiling = min(self.max_speed, THROTTLE_LIMIT)
        object.__setattr__(self, "speed", min(ceiling, max(0, int(self.speed))))

    def with_speed(self, speed: float) -> Command:
        return replace(self, speed=speed)
