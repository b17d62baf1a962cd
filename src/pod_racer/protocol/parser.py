"""FeedParser — converts whitespace-separated feed lines into race models.

The feed is trusted by contract, so nothing is clamped or defaulted here:
anything malformed raises :class:`ProtocolError` straight away.
"""

from __future__ import annotations

from pod_racer.geometry.angles import FULL_TURN, UNSET_ANGLE
from pod_racer.geometry.models import Point
from pod_racer.race.models import Pod


class ProtocolError(ValueError):
    """Raised when the match feed breaks its input contract."""


# Pod line layout: (field name, min, max); None means unbounded on that side.
_POD_FIELDS: tuple[tuple[str, int | None, int | None], ...] = (
    ("x",                  None,        None),
    ("y",                  None,        None),
    ("vx",                 None,        None),
    ("vy",                 None,        None),
    ("angle",              UNSET_ANGLE, FULL_TURN),
    ("next_checkpoint_id", 0,           None),
)


def _ints(line: str, expected: int, what: str) -> list[int]:
    tokens = line.split()
    if len(tokens) != expected:
        raise ProtocolError(f"{what}: expected {expected} integers, got {line.strip()!r}")
    try:
        return [int(t) for t in tokens]
    except ValueError as exc:
        raise ProtocolError(f"{what}: non-integer value in {line.strip()!r}") from exc


def _check_range(value: int, lo: int | None, hi: int | None, what: str) -> int:
    if (lo is not None and value < lo) or (hi is not None and value > hi):
        raise ProtocolError(f"{what}={value} outside [{lo}, {hi}]")
    return value


class FeedParser:
    """Parses single lines of the match feed.

    Args:
        checkpoint_count: When set, pod lines must aim at an index below it.
    """

    def __init__(self, checkpoint_count: int | None = None) -> None:
        self.checkpoint_count = checkpoint_count

    def parse_count(self, line: str, what: str) -> int:
        """Parse a single strictly positive integer (lap or checkpoint count)."""
        (value,) = _ints(line, 1, what)
        return _check_range(value, 1, None, what)

    def parse_point(self, line: str) -> Point:
        x, y = _ints(line, 2, "checkpoint")
        return Point(x, y)

    def parse_pod(self, line: str) -> Pod:
        """Convert ``"x y vx vy angle next_checkpoint_id"`` to a :class:`Pod`."""
        values = _ints(line, len(_POD_FIELDS), "pod")
        for value, (name, lo, hi) in zip(values, _POD_FIELDS):
            _check_range(value, lo, hi, name)
        x, y, vx, vy, angle, next_cp = values
        if self.checkpoint_count is not None and next_cp >= self.checkpoint_count:
            raise ProtocolError(
                f"next_checkpoint_id={next_cp} but only {self.checkpoint_count} checkpoints"
            )
        return Pod(
            position=Point(x, y),
            velocity=Point(vx, vy),
            angle=angle,
            next_checkpoint_id=next_cp,
        )
