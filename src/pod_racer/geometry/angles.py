"""Angle helpers in whole degrees."""

from __future__ import annotations

FULL_TURN = 360
HALF_TURN = 180
UNSET_ANGLE = -1  # facing reported before the first move of a match


def normalize_direction(direction: int) -> int:
    """Map any integer degree value into [0, 360).

    Python's ``%`` takes the sign of the divisor, so negative inputs wrap
    correctly (-90 → 270).
    """
    return int(direction) % FULL_TURN


def angle_diff(a1: int, a2: int, unset: int = UNSET_ANGLE) -> int:
    """Return the smaller difference between two headings, in [0, 180].

    Either input equal to *unset* means "no heading yet" and yields 0.

    Raises:
        ValueError: If a heading is outside [0, 360] and not *unset*.
    """
    if a1 == unset or a2 == unset:
        return 0
    for a in (a1, a2):
        if not 0 <= a <= FULL_TURN:
            raise ValueError(f"heading {a} outside [0, {FULL_TURN}]")
    return HALF_TURN - abs(abs(a1 - a2) - HALF_TURN)
