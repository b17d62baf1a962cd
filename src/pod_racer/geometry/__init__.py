"""Integer plane geometry for pod positions, velocities and headings.

Public API
----------
Point               - cartesian offset in game distance units
Vector              - polar magnitude + direction in degrees
normalize_direction - any integer degree value → [0, 360)
angle_diff          - smaller angular difference, sentinel-aware
"""

from pod_racer.geometry.angles import angle_diff, normalize_direction
from pod_racer.geometry.models import Point, Vector, round_half_away

__all__ = [
    "Point",
    "Vector",
    "angle_diff",
    "normalize_direction",
    "round_half_away",
]
