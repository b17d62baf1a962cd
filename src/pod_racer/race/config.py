"""PilotConfig — named tuning constants for the physics model and heuristics.

Every field can be overridden through a ``POD_RACER_<FIELD>`` environment
variable (upper-case field name), e.g. ``POD_RACER_CHECKPOINT_RADIUS=550``.
Entry points call :func:`dotenv.load_dotenv` before :meth:`PilotConfig.from_env`
so a local ``.env`` file works the same way.
"""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass

ENV_PREFIX = "POD_RACER_"
THROTTLE_LIMIT = 100  # referee accepts throttles 0-100 only


@dataclass(frozen=True)
class PilotConfig:
    """Fixed constants used by the coast model, targeting and throttle."""

    checkpoint_radius: int = 600
    """Capture radius of every checkpoint, in distance units."""

    drag: float = 0.85
    """Fraction of velocity kept from one turn to the next."""

    rotation_slowdown: float = 0.02
    """Speed factor lost per degree of heading error (0 at 50°)."""

    proximity_slowdown: float = 0.002
    """Speed factor gained per distance unit to the target (1 at 500)."""

    base_speed: int = 100
    """Throttle before attenuation."""

    max_speed: int = 100
    """Upper clamp on any commanded throttle, at most 100."""

    boost_marker: str = "BOOST"
    """Literal written in place of the throttle to request a boost."""

    drift_compensation: float = 0.0
    """Aim ``velocity * drift_compensation`` short of the target point."""

    def __post_init__(self) -> None:
        if not 0.0 <= self.drag < 1.0:
            raise ValueError(f"drag must be in [0, 1), got {self.drag}")
        if self.checkpoint_radius < 0:
            raise ValueError("checkpoint_radius must be >= 0")
        if not 0 <= self.max_speed <= THROTTLE_LIMIT:
            raise ValueError(f"max_speed must be in [0, {THROTTLE_LIMIT}], got {self.max_speed}")
        if not 0 <= self.base_speed <= self.max_speed:
            raise ValueError("base_speed must be in [0, max_speed]")

    @property
    def coast_factor(self) -> float:
        """Sum of the geometric drag series: ``1 / (1 - drag)`` (≈6.667 at 0.85)."""
        return 1.0 / (1.0 - self.drag)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> PilotConfig:
        """Build a config from ``POD_RACER_*`` variables, defaults elsewhere.

        Raises:
            ValueError: If a variable cannot be converted to its field's type.
        """
        env = os.environ if environ is None else environ
        overrides: dict = {}
        for f in dataclasses.fields(cls):
            raw = env.get(ENV_PREFIX + f.name.upper())
            if raw is None or raw == "":
                continue
            convert = {"int": int, "float": float}.get(f.type, str)
            try:
                overrides[f.name] = convert(raw)
            except ValueError as exc:
                raise ValueError(f"{ENV_PREFIX}{f.name.upper()}={raw!r}: {exc}") from exc
        return cls(**overrides)


DEFAULT_CONFIG = PilotConfig()
