"""Race state: pods, checkpoint ring, commands and tuning constants."""

from pod_racer.race.config import DEFAULT_CONFIG, PilotConfig
from pod_racer.race.models import CheckpointRef, Command, Pod, RaceState, resolved_point

__all__ = [
    "DEFAULT_CONFIG",
    "CheckpointRef",
    "Command",
    "PilotConfig",
    "Pod",
    "RaceState",
    "resolved_point",
]
