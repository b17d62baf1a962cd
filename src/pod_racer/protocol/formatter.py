"""CommandFormatter — renders a :class:`Command` as one referee output line."""

from __future__ import annotations

from pod_racer.race.config import DEFAULT_CONFIG
from pod_racer.race.models import Command


class CommandFormatter:
    """Formats ``"<x> <y> <THROTTLE>"`` where THROTTLE is 0-100 or the boost marker."""

    def __init__(self, boost_marker: str = DEFAULT_CONFIG.boost_marker) -> None:
        self.boost_marker = boost_marker

    def format(self, command: Command) -> str:
        throttle = self.boost_marker if command.boost else str(command.speed)
        return f"{command.target.x} {command.target.y} {throttle}"
