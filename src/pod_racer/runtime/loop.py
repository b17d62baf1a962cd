"""PilotLoop — connects the match feed to the decision core and the output sink."""

from __future__ import annotations

import logging

from pod_racer.pilot.decision import decide
from pod_racer.protocol.formatter import CommandFormatter
from pod_racer.race.config import DEFAULT_CONFIG, PilotConfig
from pod_racer.race.models import RaceState

_logger = logging.getLogger(__name__)


class PilotLoop:
    """Runs the read → decide → write cycle once per turn.

    Parameters
    ----------
    feed:
        A :class:`~pod_racer.protocol.feed.MatchFeed` (``read_course()`` and
        ``read_turn()``).
    sink:
        Text stream the commands are written to (``sys.stdout`` in a match).
    config:
        Tuning constants for the heuristics.
    formatter:
        Renders each command; defaults to one using ``config.boost_marker``.
    """

    def __init__(
        self,
        feed,
        sink,
        config: PilotConfig = DEFAULT_CONFIG,
        formatter: CommandFormatter | None = None,
    ) -> None:
        self._feed = feed
        self._sink = sink
        self._cfg = config
        self._formatter = formatter or CommandFormatter(config.boost_marker)
        self.race: RaceState | None = None

    def start(self) -> RaceState:
        """Read the course header. Must be called once before :meth:`tick`."""
        self.race = self._feed.read_course()
        return self.race

    def tick(self) -> int | None:
        """Play one turn.

        Returns the number of commands written, or None once the feed is
        exhausted.
        """
        if self.race is None:
            raise RuntimeError("PilotLoop.start() must be called before tick()")

        telemetry = self._feed.read_turn()
        if telemetry is None:
            return None

        pods, opponents = telemetry
        self.race = self.race.next_turn(pods, opponents)

        lines = [self._formatter.format(decide(pod, self.race, self._cfg)) for pod in pods]
        for line in lines:
            self._sink.write(line + "\n")
        self._sink.flush()
        return len(lines)

    def run(self) -> int:
        """Play until the feed ends; return the number of turns played."""
        if self.race is None:
            self.start()
        while self.tick() is not None:
            pass
        turns = self.race.turn
        _logger.info("No more input after %d turn(s)", turns)
        return turns
