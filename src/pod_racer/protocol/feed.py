"""MatchFeed — reads the match header and per-turn telemetry from a text stream."""

from __future__ import annotations

import logging
from typing import TextIO

from pod_racer.protocol.parser import FeedParser, ProtocolError
from pod_racer.race.models import Pod, RaceState

_logger = logging.getLogger(__name__)


class MatchFeed:
    """Line-oriented reader for the game referee's input.

    Parameters
    ----------
    stream:
        Text stream with ``readline()`` (``sys.stdin`` in a real match).
    pod_count:
        Pods controlled by this pilot; their lines come first each turn.
    opponent_count:
        Opposing pods following ours each turn.
    """

    def __init__(self, stream: TextIO, pod_count: int = 2, opponent_count: int = 2) -> None:
        if pod_count < 1 or opponent_count < 0:
            raise ValueError("pod_count must be >= 1 and opponent_count >= 0")
        self._stream = stream
        self.pod_count = pod_count
        self.opponent_count = opponent_count
        self._parser = FeedParser()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def read_course(self) -> RaceState:
        """Read laps, checkpoint count and checkpoints; return turn-0 state.

        Raises:
            ProtocolError: On a malformed header or end of input.
        """
        laps = self._parser.parse_count(self._require_line("laps"), "laps")
        count = self._parser.parse_count(self._require_line("checkpoint count"), "checkpoint count")
        checkpoints = [
            self._parser.parse_point(self._require_line(f"checkpoint {i}")) for i in range(count)
        ]
        self._parser.checkpoint_count = count
        _logger.info("Course: %d lap(s), %d checkpoint(s)", laps, count)
        return RaceState(laps=laps, checkpoints=tuple(checkpoints))

    def read_turn(self) -> tuple[list[Pod], list[Pod]] | None:
        """Return ``(our_pods, opponents)`` for one turn, or None at end of input.

        Raises:
            ProtocolError: If input ends part-way through a turn or a line is bad.
        """
        first = self._next_line()
        if first is None:
            return None
        lines = [first] + [
            self._require_line(f"pod {i}")
            for i in range(1, self.pod_count + self.opponent_count)
        ]
        pods = [self._parser.parse_pod(line) for line in lines]
        return pods[: self.pod_count], pods[self.pod_count:]

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _next_line(self) -> str | None:
        while True:
            line = self._stream.readline()
            if not line:
                return None
            if line.strip():
                return line

    def _require_line(self, what: str) -> str:
        line = self._next_line()
        if line is None:
            raise ProtocolError(f"unexpected end of input reading {what}")
        return line
