"""Command-line entry point — plays a match over stdin/stdout.

Usage:
    pod-racer                       # two pods vs two opponents
    pod-racer --trace               # per-pod diagnostics on stderr
    pod-racer --pods 1 --opponents 1

Tuning constants come from ``POD_RACER_*`` environment variables or a
``.env`` file (see :class:`~pod_racer.race.config.PilotConfig`).
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from pod_racer.protocol.feed import MatchFeed
from pod_racer.protocol.parser import ProtocolError
from pod_racer.race.config import PilotConfig
from pod_racer.runtime.loop import PilotLoop

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Pod racing pilot — reads the referee on stdin")
    ap.add_argument("--pods", type=int, default=2, help="Pods controlled by this pilot")
    ap.add_argument("--opponents", type=int, default=2, help="Opposing pods in the feed")
    ap.add_argument("--log-level", default="WARNING", help="Logging level for stderr")
    ap.add_argument("--trace", action="store_true", help="Log every decision (DEBUG)")
    return ap


def main(argv: list[str] | None = None, stdin=None, stdout=None) -> int:
    args = build_parser().parse_args(argv)
    load_dotenv()

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.trace else args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = PilotConfig.from_env()
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    feed = MatchFeed(stdin, pod_count=args.pods, opponent_count=args.opponents)
    loop = PilotLoop(feed, stdout, config)

    try:
        loop.run()
    except ProtocolError as exc:
        _logger.error("Feed contract violated: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
