"""Match feed input and command output.

Public API
----------
MatchFeed        - reads course header and per-turn telemetry from a stream
FeedParser       - single feed line → Point / Pod
ProtocolError    - raised on malformed feed input
CommandFormatter - Command → referee output line
"""

from pod_racer.protocol.feed import MatchFeed
from pod_racer.protocol.formatter import CommandFormatter
from pod_racer.protocol.parser import FeedParser, ProtocolError

__all__ = [
    "CommandFormatter",
    "FeedParser",
    "MatchFeed",
    "ProtocolError",
]
