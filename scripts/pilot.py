"""Match entry point for environments that run a single script.

Usage:
    python scripts/pilot.py < match_input.txt
    python scripts/pilot.py --trace
"""

from __future__ import annotations

import sys

from pod_racer.runtime.cli import main

if __name__ == "__main__":
    sys.exit(main())
