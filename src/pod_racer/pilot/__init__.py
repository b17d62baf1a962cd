"""Targeting, throttle and per-turn decision heuristics."""

from pod_racer.pilot.decision import Decision, decide, plan
from pod_racer.pilot.targeting import expect_to_hit_checkpoint
from pod_racer.pilot.throttle import desired_speed, heading_factor, proximity_factor

__all__ = [
    "Decision",
    "decide",
    "desired_speed",
    "expect_to_hit_checkpoint",
    "heading_factor",
    "plan",
    "proximity_factor",
]
