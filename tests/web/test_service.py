"""DecisionService — request → race models → decision."""

from __future__ import annotations

import pytest

from pod_racer.geometry.models import Point
from pod_racer.race.config import PilotConfig
from pod_racer.web.schemas import DecideRequest
from pod_racer.web.service import DecisionService


def _request(**pod) -> DecideRequest:
    pod_fields = {"x": 1000, "y": 0, "angle": 180, "next_checkpoint_id": 0}
    pod_fields.update(pod)
    return DecideRequest(
        course={"laps": 2, "checkpoints": [[0, 0], [4000, 4000]]},
        pod=pod_fields,
        turn=3,
    )


def test_build_race():
    race, pod = DecisionService().build_race(_request(vx=5, vy=-5))
    assert race.laps == 2
    assert race.checkpoints == (Point(0, 0), Point(4000, 4000))
    assert race.turn == 3
    assert race.pods == (pod,)
    assert pod.velocity == Point(5, -5)


def test_build_race_rejects_index_past_ring():
    with pytest.raises(ValueError):
        DecisionService().build_race(_request(next_checkpoint_id=2))


def test_decide_reports_plan():
    resp = DecisionService().decide(_request())
    assert resp.checkpoint_id == 0
    assert resp.coasting is False
    assert resp.command == "0 0 100"


def test_decide_uses_config_marker():
    svc = DecisionService(PilotConfig(boost_marker="NITRO"))
    resp = svc.decide(_request(angle=-1))
    assert resp.command == "0 0 NITRO"
