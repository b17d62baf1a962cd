"""Shared fixtures for web tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from pod_racer.web.app import app


@pytest.fixture
def client():
    """FastAPI test client."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def payload() -> dict:
    """A valid /api/decide body: stationary pod east of a single checkpoint."""
    return {
        "course": {"laps": 3, "checkpoints": [[0, 0]]},
        "pod": {"x": 1000, "y": 0, "vx": 0, "vy": 0, "angle": 180, "next_checkpoint_id": 0},
        "turn": 4,
    }
