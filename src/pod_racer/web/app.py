"""FastAPI decision inspector — replays single pilot decisions over HTTP."""

from __future__ import annotations

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException

from pod_racer import __version__
from pod_racer.race.config import PilotConfig
from pod_racer.web.schemas import DecideRequest, DecideResponse, HealthResponse
from pod_racer.web.service import DecisionService

load_dotenv()  # POD_RACER_* overrides must be in the environment before from_env()

app = FastAPI(title="Pod Racer Inspector", version=__version__)


def _service() -> DecisionService:
    return DecisionService(PilotConfig.from_env())


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


@app.post("/api/decide", response_model=DecideResponse)
def decide(req: DecideRequest) -> DecideResponse:
    """Run the targeting and throttle heuristics for one pod."""
    try:
        svc = _service()
    except ValueError as exc:
        raise HTTPException(status_code=500, detail=f"Invalid configuration: {exc}") from exc

    try:
        return svc.decide(req)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
