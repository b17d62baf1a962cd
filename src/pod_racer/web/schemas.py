"""Pydantic request/response schemas for the decision inspector API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CourseModel(BaseModel):
    laps: int = Field(default=3, ge=1)
    checkpoints: list[tuple[int, int]] = Field(min_length=1)


class PodModel(BaseModel):
    x: int
    y: int
    vx: int = 0
    vy: int = 0
    angle: int = Field(ge=-1, le=360)
    next_checkpoint_id: int = Field(default=0, ge=0)


class DecideRequest(BaseModel):
    course: CourseModel
    pod: PodModel
    turn: int = Field(default=1, ge=1)


class DecideResponse(BaseModel):
    target_x: int
    target_y: int
    speed: int
    boost: bool
    checkpoint_id: int
    coasting: bool
    command: str


class HealthResponse(BaseModel):
    status: str
    version: str
