"""DecisionService — runs the pilot heuristics for a single inspected pod."""

from __future__ import annotations

from pod_racer.geometry.models import Point
from pod_racer.pilot.decision import Decision, plan
from pod_racer.protocol.formatter import CommandFormatter
from pod_racer.race.config import DEFAULT_CONFIG, PilotConfig
from pod_racer.race.models import Pod, RaceState
from pod_racer.web.schemas import DecideRequest, DecideResponse


class DecisionService:
    """Builds race models from an API request and reports the decision.

    Args:
        config: Tuning constants; defaults to the built-in values.
    """

    def __init__(self, config: PilotConfig = DEFAULT_CONFIG) -> None:
        self._cfg = config
        self._formatter = CommandFormatter(config.boost_marker)

    def build_race(self, req: DecideRequest) -> tuple[RaceState, Pod]:
        """Convert *req* into the turn's :class:`RaceState` and :class:`Pod`.

        Raises:
            ValueError: If the pod aims past the end of the checkpoint ring.
        """
        checkpoints = tuple(Point(x, y) for x, y in req.course.checkpoints)
        if req.pod.next_checkpoint_id >= len(checkpoints):
            raise ValueError(
                f"next_checkpoint_id {req.pod.next_checkpoint_id} out of range "
                f"for {len(checkpoints)} checkpoint(s)"
            )
        pod = Pod(
            position=Point(req.pod.x, req.pod.y),
            velocity=Point(req.pod.vx, req.pod.vy),
            angle=req.pod.angle,
            next_checkpoint_id=req.pod.next_checkpoint_id,
        )
        race = RaceState(laps=req.course.laps, checkpoints=checkpoints, turn=req.turn, pods=(pod,))
        return race, pod

    def decide(self, req: DecideRequest) -> DecideResponse:
        race, pod = self.build_race(req)
        decision: Decision = plan(pod, race, self._cfg)
        cmd = decision.command
        return DecideResponse(
            target_x=cmd.target.x,
            target_y=cmd.target.y,
            speed=cmd.speed,
            boost=cmd.boost,
            checkpoint_id=decision.checkpoint.index,
            coasting=decision.coasting,
            command=self._formatter.format(cmd),
        )
