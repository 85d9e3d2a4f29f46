from enum import Enum

from pydantic import BaseModel, Field

from .. import config
from .color import Color, PALETTE


class Phase(str, Enum):
    LOBBY = "Lobby"
    ROUND = "Round"


class RoundStage(str, Enum):
    IDLE = "Idle"
    SELECTING_TARGET = "SelectingTarget"
    ASSIGNING_PADS = "AssigningPads"
    WAITING_FOR_TICK = "WaitingForTick"
    EVALUATING_ELIMINATION = "EvaluatingElimination"
    ROUND_OVER = "RoundOver"


class RoundStatus(str, Enum):
    COMPLETED = "completed"
    SKIPPED = "skipped"
    ABORTED = "aborted"


class RoundSettings(BaseModel):
    palette: tuple[Color, ...] = PALETTE
    initial_target_interval: float = config.INITIAL_TARGET_INTERVAL
    min_target_interval: float = config.MIN_TARGET_INTERVAL
    interval_decrease_per_tick: float = config.INTERVAL_DECREASE_PER_TICK
    intermission_duration: int = config.INTERMISSION_DURATION
    post_round_delay: float = config.POST_ROUND_DELAY
    placement_settle_delay: float = config.PLACEMENT_SETTLE_DELAY
    start_target_fraction: float = config.START_TARGET_FRACTION
    fraction_decrease_per_round: float = config.FRACTION_DECREASE_PER_ROUND
    min_target_fraction: float = config.MIN_TARGET_FRACTION
    distance_cap_margin: float = config.DISTANCE_CAP_MARGIN


class PlayerInfo(BaseModel):
    player_id: str
    name: str
    connected_at: float
    position: tuple[float, float, float] | None = None


class RoundState(BaseModel):
    tick_interval: float
    round_index: int = 1
    target_color: Color | None = None
    last_target_color_name: str | None = None
    first_tick: bool = True


class Elimination(BaseModel):
    player_id: str
    tick: int


class RoundSummary(BaseModel):
    status: RoundStatus
    started_at: float
    ended_at: float | None = None
    ticks: int = 0
    player_count: int = 0
    eliminations: list[Elimination] = Field(default_factory=list)

    @property
    def last_standing(self) -> list[str]:
        """Players knocked out on the final tick, i.e. the ones who lasted longest."""
        if not self.eliminations:
            return []
        final_tick = max(e.tick for e in self.eliminations)
        return [e.player_id for e in self.eliminations if e.tick == final_tick]
