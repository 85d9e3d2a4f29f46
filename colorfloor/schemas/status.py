from datetime import datetime
from pydantic import BaseModel


class PlayerPublic(BaseModel):
    player_id: str
    name: str
    position: tuple[float, float, float] | None


class ArenaStatus(BaseModel):
    phase: str
    countdown: int | None
    cycles: int
    stage: str
    round_index: int | None
    target_color: str | None
    tick_interval: float | None
    active_players: list[str]
    players: list[PlayerPublic]


class EliminationPublic(BaseModel):
    player_id: str
    tick: int


class RoundPublic(BaseModel):
    id: int
    status: str
    started_at: datetime
    ended_at: datetime | None
    ticks: int
    player_count: int
    last_standing: list[str]


class RoundDetail(RoundPublic):
    eliminations: list[EliminationPublic]
