from datetime import datetime, timezone
from sqlmodel import Field, SQLModel


class RoundRecord(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    status: str = Field(index=True)
    started_at: datetime
    ended_at: datetime | None = None
    ticks: int = Field(default=0)
    player_count: int = Field(default=0)
    last_standing: str = Field(default="")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class EliminationRecord(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    round_id: int = Field(foreign_key="roundrecord.id", index=True)
    player_id: str
    tick: int
