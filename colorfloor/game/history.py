from datetime import datetime, timezone

from sqlalchemy.engine import Engine
from sqlmodel import Session

from ..models import EliminationRecord, RoundRecord, RoundStatus, RoundSummary

import logging

log = logging.getLogger(__name__)


def _to_datetime(timestamp: float | None) -> datetime | None:
    if timestamp is None:
        return None
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


class SqlRoundRecorder:
    """Stores finished rounds and their eliminations."""

    def __init__(self, engine: Engine):
        self.engine = engine

    async def record_round(self, summary: RoundSummary) -> None:
        if summary.status == RoundStatus.SKIPPED:
            return

        with Session(self.engine) as session:
            record = RoundRecord(
                status=summary.status.value,
                started_at=_to_datetime(summary.started_at),
                ended_at=_to_datetime(summary.ended_at),
                ticks=summary.ticks,
                player_count=summary.player_count,
                last_standing=",".join(summary.last_standing),
            )
            session.add(record)
            session.commit()
            session.refresh(record)

            for elimination in summary.eliminations:
                session.add(
                    EliminationRecord(
                        round_id=record.id,
                        player_id=elimination.player_id,
                        tick=elimination.tick,
                    )
                )
            session.commit()
            log.info(f"Recorded round {record.id} ({record.status}, {record.ticks} ticks)")
