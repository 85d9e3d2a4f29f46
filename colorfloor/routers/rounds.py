from typing import Annotated

from fastapi import APIRouter, HTTPException, Query
from sqlmodel import select

from ..database import SessionDep
from ..models import EliminationRecord, RoundRecord
from ..schemas import EliminationPublic, RoundDetail, RoundPublic

router = APIRouter(prefix="/rounds", tags=["rounds"])


def _to_public(record: RoundRecord) -> dict:
    return {
        "id": record.id,
        "status": record.status,
        "started_at": record.started_at,
        "ended_at": record.ended_at,
        "ticks": record.ticks,
        "player_count": record.player_count,
        "last_standing": [p for p in record.last_standing.split(",") if p],
    }


@router.get("", response_model=list[RoundPublic])
def read_rounds(
        session: SessionDep,
        offset: int = 0,
        limit: Annotated[int, Query(le=100)] = 20,
):
    rounds = session.exec(
        select(RoundRecord).order_by(RoundRecord.id.desc()).offset(offset).limit(limit)
    ).all()
    return [RoundPublic(**_to_public(r)) for r in rounds]


@router.get("/{round_id}", response_model=RoundDetail)
def read_round(round_id: int, session: SessionDep):
    record = session.get(RoundRecord, round_id)
    if not record:
        raise HTTPException(status_code=404, detail="Round not found")

    eliminations = session.exec(
        select(EliminationRecord)
        .where(EliminationRecord.round_id == round_id)
        .order_by(EliminationRecord.tick, EliminationRecord.id)
    ).all()
    return RoundDetail(
        **_to_public(record),
        eliminations=[EliminationPublic(player_id=e.player_id, tick=e.tick) for e in eliminations],
    )
