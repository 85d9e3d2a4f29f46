import uuid

from fastapi import APIRouter

from ..auth import create_player_token
from ..dependencies import RuntimeDep
from ..schemas import ArenaStatus, JoinRequest, PlayerPublic, Token

router = APIRouter()


@router.post("/join", response_model=Token)
async def join(request: JoinRequest):
    player_id = str(uuid.uuid4())[:8]
    token = create_player_token(player_id, request.name)
    return Token(access_token=token, token_type="bearer", player_id=player_id)


@router.get("/status", response_model=ArenaStatus)
async def get_status(runtime: RuntimeDep):
    players = [
        PlayerPublic(player_id=p.player_id, name=p.name, position=p.position)
        for p in runtime.arena.players
    ]
    return ArenaStatus(players=players, **runtime.session.snapshot())
