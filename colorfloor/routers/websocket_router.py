import logging
import anyio

from fastapi import APIRouter, Query, WebSocket, status

from ..auth import decode_player_token
from ..dependencies import get_runtime
from .websocket_handler import WebSocketHandler

log = logging.getLogger(__name__)
router = APIRouter()


@router.websocket("/ws")
async def websocket_endpoint(
        websocket: WebSocket,
        token: str | None = Query(None),
) -> None:
    """Main WebSocket endpoint for arena connections"""
    runtime = get_runtime()

    token_data = decode_player_token(token)
    if not token_data:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    player_id = token_data.player_id
    await websocket.accept()

    try:
        # Start concurrent tasks for message handling and broadcasting
        async with anyio.create_task_group() as task_group:

            async def run_message_handler() -> None:
                """Task to handle incoming WebSocket messages"""
                await WebSocketHandler.handle_messages(
                    websocket=websocket,
                    player_id=player_id,
                    name=token_data.name,
                    runtime=runtime,
                )
                task_group.cancel_scope.cancel()

            task_group.start_soon(run_message_handler)

            # Handle outgoing broadcasts to this client
            await WebSocketHandler.broadcast_to_client(websocket=websocket, runtime=runtime)

    except Exception as e:
        log.error(f"WebSocket error for player {player_id}: {e}")
        raise
