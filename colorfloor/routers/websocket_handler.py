import json
import logging
from fastapi import WebSocket
from fastapi.websockets import WebSocketState

from ..dependencies import ArenaRuntime

log = logging.getLogger(__name__)


def parse_position(raw) -> tuple[float, float, float]:
    if not isinstance(raw, (list, tuple)) or len(raw) != 3:
        raise ValueError(f"Position must be [x, y, z], got {raw!r}")
    x, y, z = (float(v) for v in raw)
    return (x, y, z)


class WebSocketHandler:
    """Handles WebSocket message processing and communication"""

    @staticmethod
    async def handle_messages(
            websocket: WebSocket,
            player_id: str,
            name: str,
            runtime: ArenaRuntime,
    ) -> None:
        """Main message handling loop for WebSocket connections"""
        arena = runtime.arena
        if arena.get_player(player_id):
            await websocket.close(code=4002, reason="Already connected")
            return

        arena.add_player(player_id, name)
        try:
            await runtime.notifier.publish(
                {
                    "type": "player_joined",
                    "player_id": player_id,
                    "name": name,
                    "players": arena.list_players(),
                }
            )
            await websocket.send_json(
                {"type": "welcome", "player_id": player_id, **runtime.session.snapshot()}
            )

            async for message in websocket.iter_text():
                try:
                    msg_data = json.loads(message)
                    await WebSocketHandler._process_message(
                        msg_data, websocket, player_id, runtime
                    )
                except (json.JSONDecodeError, ValueError, TypeError, AttributeError) as e:
                    log.error(f"Error processing message from {player_id}: {e}")
                    await websocket.send_json(
                        {"type": "error", "message": "Invalid message format"}
                    )

        finally:
            runtime.disconnect(player_id)
            await runtime.notifier.publish(
                {
                    "type": "player_left",
                    "player_id": player_id,
                    "players": arena.list_players(),
                }
            )

    @staticmethod
    async def _process_message(
            msg_data: dict,
            websocket: WebSocket,
            player_id: str,
            runtime: ArenaRuntime,
    ) -> None:
        """Process individual WebSocket messages based on type"""
        msg_type = msg_data.get("type")

        if msg_type == "move":
            position = parse_position(msg_data.get("position"))
            runtime.arena.move_player(player_id, position)
        elif msg_type == "ping":
            await websocket.send_json({"type": "pong"})
        else:
            await websocket.send_json(
                {"type": "error", "message": f"Unknown message type: {msg_type}"}
            )

    @staticmethod
    async def broadcast_to_client(websocket: WebSocket, runtime: ArenaRuntime) -> None:
        """Handle broadcasting arena events to WebSocket client"""
        async with runtime.broadcast.subscribe(channel=runtime.notifier.channel) as subscriber:
            async for event in subscriber:
                if websocket.client_state == WebSocketState.CONNECTED:
                    await websocket.send_text(event.message)
