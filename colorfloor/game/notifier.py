from broadcaster import Broadcast

import json
import logging

from ..config import ARENA_CHANNEL
from ..models import Color, Phase

log = logging.getLogger(__name__)


class ArenaNotifier:
    """Publishes arena events to every subscribed websocket."""

    def __init__(self, broadcast: Broadcast, channel: str = ARENA_CHANNEL):
        self.broadcast = broadcast
        self.channel = channel

    async def publish(self, message: dict) -> None:
        await self.broadcast.publish(channel=self.channel, message=json.dumps(message))

    async def on_phase_changed(self, phase: Phase) -> None:
        log.info(f"Phase changed to {phase.value}")
        await self.publish({"type": "phase", "phase": phase.value})

    async def on_countdown_tick(self, seconds_remaining: int) -> None:
        await self.publish({"type": "countdown", "seconds": seconds_remaining})

    async def on_target_color_changed(self, color: Color) -> None:
        await self.publish(
            {"type": "target_color", "name": color.name, "rgb": list(color.rgb)}
        )

    async def on_pad_colors_changed(self, assignments: dict[str, str]) -> None:
        await self.publish({"type": "pad_colors", "pads": assignments})
