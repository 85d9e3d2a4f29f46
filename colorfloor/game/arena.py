import logging
import time
from typing import Awaitable, Callable

from ..models import (
    ArenaLayout,
    Color,
    Pad,
    PadContainer,
    PlayerInfo,
    RoundMap,
    ScreenContainer,
    Vec3,
)
from ..models.arena import grid_layout

log = logging.getLogger(__name__)

Publisher = Callable[[dict], Awaitable[None]]

PROBE_DEPTH = 10.0
TELEPORT_HEIGHT = 5.0


class ArenaWorld:
    """In-process world: connected players, their bodies and the live round map."""

    def __init__(self, layout: ArenaLayout, publish: Publisher | None = None):
        self.layout = layout
        self._publish = publish
        self._player_info: dict[str, PlayerInfo] = {}
        self.round_map: RoundMap | None = None

    @property
    def players(self) -> list[PlayerInfo]:
        return list(self._player_info.values())

    def add_player(self, player_id: str, name: str) -> PlayerInfo:
        if player_id in self._player_info:
            raise ValueError(f"Player {player_id} already in arena")

        log.info(f"Adding player {name} ({player_id}) to arena")
        info = PlayerInfo(
            player_id=player_id,
            name=name,
            connected_at=time.time(),
            position=self.layout.lobby_spawn,
        )
        self._player_info[player_id] = info
        return info

    def remove_player(self, player_id: str) -> PlayerInfo | None:
        info = self._player_info.pop(player_id, None)
        if info:
            log.info(f"Removing player {info.name} ({player_id}) from arena")
        return info

    def get_player(self, player_id: str) -> PlayerInfo | None:
        return self._player_info.get(player_id)

    def move_player(self, player_id: str, position: Vec3 | None) -> bool:
        info = self._player_info.get(player_id)
        if not info:
            return False
        info.position = position
        return True

    def list_players(self) -> list[str]:
        return list(self._player_info)

    def get_position(self, player_id: str) -> Vec3 | None:
        info = self._player_info.get(player_id)
        return info.position if info else None

    def list_pads(self, container: PadContainer) -> list[Pad]:
        return list(container.pads)

    def find_pad_under(self, player_id: str, container: PadContainer) -> Pad | None:
        position = self.get_position(player_id)
        if position is None:
            return None
        for pad in container.pads:
            if pad.contains_below(position, PROBE_DEPTH):
                return pad
        return None

    def is_player_on_pad_of_color(
        self, player_id: str, color: Color, container: PadContainer
    ) -> bool:
        if self.round_map is None or self.round_map.pads is not container:
            return False
        pad = self.find_pad_under(player_id, container)
        return pad is not None and pad.color == color

    async def teleport(self, player_id: str, destination: Vec3) -> None:
        if not self.move_player(player_id, destination):
            return
        await self._notify(
            {"type": "teleport", "player_id": player_id, "position": list(destination)}
        )

    async def teleport_to_pad(self, player_id: str, pad: Pad) -> None:
        if pad.teleport_location is not None:
            destination = pad.teleport_location
        else:
            x, y, z = pad.position
            destination = (x, y + TELEPORT_HEIGHT, z)
        await self.teleport(player_id, destination)

    def get_loser_destination(self) -> Vec3 | None:
        return self.layout.loser_spawn

    def get_lobby_destination(self) -> Vec3 | None:
        return self.layout.lobby_spawn

    def clone_round_map(self) -> RoundMap | None:
        template = self.layout.template
        if template is None:
            log.warning("No map template in arena layout")
            return None

        pads = None
        if template.pads is not None:
            pads = PadContainer(
                map_name=template.name,
                pads=[pad.model_copy(deep=True) for pad in template.pads],
            )
        screens = None
        if template.screens is not None:
            screens = ScreenContainer(
                screens=[screen.model_copy(deep=True) for screen in template.screens]
            )

        self.round_map = RoundMap(name=template.name, pads=pads, screens=screens)
        return self.round_map

    def destroy_round_map(self, round_map: RoundMap) -> None:
        if self.round_map is round_map:
            self.round_map = None

    async def update_screens(self, screens: ScreenContainer | None, color: Color) -> None:
        if screens is None:
            return
        for screen in screens.screens:
            screen.color = color
            screen.target_color_name = color.name
            screen.label = color.name
        await self._notify(
            {
                "type": "screens",
                "screens": [screen.name for screen in screens.screens],
                "name": color.name,
                "rgb": list(color.rgb),
            }
        )

    async def _notify(self, message: dict) -> None:
        if self._publish is None:
            return
        try:
            await self._publish(message)
        except Exception as e:
            log.error(f"Failed to publish {message.get('type')}: {e}")


def load_layout(path: str | None) -> ArenaLayout:
    """Read an arena layout from JSON, or fall back to the default pad grid."""
    if not path:
        return grid_layout()
    log.info(f"Loading arena layout from {path}")
    with open(path) as f:
        return ArenaLayout.model_validate_json(f.read())
