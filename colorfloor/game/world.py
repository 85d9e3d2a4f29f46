"""Capabilities the round engine needs from the outside world.

The engine only talks to these protocols; ``ArenaWorld`` is the in-process
implementation used by the server, and the tests provide their own fakes.
"""

from typing import Protocol

import anyio

from ..models import Color, Pad, PadContainer, Phase, RoundMap, RoundSummary, ScreenContainer, Vec3


class World(Protocol):
    def list_players(self) -> list[str]: ...

    def get_position(self, player_id: str) -> Vec3 | None: ...

    def list_pads(self, container: PadContainer) -> list[Pad]: ...

    def is_player_on_pad_of_color(
        self, player_id: str, color: Color, container: PadContainer
    ) -> bool: ...

    async def teleport(self, player_id: str, destination: Vec3) -> None: ...

    async def teleport_to_pad(self, player_id: str, pad: Pad) -> None: ...

    def get_loser_destination(self) -> Vec3 | None: ...

    def get_lobby_destination(self) -> Vec3 | None: ...

    def clone_round_map(self) -> RoundMap | None: ...

    def destroy_round_map(self, round_map: RoundMap) -> None: ...

    async def update_screens(self, screens: ScreenContainer | None, color: Color) -> None: ...


class GameObserver(Protocol):
    async def on_phase_changed(self, phase: Phase) -> None: ...

    async def on_countdown_tick(self, seconds_remaining: int) -> None: ...

    async def on_target_color_changed(self, color: Color) -> None: ...

    async def on_pad_colors_changed(self, assignments: dict[str, str]) -> None: ...


class RoundRecorder(Protocol):
    async def record_round(self, summary: RoundSummary) -> None: ...


class Clock(Protocol):
    async def sleep(self, seconds: float) -> None: ...


class AnyioClock:
    async def sleep(self, seconds: float) -> None:
        await anyio.sleep(seconds)


class NullRecorder:
    async def record_round(self, summary: RoundSummary) -> None:
        return None
