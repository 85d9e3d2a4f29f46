from __future__ import annotations

from typing import Callable

from colorfloor.models import (
    Color,
    Pad,
    PadContainer,
    Phase,
    RoundMap,
    RoundSummary,
    ScreenContainer,
    Vec3,
)


class FakeClock:
    def __init__(self, on_sleep: Callable[[float], None] | None = None) -> None:
        self.sleeps: list[float] = []
        self.on_sleep = on_sleep

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        if self.on_sleep:
            self.on_sleep(seconds)


class RecordingObserver:
    def __init__(self) -> None:
        self.events: list[tuple] = []
        self.engine = None
        self.tick_log: list[dict] = []

    async def on_phase_changed(self, phase: Phase) -> None:
        self.events.append(("phase", phase.value))

    async def on_countdown_tick(self, seconds_remaining: int) -> None:
        self.events.append(("countdown", seconds_remaining))

    async def on_target_color_changed(self, color: Color) -> None:
        self.events.append(("target", color.name))
        if self.engine is not None and self.engine.state is not None:
            state = self.engine.state
            self.tick_log.append(
                {
                    "target": color.name,
                    "round_index": state.round_index,
                    "interval": state.tick_interval,
                }
            )

    async def on_pad_colors_changed(self, assignments: dict[str, str]) -> None:
        self.events.append(("pads", dict(assignments)))

    def of_type(self, kind: str) -> list:
        return [payload for name, payload in self.events if name == kind]


class FakeRecorder:
    def __init__(self) -> None:
        self.summaries: list[RoundSummary] = []

    async def record_round(self, summary: RoundSummary) -> None:
        self.summaries.append(summary)


def make_pads(count: int) -> list[Pad]:
    return [Pad(name=f"Pad{i}", position=(i * 10.0, 0.0, 0.0)) for i in range(count)]


class FakeWorld:
    """Scripted world: ``survivors`` decides who passes each evaluation, in order."""

    def __init__(self, pad_count: int = 4, players: dict[str, Vec3 | None] | None = None):
        self.pad_count = pad_count
        self.positions: dict[str, Vec3 | None] = dict(players or {})
        self.survivors: list[set[str]] = []
        self.ticks = 0
        self.has_template = True
        self.has_pad_container = True
        self.lobby: Vec3 | None = (0.0, 50.0, 0.0)
        self.loser: Vec3 | None = (0.0, -50.0, 0.0)
        self.teleports: list[tuple[str, Vec3]] = []
        self.pad_teleports: list[tuple[str, str]] = []
        self.cloned: list[RoundMap] = []
        self.destroyed: list[RoundMap] = []
        self.screen_updates: list[str] = []

    def list_players(self) -> list[str]:
        return list(self.positions)

    def get_position(self, player_id: str) -> Vec3 | None:
        return self.positions.get(player_id)

    def list_pads(self, container: PadContainer) -> list[Pad]:
        self.ticks += 1
        return list(container.pads)

    def is_player_on_pad_of_color(self, player_id: str, color: Color, container: PadContainer) -> bool:
        index = self.ticks - 1
        survivors = self.survivors[index] if 0 <= index < len(self.survivors) else set()
        return player_id in survivors

    async def teleport(self, player_id: str, destination: Vec3) -> None:
        self.teleports.append((player_id, destination))

    async def teleport_to_pad(self, player_id: str, pad: Pad) -> None:
        self.pad_teleports.append((player_id, pad.name))

    def get_loser_destination(self) -> Vec3 | None:
        return self.loser

    def get_lobby_destination(self) -> Vec3 | None:
        return self.lobby

    def clone_round_map(self) -> RoundMap | None:
        if not self.has_template:
            return None
        pads = PadContainer(map_name="Test", pads=make_pads(self.pad_count)) if self.has_pad_container else None
        round_map = RoundMap(name="Test", pads=pads, screens=ScreenContainer())
        self.cloned.append(round_map)
        return round_map

    def destroy_round_map(self, round_map: RoundMap) -> None:
        self.destroyed.append(round_map)

    async def update_screens(self, screens: ScreenContainer | None, color: Color) -> None:
        if screens is not None:
            self.screen_updates.append(color.name)
