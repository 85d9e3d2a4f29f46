import logging
import random
import time

from ..models import (
    Color,
    Elimination,
    Pad,
    PadContainer,
    Phase,
    RoundMap,
    RoundSettings,
    RoundStage,
    RoundState,
    RoundStatus,
    RoundSummary,
)
from .difficulty import DifficultyProfile
from .errors import MissingMapAsset
from .sampler import weighted_sample
from .weighting import weigh_pads
from .world import AnyioClock, Clock, GameObserver, NullRecorder, RoundRecorder, World

log = logging.getLogger(__name__)

MAX_COLOR_DRAWS = 64


class RoundEngine:
    """Runs elimination rounds, one tick per target color.

    The engine lives for the whole session so the last target color carries
    over from one round to the next; everything else in ``RoundState`` is
    rebuilt when a round starts.
    """

    def __init__(
        self,
        world: World,
        observer: GameObserver,
        settings: RoundSettings | None = None,
        clock: Clock | None = None,
        recorder: RoundRecorder | None = None,
        rng: random.Random | None = None,
    ):
        self.world = world
        self.observer = observer
        self.settings = settings or RoundSettings()
        self.difficulty = DifficultyProfile(self.settings)
        self.clock = clock or AnyioClock()
        self.recorder = recorder or NullRecorder()
        self.rng = rng or random.Random()

        self.stage = RoundStage.IDLE
        self.state: RoundState | None = None
        self.active_players: set[str] = set()
        self.last_target_color_name: str | None = None

    def handle_disconnect(self, player_id: str) -> None:
        self.active_players.discard(player_id)

    def pick_color(self, exclude: str | None = None) -> Color:
        palette = self.settings.palette
        for _ in range(MAX_COLOR_DRAWS):
            color = self.rng.choice(palette)
            if color.name != exclude:
                return color

        names = [color.name for color in palette]
        if exclude in names:
            return palette[(names.index(exclude) + 1) % len(palette)]
        return palette[0]

    def assign_colors(self, pads: list[Pad], correct: list[Pad], target: Color) -> None:
        chosen = {id(pad) for pad in correct}
        for pad in pads:
            if id(pad) in chosen:
                pad.color = target
            else:
                pad.color = self.pick_color(exclude=target.name)

    async def run_round(self) -> RoundSummary:
        started_at = time.time()
        self.active_players = {
            player_id
            for player_id in self.world.list_players()
            if self.world.get_position(player_id) is not None
        }
        if not self.active_players:
            log.info("Nobody in the arena, skipping round")
            return RoundSummary(
                status=RoundStatus.SKIPPED, started_at=started_at, ended_at=started_at
            )

        await self.observer.on_phase_changed(Phase.ROUND)

        round_map = self.world.clone_round_map()
        if round_map is None:
            self.active_players.clear()
            raise MissingMapAsset("No map template found")
        if round_map.pads is None:
            self.world.destroy_round_map(round_map)
            self.active_players.clear()
            raise MissingMapAsset(f"Map {round_map.name} has no pad container")

        summary = RoundSummary(
            status=RoundStatus.COMPLETED,
            started_at=started_at,
            player_count=len(self.active_players),
        )
        log.info(f"Round started with {summary.player_count} players on {round_map.name}")

        try:
            await self._play(round_map, summary)
        except Exception:
            summary.status = RoundStatus.ABORTED
            raise
        finally:
            await self._teardown(round_map)
            summary.ended_at = time.time()
            self.active_players.clear()
            self.stage = RoundStage.IDLE
            await self.recorder.record_round(summary)

        log.info(f"Round over after {summary.ticks} ticks, last standing: {summary.last_standing}")
        return summary

    async def _play(self, round_map: RoundMap, summary: RoundSummary) -> None:
        state = RoundState(
            tick_interval=self.difficulty.initial_interval,
            last_target_color_name=self.last_target_color_name,
        )
        self.state = state

        while True:
            self.stage = RoundStage.SELECTING_TARGET
            target = self.pick_color(exclude=state.last_target_color_name)
            state.target_color = target
            state.last_target_color_name = target.name
            self.last_target_color_name = target.name

            self.stage = RoundStage.ASSIGNING_PADS
            pads = self.world.list_pads(round_map.pads)
            fraction = self.difficulty.fraction(state.round_index)
            num_correct = self.difficulty.num_correct(len(pads), fraction)
            positions = {pid: self.world.get_position(pid) for pid in self.active_players}
            weighted = weigh_pads(pads, positions, self.settings.distance_cap_margin)
            correct = weighted_sample(weighted, num_correct, self.rng)
            self.assign_colors(pads, correct, target)
            log.info(
                f"Tick {state.round_index}: target {target.name}, "
                f"{len(correct)}/{len(pads)} pads, {state.tick_interval}s"
            )

            await self.world.update_screens(round_map.screens, target)
            await self.observer.on_pad_colors_changed(
                {pad.name: pad.color_name for pad in pads}
            )
            await self.observer.on_target_color_changed(target)

            if state.first_tick:
                await self.clock.sleep(self.settings.placement_settle_delay)
                await self._place_players(pads)
                state.first_tick = False

            self.stage = RoundStage.WAITING_FOR_TICK
            await self._wait(state.tick_interval)

            self.stage = RoundStage.EVALUATING_ELIMINATION
            eliminated = await self._eliminate(round_map.pads, target)
            summary.ticks += 1
            summary.eliminations.extend(
                Elimination(player_id=pid, tick=summary.ticks) for pid in eliminated
            )

            if not self.active_players:
                self.stage = RoundStage.ROUND_OVER
                return
            if all(self.world.get_position(pid) is None for pid in self.active_players):
                log.info(f"No active player has a body, ending round: {sorted(self.active_players)}")
                self.stage = RoundStage.ROUND_OVER
                return

            state.round_index += 1
            state.tick_interval = self.difficulty.next_interval(state.tick_interval)

    async def _place_players(self, pads: list[Pad]) -> None:
        if not pads:
            return
        for player_id in list(self.active_players):
            if self.world.get_position(player_id) is None:
                continue
            await self.world.teleport_to_pad(player_id, self.rng.choice(pads))

    async def _wait(self, seconds: float) -> None:
        remaining = seconds
        while remaining > 0:
            step = min(1.0, remaining)
            await self.clock.sleep(step)
            remaining -= step

    async def _eliminate(self, container: PadContainer, target: Color) -> list[str]:
        connected = set(self.world.list_players())
        loser_spawn = self.world.get_loser_destination()
        eliminated = []

        for player_id in list(self.active_players):
            if player_id not in connected:
                self.active_players.discard(player_id)
                continue
            if self.world.get_position(player_id) is None:
                continue
            if self.world.is_player_on_pad_of_color(player_id, target, container):
                continue

            self.active_players.discard(player_id)
            eliminated.append(player_id)
            if loser_spawn is not None:
                await self.world.teleport(player_id, loser_spawn)

        if eliminated:
            log.info(f"Eliminated {eliminated}, {len(self.active_players)} remaining")
        return eliminated

    async def _teardown(self, round_map: RoundMap) -> None:
        self.world.destroy_round_map(round_map)
        lobby_spawn = self.world.get_lobby_destination()
        if lobby_spawn is None:
            return
        for player_id in self.world.list_players():
            if self.world.get_position(player_id) is not None:
                await self.world.teleport(player_id, lobby_spawn)

    def snapshot(self) -> dict:
        state = self.state if self.stage != RoundStage.IDLE else None
        target = state.target_color if state else None
        return {
            "stage": self.stage.value,
            "round_index": state.round_index if state else None,
            "target_color": target.name if target else None,
            "tick_interval": state.tick_interval if state else None,
            "active_players": sorted(self.active_players),
        }
