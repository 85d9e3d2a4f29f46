import logging

from ..models import Phase, RoundSettings
from .errors import MissingMapAsset
from .round_engine import RoundEngine
from .world import AnyioClock, Clock, GameObserver

log = logging.getLogger(__name__)


class SessionLoop:
    """Lobby countdown, one round, short breather, forever."""

    def __init__(
        self,
        engine: RoundEngine,
        observer: GameObserver,
        settings: RoundSettings | None = None,
        clock: Clock | None = None,
    ):
        self.engine = engine
        self.observer = observer
        self.settings = settings or engine.settings
        self.clock = clock or engine.clock
        self.phase = Phase.LOBBY
        self.countdown: int | None = None
        self.cycles = 0

    async def run(self) -> None:
        log.info("Session loop started")
        while True:
            await self.run_cycle()

    async def run_cycle(self) -> None:
        await self.lobby()

        self.phase = Phase.ROUND
        try:
            await self.engine.run_round()
        except MissingMapAsset as e:
            log.warning(f"Round aborted: {e}")
        except Exception as e:
            log.error(f"Error running round: {e}", exc_info=True)

        self.cycles += 1
        await self.clock.sleep(self.settings.post_round_delay)

    async def lobby(self) -> None:
        self.phase = Phase.LOBBY
        await self.observer.on_phase_changed(Phase.LOBBY)

        remaining = self.settings.intermission_duration
        while remaining > 0:
            self.countdown = remaining
            await self.observer.on_countdown_tick(remaining)
            await self.clock.sleep(1)
            remaining -= 1

        self.countdown = 0
        await self.observer.on_countdown_tick(0)
        self.countdown = None

    def snapshot(self) -> dict:
        return {
            "phase": self.phase.value,
            "countdown": self.countdown,
            "cycles": self.cycles,
            **self.engine.snapshot(),
        }
