from dataclasses import dataclass
from typing import Annotated

from broadcaster import Broadcast
from fastapi import Depends

from .game import ArenaNotifier, ArenaWorld, RoundEngine, SessionLoop
from .game.world import RoundRecorder
from .models import ArenaLayout, RoundSettings


@dataclass
class ArenaRuntime:
    broadcast: Broadcast
    notifier: ArenaNotifier
    arena: ArenaWorld
    engine: RoundEngine
    session: SessionLoop

    def disconnect(self, player_id: str) -> None:
        self.engine.handle_disconnect(player_id)
        self.arena.remove_player(player_id)


# singleton pattern
_runtime: ArenaRuntime | None = None


def init_runtime(
    broadcast: Broadcast,
    layout: ArenaLayout,
    recorder: RoundRecorder | None = None,
    settings: RoundSettings | None = None,
) -> ArenaRuntime:
    """Wire the arena, engine and session loop around one broadcaster."""
    global _runtime
    settings = settings or RoundSettings()
    notifier = ArenaNotifier(broadcast)
    arena = ArenaWorld(layout, publish=notifier.publish)
    engine = RoundEngine(arena, notifier, settings=settings, recorder=recorder)
    session = SessionLoop(engine, notifier, settings=settings)
    _runtime = ArenaRuntime(broadcast, notifier, arena, engine, session)
    return _runtime


def get_runtime() -> ArenaRuntime:
    """Get the singleton ArenaRuntime instance."""
    if _runtime is None:
        raise RuntimeError("Arena runtime not initialized")
    return _runtime


# convenience type alias for dependency injection
RuntimeDep = Annotated[ArenaRuntime, Depends(get_runtime)]
