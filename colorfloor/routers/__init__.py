from .players import router as players_router
from .rounds import router as rounds_router
from .websocket_router import router as websocket_router

__all__ = ["players_router", "rounds_router", "websocket_router"]
