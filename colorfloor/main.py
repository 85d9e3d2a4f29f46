import asyncio
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from broadcaster import Broadcast

from colorfloor.config import BROADCAST_URL, DEV, MAP_PATH, RUN_SESSION_LOOP
from colorfloor.database import create_db_and_tables, engine
from colorfloor.dependencies import init_runtime
from colorfloor.game import SqlRoundRecorder, load_layout
from colorfloor.middleware import add_cors_middleware, add_logging_middleware
from colorfloor.routers import players_router, rounds_router, websocket_router

log = logging.getLogger(__name__)


def create_app(broadcast_url: str = BROADCAST_URL, run_session_loop: bool = RUN_SESSION_LOOP) -> FastAPI:
    broadcast = Broadcast(broadcast_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        create_db_and_tables()
        await broadcast.connect()
        runtime = init_runtime(broadcast, load_layout(MAP_PATH), recorder=SqlRoundRecorder(engine))

        session_task = None
        if run_session_loop:
            session_task = asyncio.create_task(runtime.session.run())
        yield
        if session_task:
            session_task.cancel()
            try:
                await session_task
            except asyncio.CancelledError:
                pass
        await broadcast.disconnect()
        log.info("shutting down")

    app = FastAPI(title="colorfloor", lifespan=lifespan)
    app.add_middleware(add_cors_middleware)
    if DEV:
        app.add_middleware(add_logging_middleware)

    app.include_router(players_router)
    app.include_router(rounds_router)
    app.include_router(websocket_router)
    return app


app = create_app()
