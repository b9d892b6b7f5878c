"""FastAPI application factory and lifespan."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from strongai.api.v1 import api_router
from strongai.core.config import Settings, get_settings
from strongai.core.errors import PersistenceError
from strongai.db import build_engine, build_session_maker
from strongai.db.base import Base
from strongai.services.clock import Clock, LoopClock
from strongai.services.notifications import TimerNotifier
from strongai.services.persistence import PersistenceGateway, SqlAlchemyGateway
from strongai.services.rest_timer import RestTimer
from strongai.services.session_manager import ActiveSessionManager
from strongai.services.store import FitnessStore

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_application(
    settings: Settings | None = None,
    gateway: PersistenceGateway | None = None,
    clock: Clock | None = None,
    notifier: TimerNotifier | None = None,
) -> FastAPI:
    """Build the app. Tests inject a gateway and clock; otherwise SQLAlchemy and the event loop are used."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup: open the local store and load everything; shutdown: cleanup."""
        configure_logging(settings)
        engine = None
        store_gateway = gateway
        if store_gateway is None:
            engine = build_engine(settings)
            if settings.database_auto_create:
                # Local single-user database; use Alembic for upgrades
                async with engine.begin() as conn:
                    await conn.run_sync(Base.metadata.create_all)
            store_gateway = SqlAlchemyGateway(build_session_maker(engine))

        store = await FitnessStore.load(store_gateway)
        timer = RestTimer(
            clock or LoopClock(),
            notifier=notifier,
            tick_interval=settings.rest_timer_tick_seconds,
        )
        app.state.settings = settings
        app.state.gateway = store_gateway
        app.state.store = store
        app.state.timer = timer
        app.state.manager = ActiveSessionManager(store, timer)
        logger.info("%s ready (%s)", settings.app_name, settings.environment)
        yield
        timer.stop()
        if engine is not None:
            await engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    # Local bridge for the UI: allow localhost in dev, explicit origins otherwise
    if settings.debug:
        cors_origins = ["*"]
    elif settings.environment == "development":
        cors_origins = ["http://localhost:3000", "http://127.0.0.1:3000", *settings.cors_origin_list]
    else:
        cors_origins = settings.cors_origin_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        # The in-memory change already happened; only the save failed
        return JSONResponse(status_code=503, content={"detail": str(exc), "domain": exc.domain})

    @app.get("/")
    def root():
        return {"status": "ok", "message": f"{settings.app_name} API"}

    app.include_router(api_router, prefix=settings.api_v1_prefix)
    return app


app = create_application()
