from __future__ import annotations

from typing import Optional, Tuple

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hostel_allocation.api.v1.router import router as api_v1_router
from hostel_allocation.config.logging import get_logger, setup_logging
from hostel_allocation.config.settings import Settings, get_settings
from hostel_allocation.core.middleware import register_middlewares
from hostel_allocation.db.init_db import init_db
from hostel_allocation.db.session import build_engine, build_session_factory
from hostel_allocation.repositories.base import ApplicationStore, RoomStore
from hostel_allocation.repositories.memory import InMemoryApplicationStore, InMemoryRoomStore
from hostel_allocation.repositories.seed import DEMO_USERS, seed_demo_data
from hostel_allocation.repositories.sql_repository import SqlApplicationStore, SqlRoomStore
from hostel_allocation.services.allocation_service import AllocationService
from hostel_allocation.services.auth_service import AuthService, InMemorySessionStore, SessionStore

logger = get_logger(__name__)


def build_stores(settings: Settings) -> Tuple[ApplicationStore, RoomStore]:
    """Pick the storage backend: SQL when DATABASE_URL is set, memory otherwise."""
    if settings.uses_database():
        engine = build_engine(settings.DATABASE_URL, settings.DATABASE_ECHO)
        init_db(engine)
        session_factory = build_session_factory(settings, engine=engine)
        logger.info("Using SQL stores")
        return SqlApplicationStore(session_factory), SqlRoomStore(session_factory)

    logger.info("Using in-memory stores")
    return InMemoryApplicationStore(), InMemoryRoomStore()


def create_app(
    settings: Optional[Settings] = None,
    application_store: Optional[ApplicationStore] = None,
    room_store: Optional[RoomStore] = None,
    session_store: Optional[SessionStore] = None,
    configure_logging: bool = True,
) -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures title, version, debug mode from Settings.
    - Builds the stores and services once and keeps them on app.state.
    - Registers CORS, core middleware, and exception handlers.
    - Includes the versioned API router under API_V1_STR.
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings)

    if application_store is None or room_store is None:
        default_applications, default_rooms = build_stores(settings)
        if application_store is None:
            application_store = default_applications
        if room_store is None:
            room_store = default_rooms

    if settings.SEED_DEMO_DATA:
        seed_demo_data(application_store, room_store)

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=settings.API_VERSION,
        # Interactive docs are not served in production
        docs_url=None if settings.is_production() else "/docs",
        redoc_url=None if settings.is_production() else "/redoc",
        openapi_url=None if settings.is_production() else "/openapi.json",
    )

    app.state.settings = settings
    app.state.allocation_service = AllocationService(application_store, room_store, settings)
    app.state.auth_service = AuthService(
        session_store if session_store is not None else InMemorySessionStore(),
        users=DEMO_USERS if settings.SEED_DEMO_DATA else None,
        settings=settings,
    )

    # Credentials are not allowed together with a wildcard origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ORIGINS != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middlewares(app)

    app.include_router(api_v1_router, prefix=settings.API_V1_STR)

    return app


app = create_app()
