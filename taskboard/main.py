"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from taskboard.api.errors import register_exception_handlers
from taskboard.api.tasks import router as tasks_router
from taskboard.config import Settings, get_settings
from taskboard.events.bus import build_event_bus
from taskboard.logging_config import configure_logging, log_api_requests


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """Build an application with its own event bus.

    Args:
        settings: Settings to use (default: environment settings)
        engine: Engine whose tables are created on startup (default: the
            engine configured from ``DATABASE_URL``)
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create database tables on startup."""
        # Import models to register them with SQLModel
        from taskboard.models import Task  # noqa: F401

        if engine is None:
            from taskboard.db.session import engine as default_engine
            SQLModel.metadata.create_all(default_engine)
        else:
            SQLModel.metadata.create_all(engine)
        yield

    app = FastAPI(
        title="Task Board API",
        description="RESTful API for creating, completing and deleting tasks",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.event_bus = build_event_bus(settings)

    # CORS origins - configured frontend plus local dev servers
    cors_origins = [
        settings.FRONTEND_URL,
        "http://localhost:5173",
        "http://localhost:5000",
    ]
    # Remove duplicates and empty strings
    cors_origins = [origin for origin in set(cors_origins) if origin]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_api_requests)

    register_exception_handlers(app)
    app.include_router(tasks_router)

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
