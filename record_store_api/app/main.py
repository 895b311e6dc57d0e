"""
Main entrypoint for the Record Store API.

This module assembles the FastAPI application: logging, CORS, the
error handlers and the versioned router.  ``create_app`` builds and
configures the app, which is then instantiated at module import time
as ``app`` so it can be served directly, e.g.::

    uvicorn record_store_api.app.main:app --reload

The database handle is created here, once, and stored on
``app.state.database`` for the dependency providers in ``api.deps``.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the module‑level settings
        read from the environment.
    database : Optional[Database]
        Store handle shared by every request.  Built from
        ``settings.database_url`` when omitted.

    Returns
    -------
    FastAPI
        A configured application.  Migrations run at startup.
    """
    settings = settings or default_settings
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    database = database or Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Create the database file if needed and bring the schema up to date.
        database.init()
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.database = database
    app.state.settings = settings

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)
    return app


# Create the application instance at import time so that ASGI servers
# can find it with ``record_store_api.app.main:app``.
app = create_app()
