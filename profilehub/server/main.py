"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request logging), registers exception handlers and includes all API routers.
It serves as the root of the web server.
"""

from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from profilehub.core.database import async_session_maker, init_db
from profilehub.core.database.repositories.bundle import build_sql_repos_from_session
from profilehub.core.logging_config import get_logger, setup_logging
from profilehub.core.monitoring import initialize_logfire

from .api.v1 import (
    auth,
    custom_fields,
    documents,
    health,
    profiles,
)
from .api.v1 import settings as settings_api
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware
from .services.seed import seed_database

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    On startup the upload directory is created, missing tables are created
    and the admin user and default settings are seeded.
    """
    logger.info("Starting up ProfileHub Server...")
    Path(settings.uploads.directory).mkdir(parents=True, exist_ok=True)
    try:
        await init_db()
        async with async_session_maker() as session:
            await seed_database(build_sql_repos_from_session(session=session), settings.auth)
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    logger.info("Shutting down ProfileHub Server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    ProfileHub Server API

    Manage profiles with favorite/archive flags, attached documents,
    custom fields and global settings.
    """,
    version=constant.API_VERSION,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(LogfireMiddleware)

setup_exception_handlers(app)
initialize_logfire(app)

app.include_router(health.router, tags=["health"])
app.include_router(auth.router, prefix=f"{constant.API_PREFIX}/auth")
app.include_router(profiles.router, prefix=f"{constant.API_PREFIX}/profiles")
app.include_router(documents.router, prefix=constant.API_PREFIX)
app.include_router(custom_fields.router, prefix=constant.API_PREFIX)
app.include_router(settings_api.router, prefix=f"{constant.API_PREFIX}/settings")

app.mount(
    settings.uploads.url_prefix,
    StaticFiles(directory=settings.uploads.directory, check_dir=False),
    name="uploads",
)


def run() -> None:
    """Run the server with uvicorn using the configured host and port."""
    uvicorn.run(
        "profilehub.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
