"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Logging constants defined here (not in constants/) because logging.basicConfig()
# must run before any module imports that might create loggers.
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.basicConfig(
    format=LOG_FORMAT,
    datefmt=DATE_FORMAT,
    level=logging.INFO,
)

# Unify uvicorn loggers with app format
for uvicorn_logger_name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
    uvicorn_logger = logging.getLogger(uvicorn_logger_name)
    uvicorn_logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    uvicorn_logger.addHandler(handler)

from testgen import __version__  # noqa: E402
from testgen.api.routers import tests  # noqa: E402
from testgen.config import ConfigError, load_settings  # noqa: E402

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan handler for startup and shutdown events.

    On startup, logs the workspace and naming pattern. A missing or invalid
    configuration is reported but does not stop the server; requests that
    need it fail with a 500 instead.
    """
    try:
        settings = load_settings()
        logger.info(f"Workspace: {settings.workspace_path}")
        logger.info(f"Naming pattern: {settings.generation.naming_pattern}")
    except (ValueError, ConfigError) as e:
        logger.warning(f"Configuration not usable yet: {e}")

    logger.info("testgen started")

    yield


app = FastAPI(
    title="testgen",
    description="JUnit 5 + Mockito test scaffolds for Java service classes",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware for editor integrations
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


# Include routers
app.include_router(tests.router)
