"""
Reelboard API - Main Application

FastAPI application serving the content dashboard's data: content records,
CSV imports, caption generation, metric sync, analytics and reminders.

Run with:
    uvicorn reelboard.api.main:app --reload --port 3000

API Documentation available at:
    - Swagger UI: http://localhost:3000/docs
    - ReDoc: http://localhost:3000/redoc
"""

import logging
import logging.handlers
import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from reelboard import __version__
from reelboard.logging_utils import LOG_FORMAT, SafeStreamHandler, quiet_noisy_loggers

# Load .env from project root so DATA_DIR, tokens and DEMO_MODE are available
load_dotenv(Path(__file__).parent.parent.parent / ".env")

# =============================================================================
# File-based logging (survives stdout/pipe issues)
# =============================================================================
_LOG_FILE = os.getenv("REELBOARD_LOG_FILE", "/tmp/reelboard-app.log")

_root_logger = logging.getLogger()
_root_logger.setLevel(logging.INFO)

if not any(isinstance(h, logging.handlers.RotatingFileHandler) for h in _root_logger.handlers):
    _file_handler = logging.handlers.RotatingFileHandler(
        _LOG_FILE,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=3,
    )
    _file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    _file_handler.setLevel(logging.INFO)
    _root_logger.addHandler(_file_handler)

if not any(isinstance(h, SafeStreamHandler) for h in _root_logger.handlers):
    _stream_handler = SafeStreamHandler()
    _stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    _stream_handler.setLevel(logging.INFO)
    _root_logger.addHandler(_stream_handler)

quiet_noisy_loggers()

# =============================================================================

from reelboard.api.routers import analytics, content, generate, health, imports, sync

logger = logging.getLogger(__name__)

WRITE_METHODS = {"POST", "PUT", "DELETE"}
DEMO_MODE_MESSAGE = "Demo mode — this is a read-only preview. Changes are disabled."


def demo_mode_enabled() -> bool:
    """DEMO_MODE=true makes every write endpoint read-only."""
    return os.getenv("DEMO_MODE", "false").lower() == "true"


app = FastAPI(
    title="Reelboard API",
    description="""
    API for the Reelboard content dashboard.

    ## Features

    - **Content**: Track ideas through idea → in-progress → filmed → edited → posted
    - **Import**: Preview and upsert TikTok / Instagram metric exports
    - **Generate**: Captions and hashtags from a summary
    - **Sync / Analytics**: Platform metrics, engagement stats, deadline reminders
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def block_writes_in_demo_mode(request: Request, call_next):
    if (
        demo_mode_enabled()
        and request.method in WRITE_METHODS
        and request.url.path.startswith("/api")
    ):
        return JSONResponse(status_code=403, content={"error": DEMO_MODE_MESSAGE, "demo": True})
    return await call_next(request)


# Register routers
app.include_router(health.router)
app.include_router(imports.router)
app.include_router(content.router)
app.include_router(generate.router)
app.include_router(sync.router)
app.include_router(analytics.router)


@app.get("/")
def root():
    """Root endpoint with API information."""
    return {
        "name": "Reelboard API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
