"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from videoboard.app.api import admin, auth, suggestions, votes
from videoboard.app.core.config import settings
from videoboard.app.core.exception_handlers import register_exception_handlers
from videoboard.app.db.base import engine, Base
# Import all models to register them with SQLAlchemy
from videoboard.app.models.suggestion import Suggestion as SuggestionModel
from videoboard.app.models.vote import Vote as VoteModel

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup: Create database tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"[STARTUP] Database ready, vote mode: {settings.vote_mode}")

    yield

    # Shutdown: Close database connections
    await engine.dispose()
    logger.info("[SHUTDOWN] Cleaned up resources")


app = FastAPI(
    title="Video Suggestion Board API",
    description="Request videos, vote on suggestions and follow them to publication",
    version="1.0.0",
    lifespan=lifespan,
)

# Register custom exception handlers
register_exception_handlers(app)

logger.debug(f"[CORS] Allowed origins: {settings.cors_origins_list}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(suggestions.router, prefix="/api")
app.include_router(votes.router, prefix="/api")
app.include_router(auth.router, prefix="/api")
app.include_router(admin.router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Video Suggestion Board API",
        "version": "1.0.0",
        "description": "Request videos, vote on suggestions and follow them to publication",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
