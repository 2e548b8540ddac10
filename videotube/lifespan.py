import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from videotube.config.environments import AUTO_CREATE_TABLES, ENVIRONMENT
from videotube.db.database import Base, engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    logger.info("App starting up (%s)...", ENVIRONMENT)

    if AUTO_CREATE_TABLES:
        # models must be imported before create_all sees them
        from videotube.model import user, video, comment, subscription, watch_history, session  # noqa: F401
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    yield

    await engine.dispose()
    logger.info("App shutting down...")
