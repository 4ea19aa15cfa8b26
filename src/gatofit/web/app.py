"""FastAPI application for the gatofit web API."""

import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from ..db.engine import get_db_path, init_db
from ..services.entry_store import EntryStore
from ..services.trend_advisor import AssessmentSlot, TrendAdvisor
from .routers import entries, insights

logger = logging.getLogger(__name__)


def create_app(db_path: Path | None = None, advisor: TrendAdvisor | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        db_path: Database file (defaults to the configured data directory)
        advisor: Trend advisor to use (defaults to the Gemini advisor)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize storage and load records once on startup."""
        path = db_path or get_db_path()
        await init_db(path)

        store = EntryStore(path)
        records = await store.load()
        slot = AssessmentSlot(advisor)

        app.state.store = store
        app.state.assessments = slot

        # First analysis once there is enough data
        task = None
        if slot.should_auto_analyze(len(records)):
            logger.info("Running initial trend analysis")
            task = asyncio.create_task(slot.refresh(records))
        yield
        if task is not None and not task.done():
            task.cancel()

    app = FastAPI(
        title="gatofit",
        description="Cat weight tracker with AI trend insights",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(entries.router)
    app.include_router(insights.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": "0.1.0"}

    return app
