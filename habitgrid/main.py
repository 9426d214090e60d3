import logging
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from . import __version__
from .config import HOST, LOG_LEVEL, MAX_CONTRIBUTION_DAYS, PORT, STREAK_RECORD_LIMIT
from .database import SessionLocal, engine as default_engine, init_db
from .dependencies import get_templates, get_tracker
from .errors import HabitTrackerError
from .routers import habits, records, streaks
from .routers.habits import render
from .services.tracker import HabitTracker, RecordProbe
from .views import create_templates

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


def create_app(
    engine: Engine = default_engine,
    session_factory: Optional[sessionmaker] = None,
    clock: Callable[[], datetime] = datetime.now,
) -> FastAPI:
    """Build the application; the tracker and templates are created here, once."""
    session_factory = session_factory or SessionLocal

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application startup...")
        init_db(engine)
        yield
        logger.info("Application shutdown...")

    app = FastAPI(
        title="habitgrid",
        description="Habit tracker with contribution grids and streaks",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.tracker = HabitTracker(
        session_factory,
        RecordProbe(session_factory),
        clock=clock,
        record_limit=STREAK_RECORD_LIMIT,
        max_contribution_days=MAX_CONTRIBUTION_DAYS,
    )
    app.state.templates = create_templates()

    @app.exception_handler(HabitTrackerError)
    async def tracker_error_handler(request: Request, exc: HabitTrackerError):
        if exc.status_code >= 500:
            logger.error("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc)
        return PlainTextResponse(exc.message or type(exc).__name__, status_code=exc.status_code)

    app.include_router(habits.router)
    app.include_router(records.router)
    app.include_router(streaks.router)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    @app.get("/", response_class=HTMLResponse)
    def home(
        request: Request,
        tracker: HabitTracker = Depends(get_tracker),
        templates: Jinja2Templates = Depends(get_templates),
    ):
        return render(request, tracker, templates, "layout.html", habits=tracker.list_habits())

    return app


app = create_app()


def run():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server running on http://%s:%s", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
