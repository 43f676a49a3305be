
import logging
from functools import partial
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from dailytasks.core.config import Settings, settings as default_settings
from dailytasks.core.errors import register_exception_handlers
from dailytasks.core.logging_setup import setup_logging
from dailytasks.core.scheduler import DailyTrigger, TaskScheduler
from dailytasks.core.templates import templates
from dailytasks.db.base import Base
from dailytasks.db.session import make_engine, make_session_factory
from dailytasks.db.store import LogStore, TaskStore
from dailytasks.routers import logs, tasks
from dailytasks.utils.daily_cycle import archive_tasks, reset_tasks

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


def create_app(settings: Settings = default_settings) -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.PROJECT_NAME)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # One storage handle per process, shared by the API and the scheduler
    engine = make_engine(settings.SQLALCHEMY_DATABASE_URI)
    session_factory = make_session_factory(engine)
    task_store = TaskStore(session_factory)
    log_store = LogStore(session_factory)

    scheduler = TaskScheduler([
        DailyTrigger("task save", settings.archive_at, partial(archive_tasks, task_store, log_store)),
        DailyTrigger("task reset", settings.reset_at, partial(reset_tasks, task_store)),
    ])

    app.state.settings = settings
    app.state.task_store = task_store
    app.state.log_store = log_store
    app.state.scheduler = scheduler

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    @app.get("/")
    async def read_root(request: Request):
        return templates.TemplateResponse(request, "index.html", {
            "project_name": settings.PROJECT_NAME,
            "archive_at": settings.archive_at,
            "reset_at": settings.reset_at,
        })

    app.include_router(tasks.router)
    app.include_router(logs.router)

    @app.on_event("startup")
    async def on_startup():
        Base.metadata.create_all(bind=engine)
        logger.info("TaskStore ready db=%s total=%s", settings.DATABASE_PATH, task_store.count_tasks())
        if settings.SCHEDULER_ENABLED:
            scheduler.start()

    @app.on_event("shutdown")
    async def on_shutdown():
        await scheduler.stop()
        engine.dispose()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Server running on http://localhost:%s", default_settings.PORT)
    uvicorn.run(
        app,
        host=default_settings.HOST,
        port=default_settings.PORT,
    )
