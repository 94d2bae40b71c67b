# taskflow/main.py

import logging
import sys
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from taskflow.api import auth, tasks
from taskflow.config import Settings
from taskflow.database import Database
from taskflow.errors import register_exception_handlers
from taskflow.logging_setup import setup_logging


logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Builds the application and initialises its store.
    Raises if the store cannot be reached.
    """
    settings = settings or Settings.from_env()

    db = Database(settings.database_url)
    db.init_db()

    app = FastAPI(title="Taskflow")
    app.state.settings = settings
    app.state.db = db

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(tasks.router)
    return app


def run():
    import uvicorn

    settings = Settings.from_env()
    setup_logging(settings.log_level)

    try:
        app = create_app(settings)
    except (SQLAlchemyError, OSError) as e:
        logger.critical("Could not initialise the store: %s", e)
        sys.exit(1)

    logger.info("Server running on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
