# taskflow/database.py

import logging
from pathlib import Path
from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from taskflow.models import Base


logger = logging.getLogger(__name__)


class Database:
    """
    Process-scoped store handle: one engine and one session factory.
    Created once by the application factory and shared by every request.
    """

    def __init__(self, url: str):
        self.url = make_url(url)
        engine_kwargs = {}

        if self.url.get_backend_name() == "sqlite":
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if self.url.database in (None, "", ":memory:"):
                # keep a single connection so every session sees the same in-memory db
                engine_kwargs["poolclass"] = StaticPool
            else:
                Path(self.url.database).parent.mkdir(parents=True, exist_ok=True)

        self.engine = create_engine(self.url, **engine_kwargs)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def init_db(self):
        """
        Verifies the store is reachable and creates missing tables.
        Raises the underlying SQLAlchemy error when the connection fails.
        """
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        Base.metadata.create_all(bind=self.engine)
        logger.info("Store ready at %s", self.url.render_as_string(hide_password=True))

    def dispose(self):
        self.engine.dispose()


def get_db(request: Request):
    db = request.app.state.db.SessionLocal()
    try:
        yield db
    finally:
        db.close()
