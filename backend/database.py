# backend/database.py
import logging

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///") or ":memory:" in url


class Database:
    """Owns the engine and session factory for one running application.

    Created by the app factory at startup and disposed on shutdown; request
    handlers reach it through ``get_db`` instead of a module-level engine.
    """

    def __init__(self, url: str):
        self.url = url

        # Configuration depends on the backend
        kwargs = {}
        if url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}  # SQLite only
            if _is_memory_sqlite(url):
                # One shared connection, otherwise every session sees an empty database
                kwargs["poolclass"] = StaticPool

        self.engine = create_engine(url, **kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self):
        # Register every table on Base.metadata before creating
        import models.users  # noqa: F401
        import models.user_settings  # noqa: F401
        import models.load  # noqa: F401
        import models.fuel_stop  # noqa: F401
        import models.log  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables ready (%s)", self.engine.url.render_as_string(hide_password=True))

    def dispose(self):
        self.engine.dispose()
        logger.info("Database connections closed")


def get_db(request: Request):
    db = request.app.state.db.SessionLocal()
    try:
        yield db
    finally:
        db.close()
