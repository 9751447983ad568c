from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .logger import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    pass


class Database:
    """Engine and session factory for one running application.

    Created when the app starts, disposed when it shuts down.
    """

    def __init__(self, url: str, echo: bool = False):
        kwargs = {"echo": echo}
        if url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            # an in-memory database only lives as long as its connection
            if ":memory:" in url or url.rstrip("/") == "sqlite:":
                kwargs["poolclass"] = StaticPool
        self.url = url
        self.engine = create_engine(url, **kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def init_db(self):
        # models must be imported so their tables are registered on Base
        from . import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database ready at %s", self.engine.url.render_as_string(hide_password=True))

    def session(self) -> Session:
        return self.SessionLocal()

    def close(self):
        self.engine.dispose()
        logger.info("Database connections closed")
