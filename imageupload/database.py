from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy import event
from sqlalchemy.engine import Engine
import logging

from .config import settings

logger = logging.getLogger(__name__)


def build_engine(db_url: str, echo: bool = False, **extra) -> Engine:
    """Create an engine with the options appropriate to the database scheme."""
    engine_kwargs = dict(extra)

    if db_url.startswith("sqlite"):
        engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        # Better resiliency for managed Postgres
        engine_kwargs.update({
            "pool_pre_ping": True,
            "pool_recycle": 300,
            "pool_size": 5,
            "max_overflow": 10,
        })

    new_engine = create_engine(db_url, echo=echo, **engine_kwargs)

    if db_url.startswith("sqlite"):
        # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
        @event.listens_for(new_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)


def create_db_and_tables(bind: Engine = None):
    # Import models so they register on SQLModel.metadata
    from . import db  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)
    logger.info("Database tables ensured")


def get_session():
    with Session(engine) as session:
        yield session
