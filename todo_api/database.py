import logging

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from todo_api.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


def _connect_args(database_url: str) -> dict:
    # SQLite connections are handed across FastAPI's threadpool workers
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.database_url,
    connect_args=_connect_args(settings.database_url),
    echo=settings.sql_echo,
    pool_pre_ping=settings.pool_pre_ping,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Yield a database session, closing it once the request is done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None) -> None:
    """Create tables and indexes that do not exist yet.

    Safe to call on every start. Errors are logged and re-raised so that
    startup aborts instead of serving requests without a schema.
    """
    # Import models so they are registered on Base.metadata
    from todo_api import models  # noqa: F401

    try:
        Base.metadata.create_all(bind=bind or engine)
    except SQLAlchemyError:
        logger.error("Database initialization failed", exc_info=True)
        raise
    logger.info("Database initialized successfully")
