# database.py
import logging
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from jobly.config import build_sqlalchemy_db_url, settings


logger = logging.getLogger("uvicorn.error")


def _build_connect_args(db_url: str) -> dict:
    if db_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


def _mask_db_url(db_url: str) -> str:
    try:
        return make_url(db_url).render_as_string(hide_password=True)
    except Exception:
        return db_url


_db_url = build_sqlalchemy_db_url(settings)
engine = create_engine(_db_url, pool_pre_ping=True, future=True, connect_args=_build_connect_args(_db_url))
logger.info("SQLAlchemy db_url=%s", _mask_db_url(_db_url))

if _db_url.startswith("sqlite"):
    # sqlite leaves foreign keys (and ON DELETE CASCADE) off unless asked per connection.
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
