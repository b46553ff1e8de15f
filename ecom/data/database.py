# ecom/data/database.py
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from ecom.utils.logging import get_logger
from ecom.utils.retry import db_retry
from ecom.utils.settings import DATABASE_ECHO, DATABASE_URL

logger = get_logger(__name__)

_IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def build_engine(url: str) -> Engine:
    kwargs = {"echo": DATABASE_ECHO}
    if url.startswith("sqlite"):
        #sqlite + threadpool fastapi
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in _IN_MEMORY_URLS:
            #jedna baza w pamieci wspolna dla wszystkich sesji
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    new_engine = create_engine(url, **kwargs)
    if url.startswith("sqlite"):
        event.listen(new_engine, "connect", _enable_sqlite_foreign_keys)
    return new_engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # sqlite domyslnie ignoruje ON DELETE CASCADE / SET NULL
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = build_engine(DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
Base = declarative_base()


def get_db():
    """One session per request, closed when the request is done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@db_retry()
def init_db(bind: Engine | None = None) -> None:
    # import modeli zeby zarejestrowac tabele w Base.metadata
    import ecom.data.models  # noqa: F401

    target = bind or engine
    Base.metadata.create_all(bind=target)
    logger.info(f"Database tables ready: {sorted(Base.metadata.tables.keys())}")
