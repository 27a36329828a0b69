import sqlite3

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from config.app_config import DATABASE_URL, DATA_DIR

_is_sqlite = DATABASE_URL.startswith('sqlite')
if _is_sqlite:
    DATA_DIR.mkdir(parents=True, exist_ok=True)

engine = create_engine(
    DATABASE_URL,
    connect_args={'check_same_thread': False} if _is_sqlite else {},
    echo=False,
    pool_pre_ping=True,  # Verify connections are alive before using
    pool_recycle=3600  # Recycle connections after 1 hour to prevent stale connections
)


# Enable foreign keys on every SQLite connection (including test engines)
@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    if not isinstance(dbapi_conn, sqlite3.Connection):
        return
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
    cursor.close()


SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()


def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
