from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base

from config.app_config import APP_CONFIG

if APP_CONFIG.is_sqlite:
    APP_CONFIG.data_dir.mkdir(parents=True, exist_ok=True)
    engine = create_engine(
        APP_CONFIG.database_url,
        connect_args={'check_same_thread': False},
        echo=False,
    )
else:
    engine = create_engine(
        APP_CONFIG.database_url,
        echo=False,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,  # Verify connections are alive before using
        pool_recycle=3600
    )


def set_sqlite_pragma(dbapi_conn, connection_record):
    """Enable WAL and foreign keys (needed for ON DELETE SET NULL) on SQLite."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA busy_timeout=5000")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


if APP_CONFIG.is_sqlite:
    event.listen(engine, "connect", set_sqlite_pragma)

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()


def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
