from database import engine, Base
from sqlalchemy import inspect
import logging

import models  # noqa: F401  registers the tables on Base.metadata

logger = logging.getLogger(__name__)

EXPECTED_TABLES = ('users', 'recipients', 'domains')


def init_database():
    """Create all tables that do not exist yet"""
    Base.metadata.create_all(bind=engine)

    tables = set(inspect(engine).get_table_names())
    missing = [name for name in EXPECTED_TABLES if name not in tables]
    if missing:
        logger.error(f"Database initialization incomplete, missing tables: {', '.join(missing)}")
    else:
        logger.info(f"Database ready: {engine.url.render_as_string(hide_password=True)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_database()
