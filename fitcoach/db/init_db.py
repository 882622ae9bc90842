"""
Database initialization.

Creates all tables.  Production schemas are managed by Alembic; this is
for local development databases.
"""

from sqlmodel import SQLModel

import fitcoach.db.base  # noqa: F401
from fitcoach.core.logging import get_logger
from fitcoach.db.session import engine

logger = get_logger(__name__)


def init_db() -> None:
    """Create every SQLModel table that does not exist yet."""
    logger.info("creating_tables", tables=sorted(SQLModel.metadata.tables))
    SQLModel.metadata.create_all(engine)
    logger.info("tables_created")


if __name__ == "__main__":
    init_db()
