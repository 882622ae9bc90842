"""
Database initialization script.

Creates the FitCoach tables on the configured database and, with
``--seed``, inserts the default program catalog.  Production schemas
are migrated with Alembic (``alembic upgrade head``).

Usage:
    python scripts/init_db.py [--seed]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from fitcoach.catalog.default_programs import seed_default_programs
from fitcoach.core.config import settings
from fitcoach.core.logging import configure_logging, get_logger
from fitcoach.db.init_db import init_db
from fitcoach.db.session import engine

logger = get_logger("scripts.init_db")

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create FitCoach tables.")
    parser.add_argument("--seed", action="store_true", help="Also insert the default program catalog")
    args = parser.parse_args()

    configure_logging(json_output=False)
    try:
        init_db()
        if args.seed:
            with Session(engine) as session:
                seed_default_programs(session)
    except SQLAlchemyError:
        logger.exception("database_init_failed", database=settings.DATABASE_HOST)
        sys.exit(1)

    logger.info("database_ready", seeded=args.seed)
