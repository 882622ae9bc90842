"""
Development server launcher.

Loads the .env file, optionally creates tables and seeds the default
program catalog, then serves the API with uvicorn.

Usage:
    python scripts/run_dev.py [--host 127.0.0.1] [--port 8000] [--no-reload] [--seed]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

import uvicorn
from sqlmodel import Session

from fitcoach.catalog.default_programs import seed_default_programs
from fitcoach.db.init_db import init_db
from fitcoach.db.session import engine


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the FitCoach API for local development.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--no-reload", action="store_true", help="Disable auto-reload on code changes")
    parser.add_argument("--seed", action="store_true", help="Create tables and seed default programs first")
    return parser.parse_args()


def prepare_database() -> None:
    init_db()
    with Session(engine) as session:
        seed_default_programs(session)


if __name__ == "__main__":
    args = parse_args()
    if args.seed:
        prepare_database()

    print(f"FitCoach API: http://{args.host}:{args.port}  (docs at /docs)")
    uvicorn.run("fitcoach.main:app", host=args.host, port=args.port, reload=not args.no_reload, log_level="info")
