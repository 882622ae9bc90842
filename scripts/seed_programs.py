"""
Seed the default workout program catalog.

Skips seeding when default programs already exist.

Usage:
    python scripts/seed_programs.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from sqlmodel import Session

from fitcoach.catalog.default_programs import seed_default_programs
from fitcoach.core.logging import configure_logging
from fitcoach.db.session import engine

if __name__ == "__main__":
    configure_logging(json_output=False)
    print("=" * 50)
    print("FitCoach Program Catalog Seed")
    print("=" * 50)

    with Session(engine) as session:
        created = seed_default_programs(session)
        names = [program.name for program in created]

    if names:
        for name in names:
            print(f"Created: {name}")
    else:
        print("Default programs already exist. Skipping seed.")
