"""
Database schema initialization script
-------------------------------------
Creates the documents table and its indexes.
"""

import sys
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

sys.path.insert(0, str(PROJECT_ROOT))

from sqlalchemy import inspect

from launderette.core.config import settings
from launderette.db.init_db import init_db
from launderette.db.session import build_engine


def init_db_schema() -> None:
    """Create tables and list what exists afterwards."""
    print("Initializing database schema...")
    engine = build_engine(str(settings.database_url))
    init_db(engine)
    print("Tables created")

    print("\nTables:")
    for name in inspect(engine).get_table_names():
        print(f"  - {name}")


if __name__ == "__main__":
    init_db_schema()
