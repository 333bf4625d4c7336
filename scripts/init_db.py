#!/usr/bin/env python3
"""
Standalone database initialization script.
Creates the users and meals tables in the configured database.
"""

import sys
import logging
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("init_db")


def main() -> int:
    from sqlalchemy import inspect
    from sqlalchemy.exc import SQLAlchemyError

    from app.config import settings
    from domain.models.database import engine, init_database

    logger.info(f"Initializing database at {engine.url.render_as_string(hide_password=True)}")
    try:
        init_database()
    except SQLAlchemyError as e:
        logger.error(f"Failed to initialize database: {e}")
        return 1

    tables = inspect(engine).get_table_names()
    logger.info(f"Tables for {settings.app_name}: {', '.join(tables)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
