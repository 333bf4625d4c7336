"""
Database configuration and session management.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings

logger = logging.getLogger("dailydiet.database")

# Create SQLAlchemy Base
Base = declarative_base()

# SQLite connections are shared across FastAPI's worker threads
_connect_args = {"check_same_thread": False} if settings.is_sqlite() else {}

# Create engine
engine = create_engine(
    settings.database_url, echo=settings.db_echo, connect_args=_connect_args
)

# Create session factory
SessionLocal = sessionmaker(bind=engine)


def init_database(bind=None):
    """Initialize database schema"""
    target = bind if bind is not None else engine
    with target.begin() as conn:
        Base.metadata.create_all(bind=conn)
    logger.info("Database tables created successfully")


def get_db_session():
    """Get database session (for FastAPI dependency injection)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
