"""Database Configuration and Connection Management Module

This module handles database connectivity, session management, and table operations
for the interview simulator. It connects to the database named by DATABASE_URL
(a local SQLite file by default) and provides session and table utilities.

Dependencies:
- sqlalchemy: For database ORM and connection management.
- dotenv: For environment variable loading.
- loguru: For logging operations.
- app.models.interview_models: For database model definitions.

Author: @kcaparas1630
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from dotenv import load_dotenv
import os
from loguru import logger
from app.models.interview_models import Base
load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./interview_simulator.db")

engine_options = {
    "echo": False,
    "pool_pre_ping": True,  # verify connections before using
}
if DATABASE_URL.startswith("sqlite"):
    engine_options["connect_args"] = {"check_same_thread": False}
    if DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
        # Share the single in-memory database across sessions
        engine_options["poolclass"] = StaticPool
else:
    engine_options["pool_recycle"] = 300  # Recycle connections every 5 minutes

engine = create_engine(DATABASE_URL, **engine_options)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db_session():
    """FastAPI dependency for database session management.

    Creates a new database session for each request and ensures proper
    cleanup after the request is completed.

    Yields:
        Session: SQLAlchemy database session

    Example:
        @app.get("/interviews")
        async def list_interviews(db: Session = Depends(get_db_session)):
            return db.query(Interview).all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def create_tables():
    """Create all database tables defined in the models.

    Uses SQLAlchemy's metadata to create all tables that don't already exist.
    This is called during application startup.

    Raises:
        Exception: If table creation fails

    Note:
        This operation is idempotent - existing tables won't be modified
    """
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(f"Error creating database table: {e}")
        raise

def drop_tables():
    """Drop all database tables defined in the models.

    WARNING: This will permanently delete all data in the tables.
    Used by the test suite to reset state between tests.

    Raises:
        Exception: If table deletion fails
    """
    try:
        Base.metadata.drop_all(bind=engine)
        logger.info("Database tables dropped successfully")
    except Exception as e:
        logger.error(f"Error dropping database tables: {e}")
        raise
