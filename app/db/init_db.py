from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from app.db.session import Base
from app.db.seed import seed_database

# Registers every table on Base.metadata
from app.models import models, order, product  # noqa: F401
import logging

logger = logging.getLogger("database")


def init_db(engine: Engine, session_factory: sessionmaker) -> dict:
    """Create missing tables and seed reference data. Safe to run repeatedly."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database schema initialized")

    with session_factory() as db:
        seeded = seed_database(db)

    logger.info(f"Database seeding completed: {seeded}")
    return seeded
