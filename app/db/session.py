from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from app.core.config import settings
import logging

logger = logging.getLogger("database")

# Base class for all models
Base = declarative_base()

_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def create_db_engine(database_url: str = None) -> Engine:
    """
    Build the engine for the record store. The caller owns the returned
    engine and is responsible for disposing it.
    """
    database_url = database_url or settings.DATABASE_URL
    engine_kwargs = {"echo": settings.DB_ECHO}

    if database_url.startswith("sqlite"):
        # Route functions run in a threadpool
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in _MEMORY_URLS:
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs["pool_pre_ping"] = True

    engine = create_engine(database_url, **engine_kwargs)

    @event.listens_for(engine, "connect")
    def receive_connect(dbapi_connection, connection_record):
        if engine.dialect.name == "sqlite":
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()
        logger.info("DB connection established")

    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
