"""Database configuration and session management."""

from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from fitpoints.config import get_settings

settings = get_settings()


def _engine_options(url: str) -> dict:
    """Pool options for the configured backend."""
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True, "pool_size": 5, "max_overflow": 10}
    
    options = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        # One shared connection, otherwise every checkout sees an empty database
        options["poolclass"] = StaticPool
    return options


def _enable_sqlite_savepoints(sqlite_engine):
    """Let SQLAlchemy emit BEGIN itself so SAVEPOINT nests inside the outer transaction."""

    @event.listens_for(sqlite_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(sqlite_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


# Create engine
engine = create_engine(settings.database_url, **_engine_options(settings.database_url))

if engine.dialect.name == "sqlite":
    _enable_sqlite_savepoints(engine)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


def get_db():
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
