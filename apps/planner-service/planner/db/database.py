"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration with an
in-memory SQLite fallback for test runs and exposes the FastAPI `get_db`
dependency.
"""
import logging
import os
import sys
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

_SQLITE_MEMORY_URL = "sqlite+pysqlite:///:memory:"


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest.

    ``PYTEST_CURRENT_TEST`` is only set while a test is running, so module
    import during collection is detected through ``sys.modules`` instead.
    ``PYTEST_RUNNING=1`` forces the check on.
    """
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    return "pytest" in sys.modules


def _get_database_url() -> str:
    # Precedence: PLANNER_TEST_DB, DATABASE_URL, pytest sqlite, POSTGRES_* parts
    explicit_test_db = os.getenv("PLANNER_TEST_DB")
    if explicit_test_db:
        return explicit_test_db
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")
    if _is_pytest_runtime():
        return _SQLITE_MEMORY_URL

    db_user = os.getenv("POSTGRES_USER")
    db_password = os.getenv("POSTGRES_PASSWORD")
    db_host = os.getenv("POSTGRES_HOST")
    db_port = os.getenv("POSTGRES_PORT")
    db_name = os.getenv("POSTGRES_DB")

    missing = [
        name
        for name, value in (
            ("POSTGRES_USER", db_user),
            ("POSTGRES_PASSWORD", db_password),
            ("POSTGRES_HOST", db_host),
            ("POSTGRES_PORT", db_port),
            ("POSTGRES_DB", db_name),
        )
        if not value
    ]
    if missing:
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

    return f"postgresql://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    kwargs = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in url:
        # StaticPool keeps the single in-memory database alive across sessions
        kwargs["poolclass"] = StaticPool
    return kwargs


DATABASE_URL = _get_database_url()

engine = create_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))


if DATABASE_URL.startswith("sqlite"):
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        # ON DELETE CASCADE is only enforced with this pragma
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

_SCHEMA_INIT_DONE = False


def _ensure_sqlite_schema():
    """Create tables on SQLite; other databases are managed by Alembic."""
    global _SCHEMA_INIT_DONE
    if _SCHEMA_INIT_DONE:
        return
    if str(engine.url).startswith("sqlite"):
        from planner.db import models  # local import to avoid a cycle at module load
        models.Base.metadata.create_all(bind=engine)
        logger.debug("sqlite schema created for %s", engine.url)
    _SCHEMA_INIT_DONE = True


def get_db():
    """Dependency to get a database session."""
    _ensure_sqlite_schema()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
