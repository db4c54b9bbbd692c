# Path: readidx/database/models/base.py
"""
Engine, Session and Declarative Base

Every readidx table derives from ``Base``. The engine is a module-level
singleton created once per process by initialize_engine():

- PostgreSQL (default driver) behind a QueuePool
- SQLite file for local use
- SQLite in-memory on a StaticPool for tests

Writes go through session_scope() so an import commits or rolls back
as a whole.
"""

import logging
from pathlib import Path
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool, QueuePool

from ...config_loader import ConfigLoader


# Logger setup
logger = logging.getLogger(__name__)

# SQLAlchemy declarative base
Base = declarative_base()

# Global engine and session factory
_engine = None
_SessionFactory = None

# Database type tracking
_database_type = None  # 'postgresql' or 'sqlite'


MEMORY_URLS = (':memory:', 'sqlite:///:memory:')


def _sqlite_engine(db_url: str):
    if db_url in MEMORY_URLS:
        # One shared connection so every session sees the same database
        return create_engine(
            'sqlite:///:memory:',
            connect_args={'check_same_thread': False},
            poolclass=StaticPool,
        )

    if ':///' in db_url:
        Path(db_url.split(':///', 1)[1]).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(db_url, connect_args={'check_same_thread': False})


def _pooled_engine(db_url: str, config: ConfigLoader):
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=config.get('db_pool_size', 5),
        max_overflow=config.get('db_pool_max_overflow', 10),
        pool_timeout=config.get('db_pool_timeout', 30),
        pool_recycle=config.get('db_pool_recycle', 3600),
        pool_pre_ping=True,
    )


def initialize_engine(
    db_url: Optional[str] = None,
    use_sqlite: bool = False,
) -> None:
    """
    Initialize database engine and session factory.

    Without arguments the URL comes from ConfigLoader
    (READIDX_DATABASE_URL or the READIDX_DB_* parts). A second call is
    ignored with a warning until reset_engine() runs.

    Args:
        db_url: Explicit database URL; ':memory:' selects in-memory SQLite
        use_sqlite: Force in-memory SQLite regardless of db_url

    Example:
        initialize_engine()                  # configured database
        initialize_engine(':memory:')        # tests
        initialize_engine('sqlite:///./data/readidx.db')
    """
    global _engine, _SessionFactory, _database_type

    if _engine is not None:
        logger.warning("Database engine already initialized")
        return

    if use_sqlite:
        db_url = ':memory:'

    config = None
    if db_url is None:
        config = ConfigLoader()
        db_url = config.get_db_connection_string()

    if db_url.startswith('sqlite') or db_url in MEMORY_URLS:
        _database_type = 'sqlite'
        _engine = _sqlite_engine(db_url)
        where = 'in-memory' if db_url in MEMORY_URLS else 'file'
        logger.info(f"Database engine initialized: SQLite {where}")
    else:
        _database_type = 'postgresql'
        _engine = _pooled_engine(db_url, config or ConfigLoader())
        logger.info(
            f"Database engine initialized: {_engine.url.get_backend_name()} "
            f"({_engine.url.host}:{_engine.url.port}/{_engine.url.database})"
        )

    _SessionFactory = sessionmaker(bind=_engine)


def _not_initialized() -> RuntimeError:
    return RuntimeError("Database is not initialized; call initialize_engine() first")


def get_engine():
    """Return the engine created by initialize_engine()."""
    if _engine is None:
        raise _not_initialized()
    return _engine


def get_session() -> Session:
    """
    Open a new session bound to the engine.

    Callers own the session; prefer session_scope() for writes.
    """
    if _SessionFactory is None:
        raise _not_initialized()
    return _SessionFactory()


@contextmanager
def session_scope() -> Generator[Session, None, None]:
    """
    Transactional scope: commit when the block completes, roll back and
    re-raise otherwise. One import is one scope.

    Example:
        with session_scope() as session:
            company = ReportOperations.upsert_company(session, 'BBCA', 'Bank Central Asia')
    """
    session = get_session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def create_all_tables() -> None:
    """Create every table registered on Base (existing tables are kept)."""
    Base.metadata.create_all(get_engine())
    logger.info(f"Created tables: {', '.join(sorted(Base.metadata.tables))}")


def drop_all_tables() -> None:
    """Drop every registered table. Development and tests only."""
    Base.metadata.drop_all(get_engine())
    logger.warning("Dropped all readidx tables")


def reset_engine() -> None:
    """Dispose of the engine so initialize_engine() can run again."""
    global _engine, _SessionFactory, _database_type
    if _engine is not None:
        _engine.dispose()
    _engine, _SessionFactory, _database_type = None, None, None


def get_database_type() -> Optional[str]:
    """'postgresql', 'sqlite', or None before initialization."""
    return _database_type


__all__ = [
    'Base',
    'initialize_engine',
    'get_engine',
    'get_session',
    'session_scope',
    'create_all_tables',
    'drop_all_tables',
    'reset_engine',
    'get_database_type',
]
