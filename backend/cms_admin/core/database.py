"""
Database configuration and session management
"""
import logging
from typing import Callable, Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from cms_admin.core.config import get_settings
from cms_admin.core.logging_config import LoggingConfig

SessionFactory = Callable[[], Session]

# Lazy initialization - don't create engine at module level
_engine: Optional[Engine] = None
_SessionLocal: Optional[sessionmaker] = None

Base = declarative_base()


def get_engine() -> Engine:
    """Get or create database engine (lazy initialization)"""
    global _engine
    if _engine is None:
        settings = get_settings()
        LoggingConfig.configure()

        url = settings.database_url
        if url.startswith("sqlite"):
            _engine = create_engine(
                url,
                echo=settings.log_sqlalchemy,
                connect_args={"check_same_thread": False, "timeout": 5},
            )
        else:
            _engine = create_engine(
                url,
                pool_size=settings.database_pool_size,
                max_overflow=settings.database_max_overflow,
                pool_pre_ping=True,
                echo=settings.log_sqlalchemy,
                connect_args={"connect_timeout": 5},
            )

        sqlalchemy_logger = logging.getLogger("sqlalchemy.engine")
        if not settings.log_sqlalchemy:
            sqlalchemy_logger.setLevel(logging.WARNING)
            sqlalchemy_logger.propagate = False

    return _engine


def get_session_local() -> sessionmaker:
    """Get or create session factory (lazy initialization)"""
    global _SessionLocal
    if _SessionLocal is None:
        # Rows are handed to templates after the session closes
        _SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=get_engine(),
        )
    return _SessionLocal


def get_session_factory() -> SessionFactory:
    """
    Dependency for getting the session factory.

    Readers open one session per query so that independent reads
    of a page can run side by side.
    """
    return get_session_local()


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database session
    """
    db = get_session_local()()
    try:
        yield db
    finally:
        db.close()
