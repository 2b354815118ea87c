"""
Database configuration and session management.

This module provides:
- Database URL resolution from settings (testing, development, production)
- The Database handle, which owns the SQLAlchemy engine and session factory
  and is opened at startup and closed at shutdown
- Transactional session scopes used by the repositories

SQLite is used for development and tests, PostgreSQL in production.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import NullPool, QueuePool, StaticPool

from gestioncommande.exceptions import StorageUnavailableError
# Import all models to ensure they are registered
from gestioncommande.models import Base
from gestioncommande.utils.config import Settings, get_settings
from gestioncommande.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_SQLITE_URL = "sqlite:///gestioncommande.db"
MEMORY_SQLITE_URL = "sqlite://"

# Errors raised by the driver when the server cannot be reached
CONNECTIVITY_ERRORS = (OperationalError, InterfaceError)


def _clean_url(url: str) -> str:
    # Fix potential newline issues in .env file
    return url.split('\n')[0].strip()


def get_database_url(settings: Optional[Settings] = None) -> str:
    """
    Get database URL based on environment.

    Args:
        settings: Settings to read from. Defaults to the cached settings.

    Returns:
        str: Database connection URL
    """
    settings = settings or get_settings()

    # For testing, always use in-memory SQLite
    if settings.TESTING:
        logger.info("Using in-memory SQLite database for testing")
        return MEMORY_SQLITE_URL

    env = settings.ENVIRONMENT.lower()
    logger.info(f"Current environment: {env}")

    if env == "development":
        if settings.DATABASE_URL_DEV:
            db_url = _clean_url(settings.DATABASE_URL_DEV)
            db_type = "PostgreSQL" if db_url.startswith("postgresql") else "SQLite"
            logger.info(f"Using {db_type} database for development")
            return db_url

        logger.info("Using default SQLite database for development")
        return DEFAULT_SQLITE_URL

    if settings.DATABASE_URL:
        db_url = _clean_url(settings.DATABASE_URL)
        db_type = "PostgreSQL" if db_url.startswith("postgresql") else "SQLite"
        logger.info(f"Using {db_type} database for {env}")
        return db_url

    logger.warning(f"No DATABASE_URL found, falling back to SQLite for {env}")
    return DEFAULT_SQLITE_URL


def _is_memory_sqlite(database_url: str) -> bool:
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


class Database:
    """
    Handle to the backing database.

    The handle is created closed. Call open() during startup and close()
    during shutdown, or use it as a context manager. Repositories receive
    the handle at construction and open one session per operation through
    session_scope().

    Attributes:
        database_url (str): SQLAlchemy connection URL
        settings (Settings): Settings used for pool and echo configuration
    """

    def __init__(self, database_url: Optional[str] = None, settings: Optional[Settings] = None):
        """
        Initialize the handle without connecting.

        Args:
            database_url: Optional database URL. If not provided, resolved from settings.
            settings: Optional settings. Defaults to the cached application settings.
        """
        self.settings = settings or get_settings()
        self.database_url = database_url or get_database_url(self.settings)
        self.engine: Optional[Engine] = None
        self.session_factory: Optional[sessionmaker] = None

    @property
    def is_open(self) -> bool:
        return self.engine is not None

    def _engine_args(self) -> dict:
        engine_args = {
            "echo": self.settings.DEBUG,
        }

        if self.database_url.startswith("sqlite"):
            engine_args["connect_args"] = {"check_same_thread": False}
            if _is_memory_sqlite(self.database_url):
                # A single shared connection keeps the in-memory database alive
                engine_args["poolclass"] = StaticPool
            else:
                engine_args["poolclass"] = NullPool

        elif self.database_url.startswith("postgresql"):
            engine_args.update({
                "poolclass": QueuePool,
                "pool_size": self.settings.POOL_SIZE,
                "max_overflow": self.settings.MAX_OVERFLOW,
                "pool_timeout": self.settings.POOL_TIMEOUT,
                "pool_recycle": self.settings.POOL_RECYCLE,
                "pool_pre_ping": True
            })

        return engine_args

    def open(self, create_tables: bool = True) -> "Database":
        """
        Create the engine and session factory.

        Args:
            create_tables: Create all model tables that do not exist yet.

        Returns:
            Database: this handle

        Raises:
            StorageUnavailableError: If the database cannot be reached while creating tables
        """
        if self.is_open:
            return self

        engine = create_engine(self.database_url, **self._engine_args())

        if create_tables:
            try:
                Base.metadata.create_all(bind=engine)
            except CONNECTIVITY_ERRORS as e:
                engine.dispose()
                logger.error(f"Error initializing database: {str(e)}")
                raise StorageUnavailableError(f"Cannot reach database: {str(e)}") from e

        self.engine = engine
        self.session_factory = sessionmaker(
            bind=engine,
            autoflush=False,
            expire_on_commit=False
        )
        logger.info(f"Opened database at {make_url(self.database_url).render_as_string(hide_password=True)}")
        return self

    def close(self) -> None:
        """Dispose of the engine. Closing a closed handle is a no-op."""
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
            self.session_factory = None
            logger.info("Closed database connection")

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """
        Provide a transactional scope around a series of operations.

        Commits on success, rolls back on error and always closes the session.
        Connectivity errors are raised as StorageUnavailableError.

        Yields:
            Session: SQLAlchemy session

        Raises:
            StorageUnavailableError: If the handle is not open or the database is unreachable
        """
        if self.session_factory is None:
            raise StorageUnavailableError("Database not initialized. Call open() first.")

        session = self.session_factory()
        try:
            yield session
            session.commit()
        except CONNECTIVITY_ERRORS as e:
            session.rollback()
            logger.error(f"Database unavailable: {str(e)}")
            raise StorageUnavailableError(f"Cannot reach database: {str(e)}") from e
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def check_connection(self) -> bool:
        """
        Check that the database answers a trivial query.

        Returns:
            bool: True if the database is reachable, False otherwise
        """
        if self.engine is None:
            return False
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except CONNECTIVITY_ERRORS as e:
            logger.warning(f"Database connection check failed: {str(e)}")
            return False

    def __enter__(self) -> "Database":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
