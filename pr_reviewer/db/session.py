# =============================================================================
# pr_reviewer/db/session.py
# =============================================================================
import logging
from typing import Generator
from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool
from tenacity import Retrying, stop_after_attempt, wait_incrementing, before_sleep_log

from pr_reviewer.core.config import Settings
from pr_reviewer.core.logger import get_module_logger

logger = get_module_logger(__name__, "database.log")

def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

class Database:
    """
    Process-wide storage handle: one engine and its session factory.

    Built once at startup and handed to request handlers through
    ``get_db``; nothing else in the package creates engines.
    """

    def __init__(self, url: str, pool_size: int = 10, max_overflow: int = 20):
        self.url = url
        self.engine = self._create_engine(url, pool_size, max_overflow)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @staticmethod
    def _create_engine(url: str, pool_size: int, max_overflow: int) -> Engine:
        if url.startswith("sqlite"):
            kwargs = {"connect_args": {"check_same_thread": False}}
            # In-memory databases live as long as their single connection
            if url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool
            engine = create_engine(url, **kwargs)
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)
            return engine

        return create_engine(
            url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
        )

    def ping(self) -> None:
        """Raise if the store is unreachable"""
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()

def connect_with_retry(settings: Settings) -> Database:
    """
    Open the store and verify it answers, retrying with linear backoff.

    Attempt N is followed by a wait of N * DB_CONNECT_BACKOFF_SECONDS.
    The last failure is re-raised once attempts are exhausted.
    """
    step = settings.DB_CONNECT_BACKOFF_SECONDS
    retrying = Retrying(
        stop=stop_after_attempt(settings.DB_CONNECT_ATTEMPTS),
        wait=wait_incrementing(start=step, increment=step),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )

    for attempt in retrying:
        with attempt:
            number = attempt.retry_state.attempt_number
            logger.info(
                f"Connecting to database {settings.safe_database_url} "
                f"(attempt {number}/{settings.DB_CONNECT_ATTEMPTS})"
            )
            database = Database(
                settings.database_url,
                pool_size=settings.DATABASE_POOL_SIZE,
                max_overflow=settings.DATABASE_MAX_OVERFLOW,
            )
            try:
                database.ping()
            except Exception:
                database.dispose()
                raise

    logger.info("Successfully connected to database")
    return database

def get_db(request: Request) -> Generator[Session, None, None]:
    """FastAPI dependency: one session per request from the app's Database"""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
