# backend/economy/db/session.py
import logging
import time
from typing import Generator, Optional

from fastapi import Request
from sqlalchemy import create_engine, exc
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ..core.config import settings

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        # One shared connection so an in-memory database survives across sessions and threads
        return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


def create_db_engine_with_retries(
    url: Optional[str] = None,
    max_retries: Optional[int] = None,
    retry_delay: Optional[float] = None,
) -> Engine:
    """
    Creates an engine for `url` (defaults to settings.DATABASE_URL), tests it and returns it.
    Retries on OperationalError so the API can come up before the database container does.
    """
    url = url or settings.DATABASE_URL
    if url is None:
        raise ValueError("DATABASE_URL is not set in the environment or configuration.")
    max_retries = max_retries if max_retries is not None else settings.DB_CONNECT_RETRIES
    retry_delay = retry_delay if retry_delay is not None else settings.DB_RETRY_DELAY

    for attempt in range(max_retries):
        try:
            created_engine = create_engine(url, **_engine_kwargs(url))
            with created_engine.connect():
                logger.info("Database connection successful during creation.")
                return created_engine
        except exc.OperationalError as e:
            logger.warning(f"Database connection attempt {attempt + 1}/{max_retries} failed: {e}")
            if attempt < max_retries - 1:
                logger.warning(f"Retrying in {retry_delay} seconds...")
                time.sleep(retry_delay)
            else:
                logger.error("Max retries reached. Could not connect to the database.")
                raise

    raise RuntimeError("Could not connect to database: no connection attempts were made.")


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a database session from the factory the
    lifespan manager stored on app.state.
    """
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Database engine has not been initialized. The application lifespan manager may have failed.")

    db = session_factory()
    try:
        yield db
    finally:
        db.close()
