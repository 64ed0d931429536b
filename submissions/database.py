# database.py
"""Database configuration and session management."""

import logging
from functools import lru_cache
from typing import Optional

from sqlalchemy import create_engine, NullPool
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import get_settings

logger = logging.getLogger(__name__)


def normalize_url(url: str) -> str:
    """Accept Heroku/Neon style ``postgres://`` URLs."""
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


@lru_cache
def get_engine() -> Engine:
    """Build the engine on first use so a missing URL fails the request, not the import."""
    settings = get_settings()
    if not settings.database_url:
        raise RuntimeError(
            "DATABASE_URL environment variable is not set. "
            "Please set it in your .env file or environment."
        )

    url = normalize_url(settings.database_url)
    connect_args = {}
    if url.startswith("postgresql"):
        # TLS without certificate verification
        connect_args["sslmode"] = settings.database_sslmode

    logger.info("Connecting to database...")

    # One connection per invocation, nothing kept between them
    return create_engine(url, connect_args=connect_args, poolclass=NullPool)


class LazySession(Session):
    """Session that resolves its engine only when it first talks to the database."""

    def get_bind(self, mapper=None, clause=None, **kw):
        if self.bind is not None:
            return self.bind
        return get_engine()


# Create a configured "SessionLocal" class
SessionLocal = sessionmaker(class_=LazySession, autocommit=False, autoflush=False)

# Base class for models
Base = declarative_base()


def describe_error(exc: BaseException) -> str:
    """Return the driver's message for DB-API errors, str(exc) otherwise."""
    orig: Optional[BaseException] = getattr(exc, "orig", None)
    if orig is not None:
        return str(orig).strip()
    return str(exc)
