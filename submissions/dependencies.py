# dependencies.py
"""Centralized dependencies for FastAPI application."""

from fastapi import Request

from . import database
from .payload import Payload, parse_payload


def get_db():
    """Database session dependency.

    Yields a database session and ensures it's closed after use,
    whichever way the request ends.
    Usage: db: Session = Depends(get_db)
    """
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


async def get_payload(request: Request) -> Payload:
    """Decoded request body (JSON, else URL-encoded form)."""
    return parse_payload(await request.body())
