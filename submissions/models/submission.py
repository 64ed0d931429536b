# models/submission.py
"""SQLAlchemy models for submitted forms."""

from sqlalchemy import Column, Integer, String, Text
from ..database import Base


class User(Base):
    """Account created by the signup form."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String, unique=True, nullable=False)
    email = Column(String, unique=True, nullable=False)
    password_hash = Column(String, nullable=False) # bcrypt, never the raw password


class ContactMessage(Base):
    """Message left through the contact form."""
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    message = Column(Text, nullable=False)
