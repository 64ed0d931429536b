# services/submission.py
"""Persistence for the signup and contact flows."""

import logging

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .. import models
from ..auth import get_password_hash
from ..exceptions import SubmissionError
from ..schemas import submission as schemas

logger = logging.getLogger(__name__)

USER_EXISTS = "User already exists"


def user_exists(db: Session, email: str, username: str) -> bool:
    """Existence pre-check on either unique column."""
    return db.query(models.User.id).filter(
        or_(models.User.email == email, models.User.username == username)
    ).first() is not None


def register_user(db: Session, form: schemas.SignupForm) -> models.User:
    """Create a user unless the email or username is already taken."""
    if user_exists(db, form.email, form.username):
        logger.warning(f"Signup rejected, user exists: {form.username}")
        raise SubmissionError(400, USER_EXISTS)

    user = models.User(
        username=form.username,
        email=form.email,
        password_hash=get_password_hash(form.password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent signup for the same email/username
        db.rollback()
        logger.warning(f"Signup rejected by unique constraint: {form.username}")
        raise SubmissionError(400, USER_EXISTS)

    logger.info(f"Created user {form.username}")
    return user


def record_message(db: Session, form: schemas.ContactForm) -> models.ContactMessage:
    """Store a contact message as submitted."""
    message = models.ContactMessage(name=form.name, email=form.email, message=form.message)
    db.add(message)
    db.commit()
    logger.info(f"Stored contact message from {form.email}")
    return message
