# controllers/submit.py
"""Form submission endpoint: signup and contact."""

import logging

from fastapi import APIRouter, Depends
from pydantic import ValidationError
from sqlalchemy.orm import Session

from ..config import get_settings
from ..database import describe_error
from ..dependencies import get_db, get_payload
from ..exceptions import SubmissionError
from ..payload import Payload
from ..schemas import submission as schemas
from ..services import submission as service

logger = logging.getLogger(__name__)

router = APIRouter()


def validate_form(form_class, payload: Payload):
    try:
        return form_class.model_validate(payload)
    except ValidationError:
        raise SubmissionError(400, "All fields are required")


def internal_error(exc: Exception) -> SubmissionError:
    if get_settings().expose_error_details:
        return SubmissionError(500, f"Internal Server Error: {describe_error(exc)}")
    return SubmissionError(500, "Internal Server Error")


@router.post("/submit", response_model=schemas.SubmissionResponse, summary="Submit a signup or contact form")
def submit(
    payload: Payload = Depends(get_payload),
    db: Session = Depends(get_db),
):
    """Dispatch on the ``type`` field and persist the submission."""
    form_type = payload.get("type")
    try:
        db.connection()

        if form_type == "signup":
            form = validate_form(schemas.SignupForm, payload)
            service.register_user(db, form)
            return schemas.SubmissionResponse(success=True, message="Account created successfully")

        if form_type == "contact":
            form = validate_form(schemas.ContactForm, payload)
            service.record_message(db, form)
            return schemas.SubmissionResponse(success=True, message="Message sent successfully")

        raise SubmissionError(400, "Invalid request type")

    except SubmissionError:
        raise
    except Exception as exc:
        logger.exception(f"Database error handling {form_type!r} submission")
        raise internal_error(exc)
