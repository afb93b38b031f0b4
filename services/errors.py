"""
Error taxonomy for the contact service
Each error carries the HTTP status and error name it is rendered with.
Store failures are converted to one generic message per operation so
internal details never reach the client.
"""

import logging
import traceback
from contextlib import contextmanager
from typing import List, Optional

logger = logging.getLogger(__name__)


class ContactError(Exception):
    """Base class for errors surfaced to API clients"""
    status_code = 500
    error = "ContactError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def details(self) -> Optional[dict]:
        return None


class ContactValidationError(ContactError):
    """A contact payload broke a validation rule; message is the first violation"""
    status_code = 400
    error = "ValidationError"

    def __init__(self, errors: List):
        super().__init__(errors[0].message)
        self.errors = errors

    @property
    def details(self) -> Optional[dict]:
        return {"errors": [{"field": e.field, "message": e.message} for e in self.errors]}


class NotFoundError(ContactError):
    """Referenced contact (or anything to export) does not exist"""
    status_code = 404
    error = "NotFoundError"


class InputError(ContactError):
    """Missing or unreadable upload"""
    status_code = 400
    error = "InputError"


class PersistenceError(ContactError):
    """Store failure, reported with a generic per-operation message"""
    status_code = 500
    error = "PersistenceError"


@contextmanager
def translate_errors(message: str):
    """
    Let ContactError subclasses through and turn anything else into
    PersistenceError(message), logging the real cause.
    """
    try:
        yield
    except ContactError:
        raise
    except Exception as e:
        logger.error(f"{message}: {e}")
        logger.error(f"Traceback: {traceback.format_exc()}")
        raise PersistenceError(message) from e
