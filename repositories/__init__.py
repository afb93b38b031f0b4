"""
Data access layer for the Contact Manager API
Wraps SQLAlchemy sessions behind record-store style operations.
"""

from .contact_repository import ContactRepository

__all__ = [
    "ContactRepository"
]
