"""
Business logic services for the Contact Manager API
Contains validation, duplicate detection, merging and the vCard codec.
"""

from .contact_service import ContactService, ImportResult, contact_service

# Export all services for easy importing
__all__ = [
    "ContactService",
    "ImportResult",
    "contact_service"
]
