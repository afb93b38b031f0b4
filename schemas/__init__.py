"""
Pydantic schemas for the Contact Manager API
Contains request/response models for the contact endpoints.
"""

from .contact import (
    ContactPayload,
    ContactUpdateRequest,
    ContactIdRequest,
    MergeRequest,
    ContactResponse,
    MessageResponse,
    MergeResponse,
    ImportResponse,
    ErrorResponse
)

# Export all schemas for easy importing
__all__ = [
    "ContactPayload",
    "ContactUpdateRequest",
    "ContactIdRequest",
    "MergeRequest",
    "ContactResponse",
    "MessageResponse",
    "MergeResponse",
    "ImportResponse",
    "ErrorResponse"
]
