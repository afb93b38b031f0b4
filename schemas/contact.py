"""
Pydantic schemas for the /contacts endpoints
Handles request parsing and response serialization.
Field rules (lengths, email and phone format) are checked by
services.validation so that every path reports the same messages.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ContactPayload(BaseModel):
    """
    Request body for creating a contact, also the replacement
    contact of a merge. Fields may be missing; the validator reports it.
    """
    name: Optional[str] = Field(
        None,
        description="Display name, 3 to 30 characters",
        examples=["Asha Verma"]
    )
    email: Optional[str] = Field(
        None,
        description="Email address",
        examples=["asha@mail.com"]
    )
    phone: Optional[str] = Field(
        None,
        description="10 digit phone number starting with 6, 7, 8 or 9",
        examples=["9123456789"]
    )

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Asha Verma",
                "email": "asha@mail.com",
                "phone": "9123456789"
            }
        }


class ContactUpdateRequest(ContactPayload):
    """
    Request body for updating a contact
    The identifier travels in the body as `_id`
    """
    id: Optional[int] = Field(
        None,
        alias="_id",
        description="Identifier of the contact to update"
    )

    class Config:
        populate_by_name = True


class ContactIdRequest(BaseModel):
    """Request body for deleting a contact"""
    id: Optional[int] = Field(
        None,
        alias="_id",
        description="Identifier of the contact to delete"
    )

    class Config:
        populate_by_name = True


class MergeRequest(ContactPayload):
    """
    Request body for merging contacts
    Every listed contact is removed and replaced by one contact
    built from name, email and phone.
    """
    contactIds: List[int] = Field(
        default_factory=list,
        description="Identifiers of the contacts being merged",
        examples=[[1, 2]]
    )

    class Config:
        json_schema_extra = {
            "example": {
                "contactIds": [1, 2],
                "name": "Asha Verma",
                "email": "asha@mail.com",
                "phone": "9123456789"
            }
        }


class ContactResponse(BaseModel):
    """
    Contact as returned by the API
    """
    id: int = Field(
        alias="_id",
        description="Store-assigned identifier"
    )
    name: str
    email: str
    phone: str

    class Config:
        populate_by_name = True

    @classmethod
    def from_contact(cls, contact) -> "ContactResponse":
        """Build the response model from a Contact row"""
        return cls(id=contact.id, name=contact.name, email=contact.email, phone=contact.phone)


class MessageResponse(BaseModel):
    """Plain confirmation message"""
    message: str


class MergeResponse(BaseModel):
    """
    Response schema for a merge: confirmation plus the replacement contact
    """
    message: str
    mergedContact: ContactResponse


class ImportResponse(BaseModel):
    """
    Response schema for a vCard import
    """
    message: str
    imported: int = Field(description="Number of contacts created")
    skipped: int = Field(description="Number of cards skipped as incomplete or invalid")


class ErrorResponse(BaseModel):
    """
    Error response schema for API errors
    """
    error: str = Field(
        description="Error type or category"
    )
    message: str = Field(
        description="Human-readable error message"
    )
    details: Optional[Dict[str, Any]] = Field(
        None,
        description="Additional error details"
    )

    class Config:
        json_schema_extra = {
            "examples": [
                {
                    "error": "ValidationError",
                    "message": "Phone number is invalid.",
                    "details": {"errors": [{"field": "phone", "message": "Phone number is invalid."}]}
                },
                {
                    "error": "NotFoundError",
                    "message": "Contact not found"
                }
            ]
        }
