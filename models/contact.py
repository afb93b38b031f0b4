"""
Contact model for the Contact Manager API
This module defines the Contact database model holding a person's
name, email address and phone number. Duplicates are allowed at the
storage level; they are detected and merged by the service layer.
"""

from sqlalchemy import Column, Index, String

from .base import BaseModel


class Contact(BaseModel):
    """
    Contact model representing one address-book entry

    Database Table: contacts
    """
    __tablename__ = "contacts"

    name = Column(
        String(255),
        nullable=False,
        comment="Display name, 3-30 characters when validated"
    )

    email = Column(
        String(255),
        nullable=False,
        index=True,
        comment="Email address"
    )

    phone = Column(
        String(20),
        nullable=False,
        index=True,
        comment="10 digit phone number"
    )

    # Duplicate detection compares all three fields
    __table_args__ = (
        Index("ix_contact_name_email_phone", name, email, phone),
    )

    def __repr__(self):
        return (
            f"<Contact(id={self.id}, name={self.name}, "
            f"email={self.email}, phone={self.phone})>"
        )
