"""
Contact Service - Core business logic for contact management
Handles CRUD, duplicate detection, merging and vCard export/import.
Every operation converts store failures into its own generic error.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List

from database import db_manager
from models.contact import Contact
from repositories.contact_repository import ContactRepository
from services.duplicates import group_duplicates
from services.errors import ContactValidationError, NotFoundError, translate_errors
from services.validation import validate_contact
from services.vcard import CardCandidate, export_vcards, iter_cards

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    imported: int = 0
    skipped: int = 0


def _require_valid(payload) -> None:
    errors = validate_contact(payload)
    if errors:
        logger.warning(f"Contact rejected: {errors[0].field}: {errors[0].message}")
        raise ContactValidationError(errors)


class ContactService:
    """
    Core service for contact management
    Each public method runs in its own session, i.e. its own transaction.
    """

    def __init__(self):
        self.db_manager = db_manager

    async def list_contacts(self) -> List[Contact]:
        with translate_errors("Error fetching contacts"):
            async with self.db_manager.get_session() as session:
                return await ContactRepository(session).find_all()

    async def create_contact(self, payload) -> Contact:
        """
        Validate and store a new contact

        Raises:
            ContactValidationError: payload breaks a rule
        """
        _require_valid(payload)
        with translate_errors("Error creating contact"):
            async with self.db_manager.get_session() as session:
                contact = await ContactRepository(session).create(
                    payload.name, payload.email, payload.phone
                )
        logger.info(f"Created contact {contact.id}")
        return contact

    async def update_contact(self, contact_id, payload) -> Contact:
        """
        Validate and overwrite an existing contact

        Raises:
            ContactValidationError: payload breaks a rule
            NotFoundError: no contact with that id
        """
        _require_valid(payload)
        with translate_errors("Error updating contact"):
            contact = None
            if contact_id is not None:
                async with self.db_manager.get_session() as session:
                    contact = await ContactRepository(session).find_by_id_and_update(
                        contact_id, payload.name, payload.email, payload.phone
                    )
            if contact is None:
                raise NotFoundError("Contact not found")
        logger.info(f"Updated contact {contact.id}")
        return contact

    async def delete_contact(self, contact_id) -> Contact:
        """
        Remove a contact

        Raises:
            NotFoundError: no contact with that id
        """
        with translate_errors("Error deleting contact"):
            contact = None
            if contact_id is not None:
                async with self.db_manager.get_session() as session:
                    contact = await ContactRepository(session).find_by_id_and_delete(contact_id)
            if contact is None:
                raise NotFoundError("Contact not found")
        logger.info(f"Deleted contact {contact_id}")
        return contact

    async def find_duplicates(self) -> List[List[Contact]]:
        """
        Groups of contacts sharing identical name, email and phone

        Algorithm:
        1. Fetch every contact in creation order
        2. Group by the (name, email, phone) key
        3. Keep groups with more than one member
        """
        with translate_errors("Error finding duplicates"):
            async with self.db_manager.get_session() as session:
                contacts = await ContactRepository(session).find_all()
        duplicates = group_duplicates(contacts)
        logger.info(f"Found {len(duplicates)} duplicate group(s) among {len(contacts)} contact(s)")
        return duplicates

    async def merge_contacts(self, contact_ids: Iterable[int], replacement) -> Contact:
        """
        Replace a set of contacts with a single contact

        The replacement is validated before anything is touched. The
        deletes and the insert share one transaction, so a failure leaves
        the original contacts in place and no replacement behind.

        Raises:
            ContactValidationError: replacement breaks a rule
        """
        _require_valid(replacement)
        contact_ids = list(contact_ids)
        with translate_errors("Error merging contacts"):
            async with self.db_manager.get_session() as session:
                repository = ContactRepository(session)
                removed = await repository.delete_many(contact_ids)
                merged = await repository.create(
                    replacement.name, replacement.email, replacement.phone
                )
        logger.info(
            f"Merged {removed} of {len(contact_ids)} requested contact(s) into contact {merged.id}"
        )
        return merged

    async def export_contacts(self) -> str:
        """
        Every contact as a vCard blob

        Raises:
            NotFoundError: there is nothing to export
        """
        with translate_errors("Error exporting contacts."):
            async with self.db_manager.get_session() as session:
                contacts = await ContactRepository(session).find_all()
            if not contacts:
                raise NotFoundError("No contacts found to export.")
            return export_vcards(contacts)

    def _accept_card(self, card: CardCandidate) -> bool:
        if not card.is_complete:
            logger.warning(f"Skipping vCard #{card.index}: missing FN, EMAIL or TEL")
            return False
        errors = validate_contact(card)
        if errors:
            logger.warning(f"Skipping vCard #{card.index}: {errors[0].message}")
            return False
        return True

    async def import_contacts(self, text: str) -> ImportResult:
        """
        Create a contact for every complete and valid card in a vCard blob

        Cards are stored one at a time, each in its own transaction, so a
        store failure keeps the cards already imported and abandons the rest.
        """
        result = ImportResult()
        with translate_errors("Error importing contacts."):
            for card in iter_cards(text):
                if not self._accept_card(card):
                    result.skipped += 1
                    continue
                async with self.db_manager.get_session() as session:
                    await ContactRepository(session).create(card.name, card.email, card.phone)
                result.imported += 1
        logger.info(f"Imported {result.imported} contact(s), skipped {result.skipped} card(s)")
        return result


# Global service instance
contact_service = ContactService()
