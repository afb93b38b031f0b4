"""
Contact record store
Create, find-all, find-by-id-update, find-by-id-delete and delete-many
over one AsyncSession. The caller owns the session and therefore the
transaction: nothing here commits.
"""

from typing import Iterable, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.base import utcnow
from models.contact import Contact


class ContactRepository:
    """
    Record-store operations for Contact rows
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, name: str, email: str, phone: str) -> Contact:
        """Insert a contact and flush so the identifier is assigned"""
        contact = Contact(name=name, email=email, phone=phone)
        self.session.add(contact)
        await self.session.flush()
        return contact

    async def find_all(self) -> List[Contact]:
        """All contacts in creation order"""
        result = await self.session.execute(select(Contact).order_by(Contact.id))
        return list(result.scalars().all())

    async def find_by_id(self, contact_id: int) -> Optional[Contact]:
        return await self.session.get(Contact, contact_id)

    async def find_by_id_and_update(
        self,
        contact_id: int,
        name: str,
        email: str,
        phone: str
    ) -> Optional[Contact]:
        """
        Overwrite name, email and phone of a contact

        Returns:
            The updated contact, or None when the id is unknown
        """
        contact = await self.find_by_id(contact_id)
        if contact is None:
            return None

        contact.name = name
        contact.email = email
        contact.phone = phone
        contact.updated_at = utcnow()
        await self.session.flush()
        return contact

    async def find_by_id_and_delete(self, contact_id: int) -> Optional[Contact]:
        """
        Delete a contact

        Returns:
            The deleted contact, or None when the id is unknown
        """
        contact = await self.find_by_id(contact_id)
        if contact is None:
            return None

        await self.session.delete(contact)
        await self.session.flush()
        return contact

    async def delete_many(self, contact_ids: Iterable[int]) -> int:
        """
        Delete every contact whose id is listed; unknown ids are ignored

        Returns:
            Number of rows removed
        """
        ids = list(set(contact_ids))
        if not ids:
            return 0

        result = await self.session.execute(
            delete(Contact).where(Contact.id.in_(ids))
        )
        return result.rowcount
