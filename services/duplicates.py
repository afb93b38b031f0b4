"""
Duplicate detection
Contacts are duplicates when name, email and phone are all exactly equal.
"""

from typing import Dict, Iterable, List

# Unit separator, never part of a name, email or phone
KEY_SEPARATOR = "\x1f"


def duplicate_key(contact) -> str:
    """Grouping key for a contact; case-sensitive, field-delimited"""
    return KEY_SEPARATOR.join((contact.name, contact.email, contact.phone))


def group_duplicates(contacts: Iterable) -> List[List]:
    """
    Partition contacts by duplicate_key and keep groups of two or more

    Groups come back in the order their key was first seen, members in
    input order.
    """
    groups: Dict[str, List] = {}
    for contact in contacts:
        groups.setdefault(duplicate_key(contact), []).append(contact)
    return [group for group in groups.values() if len(group) > 1]
