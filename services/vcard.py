"""
vCard codec for contact export and import
Writes a minimal vCard 3.0 subset (FN, EMAIL, TEL) and reads it back
leniently: the blob is split into cards, each card yields a candidate,
and candidates missing a field are reported as incomplete instead of
raising. Field values are not escaped, so a value containing a line
break would corrupt the exported text.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

VCARD_BEGIN = "BEGIN:VCARD"
VCARD_TEMPLATE = (
    VCARD_BEGIN + "\n"
    "VERSION:3.0\n"
    "FN:{name}\n"
    "EMAIL:{email}\n"
    "TEL:{phone}\n"
    "END:VCARD"
)

# Lookahead split keeps BEGIN:VCARD attached to the card it opens
_CARD_BOUNDARY = re.compile(f"(?={re.escape(VCARD_BEGIN)})")
_NAME = re.compile(r"FN:(.*)")
_EMAIL = re.compile(r"EMAIL:(.*)")
_PHONE = re.compile(r"TEL:(.*)")


@dataclass
class CardCandidate:
    """
    Fields captured from one card; a field is None when the card lacks it
    or its value is blank
    """
    index: int
    name: Optional[str]
    email: Optional[str]
    phone: Optional[str]

    @property
    def is_complete(self) -> bool:
        return bool(self.name and self.email and self.phone)


def format_vcard(contact) -> str:
    """Render a single contact as a vCard block"""
    return VCARD_TEMPLATE.format(name=contact.name, email=contact.email, phone=contact.phone)


def export_vcards(contacts: Iterable) -> str:
    """Render contacts as newline-joined vCard blocks, in input order"""
    return "\n".join(format_vcard(contact) for contact in contacts)


def split_cards(text: str) -> List[str]:
    """
    Split a vCard blob into card chunks

    Text before the first BEGIN:VCARD stays as a chunk of its own unless
    it is blank.
    """
    chunks = _CARD_BOUNDARY.split(text)
    if chunks and not chunks[0].strip():
        chunks = chunks[1:]
    return chunks


def _capture(pattern, chunk: str) -> Optional[str]:
    match = pattern.search(chunk)
    if not match:
        return None
    return match.group(1).strip() or None


def parse_card(chunk: str, index: int = 0) -> CardCandidate:
    """Capture the first FN, EMAIL and TEL values of a chunk"""
    return CardCandidate(
        index=index,
        name=_capture(_NAME, chunk),
        email=_capture(_EMAIL, chunk),
        phone=_capture(_PHONE, chunk),
    )


def iter_cards(text: str) -> Iterator[CardCandidate]:
    """Lazily parse every card chunk of a vCard blob"""
    for index, chunk in enumerate(split_cards(text)):
        yield parse_card(chunk, index)


def decode_upload(content: bytes) -> str:
    """
    Decode uploaded vCard bytes as UTF-8, tolerating a byte order mark

    Raises:
        UnicodeDecodeError: content is not UTF-8
    """
    return content.decode("utf-8-sig")
