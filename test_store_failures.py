"""
Store failure handling
A failing record store must surface as a 500 with the operation's own
generic message, never the underlying error, and must leave the store
in the state the transaction boundaries promise.
"""

import pytest

from repositories.contact_repository import ContactRepository

INTERNAL_DETAIL = "connection reset by db-primary-7"


async def _broken(*args, **kwargs):
    raise RuntimeError(INTERNAL_DETAIL)


def ids(client):
    return [c["_id"] for c in client.get("/contacts").json()]


@pytest.mark.parametrize("method,path,body,message", [
    ("GET", "/contacts", None, "Error fetching contacts"),
    ("GET", "/contacts/duplicates", None, "Error finding duplicates"),
    ("GET", "/contacts/export", None, "Error exporting contacts."),
])
def test_read_failures_return_generic_message(client, monkeypatch, method, path, body, message):
    monkeypatch.setattr(ContactRepository, "find_all", _broken)

    response = client.request(method, path, json=body)

    assert response.status_code == 500
    assert response.json()["error"] == "PersistenceError"
    assert response.json()["message"] == message
    assert INTERNAL_DETAIL not in response.text


def test_create_failure_returns_generic_message(client, monkeypatch):
    monkeypatch.setattr(ContactRepository, "create", _broken)

    response = client.post(
        "/contacts",
        json={"name": "Asha Verma", "email": "asha@mail.com", "phone": "9123456789"}
    )

    assert response.status_code == 500
    assert response.json()["message"] == "Error creating contact"
    assert INTERNAL_DETAIL not in response.text


def test_merge_failure_keeps_original_contacts(client, make_contact, monkeypatch):
    first = make_contact()
    second = make_contact()
    monkeypatch.setattr(ContactRepository, "create", _broken)

    response = client.post(
        "/contacts/merge",
        json={"contactIds": [first["_id"], second["_id"]], "name": "Asha", "email": "a@x.com", "phone": "9123456789"}
    )

    assert response.status_code == 500
    assert response.json() == {
        "error": "PersistenceError",
        "message": "Error merging contacts",
        "details": None,
    }
    monkeypatch.undo()
    assert ids(client) == [first["_id"], second["_id"]]


def test_import_failure_keeps_cards_already_imported(client, monkeypatch):
    original_create = ContactRepository.create
    calls = []

    async def fail_on_second_card(self, name, email, phone):
        calls.append(name)
        if len(calls) == 2:
            raise RuntimeError(INTERNAL_DETAIL)
        return await original_create(self, name, email, phone)

    monkeypatch.setattr(ContactRepository, "create", fail_on_second_card)
    text = (
        "BEGIN:VCARD\nFN:Asha Verma\nEMAIL:asha@mail.com\nTEL:9123456789\nEND:VCARD\n"
        "BEGIN:VCARD\nFN:Ravi Kumar\nEMAIL:ravi@mail.com\nTEL:8123456789\nEND:VCARD\n"
        "BEGIN:VCARD\nFN:Meera Iyer\nEMAIL:meera@mail.com\nTEL:7123456789\nEND:VCARD\n"
    )

    response = client.post(
        "/contacts/import",
        files={"file": ("contacts.vcf", text.encode("utf-8"), "text/vcard")}
    )

    assert response.status_code == 500
    assert response.json()["message"] == "Error importing contacts."
    assert INTERNAL_DETAIL not in response.text
    assert calls == ["Asha Verma", "Ravi Kumar"]

    monkeypatch.undo()
    assert [c["name"] for c in client.get("/contacts").json()] == ["Asha Verma"]
