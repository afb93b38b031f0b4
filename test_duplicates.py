"""
Tests for duplicate grouping
"""

from types import SimpleNamespace

from services.duplicates import duplicate_key, group_duplicates


def contact(id, name="Asha Verma", email="asha@mail.com", phone="9123456789"):
    return SimpleNamespace(id=id, name=name, email=email, phone=phone)


def test_no_contacts_no_groups():
    assert group_duplicates([]) == []


def test_identical_triples_group_together():
    contacts = [contact(1), contact(2), contact(3, name="Ravi Kumar")]

    groups = group_duplicates(contacts)

    assert [[c.id for c in group] for group in groups] == [[1, 2]]


def test_partial_match_is_not_a_duplicate():
    contacts = [
        contact(1),
        contact(2, phone="9000000000"),
        contact(3, email="other@mail.com"),
        contact(4, name="asha verma"),
    ]

    assert group_duplicates(contacts) == []


def test_groups_keep_discovery_and_member_order():
    contacts = [
        contact(1, name="Ravi Kumar"),
        contact(2),
        contact(3, name="Ravi Kumar"),
        contact(4),
        contact(5, name="Ravi Kumar"),
        contact(6, name="Meera Iyer"),
    ]

    groups = group_duplicates(contacts)

    assert [[c.id for c in group] for group in groups] == [[1, 3, 5], [2, 4]]
    for group in groups:
        assert len(group) >= 2
        assert len({duplicate_key(c) for c in group}) == 1


def test_key_is_field_delimited():
    # Plain concatenation would make these two identical
    left = contact(1, name="Ab", email="c@mail.com", phone="9123456789")
    right = contact(2, name="A", email="bc@mail.com", phone="9123456789")

    assert duplicate_key(left) != duplicate_key(right)
    assert group_duplicates([left, right]) == []
