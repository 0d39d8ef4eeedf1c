#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import pytest
from pydantic import ValidationError

from addressbook.contact_name import ContactName, by_first_name, by_last_name


@pytest.mark.parametrize(
    "first_name, last_name",
    [("William", "Gates"), ("Pepper", ""), ("Pepper", None), ("", "Wolfe")],
)
def test_fields_preserved(first_name: str, last_name: str | None):
    name = ContactName(first_name, last_name)
    assert name.first_name == first_name
    assert name.last_name == last_name


def test_first_name_required():
    with pytest.raises(ValidationError):
        ContactName(None, "Gates")


def test_first_name_cannot_be_set_to_none():
    name = ContactName("William", "Gates")
    with pytest.raises(ValidationError):
        name.first_name = None
    assert name.first_name == "William"


def test_str():
    assert str(ContactName("William", "Gates")) == "William Gates"
    assert str(ContactName("Pepper")) == "Pepper"


def test_orderings():
    names = [
        ContactName("Zach", "Adams"),
        ContactName("Anna", "Wolfe"),
        ContactName("Anna", "Adams"),
        ContactName("Bob"),
    ]
    assert [str(n) for n in sorted(names, key=by_first_name)] == [
        "Anna Adams",
        "Anna Wolfe",
        "Bob",
        "Zach Adams",
    ]
    assert [str(n) for n in sorted(names, key=by_last_name)] == [
        "Bob",
        "Anna Adams",
        "Zach Adams",
        "Anna Wolfe",
    ]


def test_xml_element():
    element = ContactName("William", "Gates").to_xml_element()
    assert element.tag == "ContactName"
    assert element.get("FirstName") == "William"
    assert element.get("LastName") == "Gates"
    assert ContactName.from_xml(element) == ContactName("William", "Gates")


def test_xml_missing_last_name():
    element = ContactName("Pepper").to_xml_element()
    assert element.get("LastName") == ""
    del element.attrib["LastName"]
    assert ContactName.from_xml(element).last_name == ""
