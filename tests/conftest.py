#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import pytest

from addressbook.address_book import AddressBook
from addressbook.contact import Contact
from addressbook.phone_number import PhoneNumber
from addressbook.postal_address import PostalAddress


@pytest.fixture
def contacts() -> dict[str, Contact]:
    gates = Contact.create_with_name("William", "Gates")
    gates.email_address = "wg1544@hotmail.com"
    gates.note = "the first contact inserted"
    gates.phone_number = PhoneNumber.create_new("2127740908")
    gates.postal_address = PostalAddress(
        "40 Broadway", "NYU", "New York", "NY", "US", "10121"
    )

    pepper = Contact.create_with_name("Pepper")
    pepper.email_address = "pepper@microsoft.com"
    pepper.phone_number = PhoneNumber.create_new("7149883232")
    pepper.postal_address = PostalAddress(
        "14 52nd Street", "NYU", "New York", "NY", "US", "10016"
    )

    wolfe = Contact.create_with_name("Zach", "Wolfe")
    wolfe.email_address = "wolfe22@gmail.com"
    wolfe.note = "family account"
    wolfe.phone_number = PhoneNumber.create_new("2018450098")
    wolfe.postal_address = PostalAddress(
        "35 River Court Apt1621", "NYU", "Jersey City", "NJ", "US", "07311"
    )
    return {"Gates": gates, "Pepper": pepper, "Wolfe": wolfe}


@pytest.fixture
def address_book(contacts: dict[str, Contact]) -> AddressBook:
    address_book = AddressBook.create_empty()
    for contact in contacts.values():
        address_book.add(contact)
    return address_book
