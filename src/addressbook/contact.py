#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""A single entry of the user's address book."""

from typing import Self
from xml.etree.ElementTree import Element, SubElement

from pydantic import BaseModel, ConfigDict

from addressbook import contact_name
from addressbook.constants import (
    CONTACT_NAME_XML_NAME,
    CONTACT_XML_NAME,
    EMAIL_XML_NAME,
    NOTE_XML_NAME,
    PHONE_NUMBER_XML_NAME,
    POSTAL_ADDRESS_XML_NAME,
)
from addressbook.contact_name import ContactName
from addressbook.exceptions import AddressBookFormatError
from addressbook.phone_number import PhoneNumber
from addressbook.postal_address import PostalAddress


class Contact(BaseModel):
    """A person stored in the address book.

    Use `create_with_name` to create a contact. Every field except `name`
    is optional. The name is validated whenever it is set, so a contact
    can never be left without one.

    Notes
    -----
    1. Contacts compare by identity, not by value: two contacts with the
    same details are two different entries of an address book.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: ContactName
    email_address: str | None = None
    note: str | None = None
    phone_number: PhoneNumber | None = None
    postal_address: PostalAddress | None = None

    def __eq__(self, other: object) -> bool:
        return self is other

    __hash__ = object.__hash__

    @classmethod
    def create_with_name(cls, first_name: str, last_name: str | None = "") -> Self:
        return cls(name=ContactName(first_name, last_name))

    def get_name(self) -> ContactName:
        return self.name

    def set_name(self, name: ContactName):
        self.name = name

    def get_email_address(self) -> str | None:
        return self.email_address

    def set_email_address(self, email_address: str | None):
        self.email_address = email_address

    def get_note(self) -> str | None:
        return self.note

    def set_note(self, note: str | None):
        self.note = note

    def get_phone_number(self) -> PhoneNumber | None:
        return self.phone_number

    def set_phone_number(self, phone_number: PhoneNumber | None):
        self.phone_number = phone_number

    def get_postal_address(self) -> PostalAddress | None:
        return self.postal_address

    def set_postal_address(self, postal_address: PostalAddress | None):
        self.postal_address = postal_address

    def __str__(self) -> str:
        return str(self.name)

    def to_xml_element(self) -> Element:
        element = Element(CONTACT_XML_NAME)
        element.append(self.name.to_xml_element())
        if self.postal_address is not None:
            element.append(self.postal_address.to_xml_element())
        if self.phone_number is not None:
            element.append(self.phone_number.to_xml_element())
        SubElement(element, EMAIL_XML_NAME).text = self.email_address
        SubElement(element, NOTE_XML_NAME).text = self.note
        return element

    @classmethod
    def from_xml(cls, element: Element) -> Self:
        """Build a contact from a `Contact` element.

        Raises
        ------
        AddressBookFormatError if the element has no `ContactName` child.
        """
        name_element = element.find(CONTACT_NAME_XML_NAME)
        if name_element is None:
            raise AddressBookFormatError(
                f"{CONTACT_XML_NAME} element without a {CONTACT_NAME_XML_NAME}"
            )
        contact = cls(name=ContactName.from_xml(name_element))
        contact.postal_address = PostalAddress.from_xml(
            element.find(POSTAL_ADDRESS_XML_NAME)
        )
        phone_element = element.find(PHONE_NUMBER_XML_NAME)
        if phone_element is not None:
            contact.phone_number = PhoneNumber.from_xml(phone_element)
        contact.email_address = _text_content(element, EMAIL_XML_NAME)
        contact.note = _text_content(element, NOTE_XML_NAME)
        return contact


def _text_content(parent: Element, tag: str) -> str | None:
    # an empty element carries no text but is still present
    child = parent.find(tag)
    if child is None:
        return
    return child.text or ""


def by_first_name(contact: Contact) -> tuple[str, str]:
    """Sort key ordering contacts by first name, then last name."""
    return contact_name.by_first_name(contact.name)


def by_last_name(contact: Contact) -> tuple[str, str]:
    """Sort key ordering contacts by last name, then first name."""
    return contact_name.by_last_name(contact.name)
