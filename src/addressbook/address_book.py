#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""A container for storing, searching and serializing contacts.

A minimal example:

```py
address_book = AddressBook.create_empty()
address_book.add(Contact.create_with_name("John", "Smith"))
address_book.save("contacts.xml")
address_book2 = AddressBook.load("contacts.xml")
results = address_book2.search("John")
```

The address book is not thread safe.
"""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO, Self
from xml.etree.ElementTree import Element, tostring
from xml.etree.ElementTree import ParseError as XMLParseError

import defusedxml.ElementTree as SafeET
from defusedxml import DefusedXmlException

from addressbook.constants import (
    ADDRESS_BOOK_XML_NAME,
    CONTACT_XML_NAME,
    XML_ENCODING,
)
from addressbook.contact import Contact, by_last_name
from addressbook.exceptions import AddressBookFormatError
from addressbook.search_filters import SearchFilter, any_field_filter

logger = logging.getLogger(__name__)

XMLSource = str | Path | BinaryIO


class AddressBook:
    """An unordered collection of unique contacts.

    Contacts are unique by identity: adding the same `Contact` object
    twice stores it once, while two distinct objects with identical
    details are both stored. Use `create_empty` or `load` to obtain an
    address book.
    """

    def __init__(self):
        # id(contact) -> contact, insertion ordered
        self._contacts: dict[int, Contact] = {}

    @classmethod
    def create_empty(cls) -> Self:
        return cls()

    def add(self, contact: Contact):
        """Add `contact`. Does nothing if it is already in the address book."""
        if id(contact) in self._contacts:
            return
        logger.debug(f"Adding contact {contact}")
        self._contacts[id(contact)] = contact

    def remove(self, contact: Contact):
        """Remove `contact`. Does nothing if it is not in the address book."""
        if self._contacts.pop(id(contact), None) is not None:
            logger.debug(f"Removed contact {contact}")

    def size(self) -> int:
        return len(self._contacts)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, contact: object) -> bool:
        return id(contact) in self._contacts

    def __iter__(self) -> Iterator[Contact]:
        return iter(self.get_all_contacts())

    def __str__(self) -> str:
        return f"[AddressBook: {self.size()} entries]"

    __repr__ = __str__

    def get_all_contacts(self) -> tuple[Contact, ...]:
        """Returns a snapshot of all contacts sorted by last name,
        ties broken by first name. Later changes to the address
        book are not reflected in the returned value."""
        return tuple(sorted(self._contacts.values(), key=by_last_name))

    def search(
        self, query: str, search_filter: SearchFilter = any_field_filter
    ) -> list[Contact]:
        """Find the contacts matching `query`.

        Parameters
        ----------
        query
            Text searched for in the contact fields. Matching is case sensitive.
        search_filter
            Decides which fields are searched. By default all fields are.

        Returns
        -------
        The matching contacts in the order they were added. Use
        `get_all_contacts` for a sorted view.
        """
        return [
            contact
            for contact in self._contacts.values()
            if search_filter(query, contact)
        ]

    def to_xml_element(self) -> Element:
        root = Element(ADDRESS_BOOK_XML_NAME)
        for contact in self.get_all_contacts():
            root.append(contact.to_xml_element())
        return root

    def save(self, destination: XMLSource):
        """Write the address book as XML to a path or a binary stream.

        No XML declaration is written and contacts are ordered by
        last name, then first name.
        """
        document = self.to_xml_bytes()
        if isinstance(destination, (str, Path)):
            # the document is complete before the file is truncated
            with open(destination, "wb") as f:
                f.write(document)
            logger.info(f"Saved {self.size()} contacts to {destination}")
            return
        destination.write(document)

    def to_xml_bytes(self) -> bytes:
        """The UTF-8 encoded document, without an XML declaration."""
        document = tostring(
            self.to_xml_element(), encoding=XML_ENCODING, xml_declaration=False
        )
        # element text keeps raw carriage returns, which parsers read back as
        # newlines; attribute values are already escaped by ElementTree
        return document.replace(b"\r", b"&#13;")

    @classmethod
    def from_xml(cls, root: Element) -> Self:
        if root.tag != ADDRESS_BOOK_XML_NAME:
            raise AddressBookFormatError(
                f"Expected root element {ADDRESS_BOOK_XML_NAME}, found {root.tag}"
            )
        address_book = cls.create_empty()
        for element in root.iter(CONTACT_XML_NAME):
            address_book.add(Contact.from_xml(element))
        return address_book

    @classmethod
    def load(cls, source: XMLSource) -> Self:
        """Read an address book from a path or a binary stream.

        Raises
        ------
        AddressBookFormatError if `source` is not well formed XML or
        is not an address book.
        OSError if `source` is a path that cannot be read.
        """
        if isinstance(source, (str, Path)):
            with open(source, "rb") as f:
                address_book = cls.load(f)
            logger.info(f"Loaded {address_book.size()} contacts from {source}")
            return address_book
        try:
            root = SafeET.parse(source).getroot()
        except (XMLParseError, DefusedXmlException) as e:
            raise AddressBookFormatError(f"Could not parse address book: {e}") from e
        return cls.from_xml(root)
