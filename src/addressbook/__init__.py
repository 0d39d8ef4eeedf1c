#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
from importlib.metadata import PackageNotFoundError, version  # pragma: no cover

from addressbook.address_book import AddressBook
from addressbook.contact import Contact
from addressbook.contact_name import ContactName
from addressbook.exceptions import (
    AddressBookError,
    AddressBookFormatError,
    ParseError,
    PhoneNumberParseError,
)
from addressbook.phone_number import PhoneNumber
from addressbook.postal_address import PostalAddress
from addressbook.search_filters import (
    SearchFilter,
    SearchFilters,
    any_field_filter,
    email_address_filter,
    name_filter,
    note_filter,
    phone_number_filter,
    postal_address_filter,
)

try:
    # Change here if project is renamed and does not equal the package name
    dist_name = "addressbook"
    __version__ = version(dist_name)
except PackageNotFoundError:  # pragma: no cover
    __version__ = "unknown"
finally:
    del version, PackageNotFoundError

__all__ = [
    "AddressBook",
    "AddressBookError",
    "AddressBookFormatError",
    "Contact",
    "ContactName",
    "ParseError",
    "PhoneNumber",
    "PhoneNumberParseError",
    "PostalAddress",
    "SearchFilter",
    "SearchFilters",
    "any_field_filter",
    "email_address_filter",
    "name_filter",
    "note_filter",
    "phone_number_filter",
    "postal_address_filter",
]
