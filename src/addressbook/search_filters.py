#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Strategies deciding whether a query matches a contact.

All filters perform case-sensitive substring matching. A contact
lacking the field a filter inspects never matches that filter.
"""

from enum import StrEnum, auto
from typing import Protocol, runtime_checkable

from addressbook.contact import Contact


@runtime_checkable
class SearchFilter(Protocol):
    """Callable type def for contact search filters."""

    def __call__(self, query: str, contact: Contact) -> bool: ...


def _contains(query: str, value: str | None) -> bool:
    return value is not None and query in value


def name_filter(query: str, contact: Contact) -> bool:
    """Match against the first or the last name."""
    name = contact.name
    return _contains(query, name.first_name) or _contains(query, name.last_name)


def postal_address_filter(query: str, contact: Contact) -> bool:
    """Match against any of the postal address fields."""
    address = contact.postal_address
    if address is None:
        return False
    return any(query in value for value in address.field_values())


def email_address_filter(query: str, contact: Contact) -> bool:
    return _contains(query, contact.email_address)


def note_filter(query: str, contact: Contact) -> bool:
    return _contains(query, contact.note)


def phone_number_filter(query: str, contact: Contact) -> bool:
    """Match against the national number digits."""
    if contact.phone_number is None:
        return False
    return query in contact.phone_number.as_string()


def any_field_filter(query: str, contact: Contact) -> bool:
    """Match if any of the single field filters matches."""
    return any(
        search_filter(query, contact)
        for search_filter in (
            name_filter,
            postal_address_filter,
            email_address_filter,
            phone_number_filter,
            note_filter,
        )
    )


class SearchFilters(StrEnum):

    Name = auto()
    PostalAddress = auto()
    EmailAddress = auto()
    Note = auto()
    PhoneNumber = auto()
    AnyField = auto()

    @property
    def filter(self) -> SearchFilter:
        return _FILTERS[self]


_FILTERS: dict[SearchFilters, SearchFilter] = {
    SearchFilters.Name: name_filter,
    SearchFilters.PostalAddress: postal_address_filter,
    SearchFilters.EmailAddress: email_address_filter,
    SearchFilters.Note: note_filter,
    SearchFilters.PhoneNumber: phone_number_filter,
    SearchFilters.AnyField: any_field_filter,
}
