#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
from typing import Any, Self
from xml.etree.ElementTree import Element

from pydantic import BaseModel, field_validator

from addressbook.constants import POSTAL_ADDRESS_XML_NAME

# model field -> XML attribute, in document order
_XML_ATTRIBUTES = {
    "address_line1": "AddressLine1",
    "address_line2": "AddressLine2",
    "city": "City",
    "state": "State",
    "country": "Country",
    "postal_code": "PostalCode",
}


class PostalAddress(BaseModel, frozen=True, extra="forbid"):
    """A mailing address attached to a contact.

    All fields are free text and are never `None`: passing `None` stores
    an empty string instead. Addresses compare and hash by value.

    Parameters
    ----------
    address_line1
        Street and number.
    address_line2
        Apartment, suite, building or other secondary designation.
    """

    address_line1: str = ""
    address_line2: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    postal_code: str = ""

    def __init__(
        self,
        address_line1: str | None = "",
        address_line2: str | None = "",
        city: str | None = "",
        state: str | None = "",
        country: str | None = "",
        postal_code: str | None = "",
    ):
        super().__init__(
            address_line1=address_line1,
            address_line2=address_line2,
            city=city,
            state=state,
            country=country,
            postal_code=postal_code,
        )

    @field_validator("*", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def replace(self, **changes: str | None) -> Self:
        """Returns a copy of the address with `changes` applied. As on
        construction, `None` values are stored as empty strings."""
        return self.model_validate({**self.model_dump(), **changes})

    def field_values(self) -> tuple[str, ...]:
        """The six address fields, in document order."""
        return tuple(getattr(self, name) for name in _XML_ATTRIBUTES)

    def __str__(self) -> str:
        lines = [self.address_line1]
        if self.address_line1:
            lines.append(self.address_line2)
        lines.append(f"{self.city},{self.state} {self.postal_code}")
        if self.country:
            lines.append(self.country)
        return "".join(f"{line}\n" for line in lines)

    def to_xml_element(self) -> Element:
        element = Element(POSTAL_ADDRESS_XML_NAME)
        for name, attribute in _XML_ATTRIBUTES.items():
            element.set(attribute, getattr(self, name))
        return element

    @classmethod
    def from_xml(cls, element: Element | None) -> Self | None:
        if element is None:
            return
        return cls(
            **{
                name: element.get(attribute, "")
                for name, attribute in _XML_ATTRIBUTES.items()
            }
        )
