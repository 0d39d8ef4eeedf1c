#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
from typing import Self
from xml.etree.ElementTree import Element

from pydantic import BaseModel, ConfigDict

from addressbook.constants import (
    CONTACT_NAME_XML_NAME,
    FIRST_NAME_XML_ATTR,
    LAST_NAME_XML_ATTR,
)


class ContactName(BaseModel):
    """The name of a contact. A first name is always required,
    the last name may be omitted."""

    model_config = ConfigDict(validate_assignment=True)

    first_name: str
    last_name: str | None = None

    def __init__(self, first_name: str, last_name: str | None = None):
        super().__init__(first_name=first_name, last_name=last_name)

    def __str__(self) -> str:
        if self.last_name is None:
            return self.first_name
        return f"{self.first_name} {self.last_name}"

    def to_xml_element(self) -> Element:
        element = Element(CONTACT_NAME_XML_NAME)
        element.set(FIRST_NAME_XML_ATTR, self.first_name)
        element.set(LAST_NAME_XML_ATTR, self.last_name or "")
        return element

    @classmethod
    def from_xml(cls, element: Element) -> Self:
        return cls(
            element.get(FIRST_NAME_XML_ATTR, ""),
            element.get(LAST_NAME_XML_ATTR, ""),
        )


def by_first_name(name: ContactName) -> tuple[str, str]:
    """Sort key ordering names by first name, ties broken by last name."""
    return name.first_name, name.last_name or ""


def by_last_name(name: ContactName) -> tuple[str, str]:
    """Sort key ordering names by last name, ties broken by first name.
    A missing last name sorts as the empty string."""
    return name.last_name or "", name.first_name
