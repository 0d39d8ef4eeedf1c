#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import logging
from typing import Self
from xml.etree.ElementTree import Element

import phonenumbers
from phonenumbers import NumberParseException
from pydantic import BaseModel

from addressbook.constants import (
    DEFAULT_REGION,
    PHONE_NUMBER_XML_ATTR,
    PHONE_NUMBER_XML_NAME,
)
from addressbook.exceptions import PhoneNumberParseError

logger = logging.getLogger(__name__)


class PhoneNumber(BaseModel, frozen=True):
    """A phone number normalised by the `phonenumbers` library.

    Do not instantiate directly, use `create_new` or `try_create_new`.

    Parameters
    ----------
    country_code
        The international dialling prefix, eg 1 for the US.
    national_number
        The number without the country code.
    """

    country_code: int
    national_number: int

    @classmethod
    def create_new(cls, raw: str, region: str = DEFAULT_REGION) -> Self:
        """Parse `raw` into a phone number.

        Raises
        ------
        PhoneNumberParseError if `raw` cannot be parsed.
        """
        try:
            parsed = phonenumbers.parse(raw, region)
        except NumberParseException as e:
            raise PhoneNumberParseError(f"Cannot parse number {raw!r}: {e}") from e
        return cls(
            country_code=parsed.country_code,
            national_number=parsed.national_number,
        )

    @classmethod
    def try_create_new(cls, raw: str, region: str = DEFAULT_REGION) -> Self | None:
        """As `create_new`, but returns `None` if `raw` cannot be parsed."""
        try:
            return cls.create_new(raw, region)
        except PhoneNumberParseError as e:
            logger.warning(str(e))
            return

    def as_string(self) -> str:
        """The national number digits. The country code is not included."""
        return str(self.national_number)

    def __str__(self) -> str:
        number = phonenumbers.PhoneNumber(
            country_code=self.country_code, national_number=self.national_number
        )
        return phonenumbers.format_number(number, phonenumbers.PhoneNumberFormat.E164)

    def to_xml_element(self) -> Element:
        element = Element(PHONE_NUMBER_XML_NAME)
        element.set(PHONE_NUMBER_XML_ATTR, self.as_string())
        return element

    @classmethod
    def from_xml(cls, element: Element) -> Self | None:
        return cls.try_create_new(element.get(PHONE_NUMBER_XML_ATTR, ""))
