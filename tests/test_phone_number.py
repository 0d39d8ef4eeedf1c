#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import logging

import pytest

from addressbook.exceptions import ParseError, PhoneNumberParseError
from addressbook.phone_number import PhoneNumber


def test_create_new():
    assert PhoneNumber.create_new("2017740908").as_string() == "2017740908"


def test_create_new_raises_on_garbage():
    with pytest.raises(PhoneNumberParseError):
        PhoneNumber.create_new("adbl")
    with pytest.raises(ParseError):
        PhoneNumber.create_new("")


def test_try_create_new():
    assert PhoneNumber.try_create_new("212-514-0098").as_string() == "2125140098"


def test_try_create_new_returns_none(caplog):
    with caplog.at_level(logging.WARNING):
        assert PhoneNumber.try_create_new("tls") is None
    assert "tls" in caplog.text


def test_country_code_dropped_from_string():
    number = PhoneNumber.create_new("+44 20 7946 0958")
    assert number.country_code == 44
    assert number.as_string() == "2079460958"
    assert str(number) == "+442079460958"


def test_us_is_default_region():
    number = PhoneNumber.create_new("(212) 514-0098")
    assert number.country_code == 1
    assert str(number) == "+12125140098"


def test_equality():
    assert PhoneNumber.create_new("212-514-0098") == PhoneNumber.create_new(
        "2125140098"
    )


def test_xml_element():
    element = PhoneNumber.create_new("2123475562").to_xml_element()
    assert element.tag == "PhoneNumber"
    assert element.get("FormattedString") == "2123475562"
    assert PhoneNumber.from_xml(element).as_string() == "2123475562"


def test_from_xml_unparsable():
    element = PhoneNumber.create_new("2123475562").to_xml_element()
    element.set("FormattedString", "nope")
    assert PhoneNumber.from_xml(element) is None
