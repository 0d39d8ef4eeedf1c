#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
class AddressBookError(Exception):
    pass


class ParseError(AddressBookError):
    pass


class PhoneNumberParseError(ParseError):
    pass


class AddressBookFormatError(ParseError):
    """Raised when a document cannot be read back as an address book."""
