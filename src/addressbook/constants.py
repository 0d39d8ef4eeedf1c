#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
PACKAGE_NAME = "addressbook"
# region hint handed to the phone number parser when the raw
# string carries no country code
DEFAULT_REGION = "US"

ADDRESS_BOOK_XML_NAME = "AddressBook"
CONTACT_XML_NAME = "Contact"
CONTACT_NAME_XML_NAME = "ContactName"
FIRST_NAME_XML_ATTR = "FirstName"
LAST_NAME_XML_ATTR = "LastName"
POSTAL_ADDRESS_XML_NAME = "PostalAddress"
PHONE_NUMBER_XML_NAME = "PhoneNumber"
PHONE_NUMBER_XML_ATTR = "FormattedString"
EMAIL_XML_NAME = "Email"
NOTE_XML_NAME = "Note"
XML_ENCODING = "utf-8"

NOTE_MAX_WIDTH = 40
