#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import click
from rich.console import Console
from rich.table import Table

from addressbook.address_book import AddressBook
from addressbook.constants import NOTE_MAX_WIDTH
from addressbook.contact import Contact
from addressbook.exceptions import AddressBookFormatError, PhoneNumberParseError
from addressbook.phone_number import PhoneNumber
from addressbook.postal_address import PostalAddress
from addressbook.search_filters import SearchFilters


def _contacts_table(contacts: Iterable[Contact], title: str) -> Table:
    table = Table(
        title=title, show_header=True, header_style="bold magenta", show_lines=True
    )
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Email", style="white")
    table.add_column("Phone", style="white", no_wrap=True)
    table.add_column("Address", style="white")
    table.add_column("Note", style="dim", max_width=NOTE_MAX_WIDTH)
    for contact in contacts:
        phone = contact.phone_number
        address = contact.postal_address
        table.add_row(
            str(contact.name),
            contact.email_address or "",
            phone.as_string() if phone is not None else "",
            str(address).strip() if address is not None else "",
            contact.note or "",
        )
    return table


def _load(path: Path) -> AddressBook:
    try:
        return AddressBook.load(path)
    except AddressBookFormatError as e:
        raise click.ClickException(str(e))


@click.group()
@click.option("--verbose", is_flag=True, help="Show debug logs")
def cli(verbose: bool = False) -> None:
    """Browse and edit an address book stored as XML."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@cli.command(name="list")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def list_contacts(path: Path) -> None:
    """List all contacts sorted by last name."""
    address_book = _load(path)
    Console().print(
        _contacts_table(address_book.get_all_contacts(), path.name), width=None
    )


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("query")
@click.option(
    "--field",
    type=click.Choice([f.value for f in SearchFilters]),
    default=SearchFilters.AnyField.value,
    show_default=True,
    help="The contact field searched",
)
def search(path: Path, query: str, field: str) -> None:
    """Find the contacts with QUERY in the chosen field."""
    address_book = _load(path)
    results = address_book.search(query, SearchFilters(field).filter)
    console = Console()
    if not results:
        console.print(f"No contacts matching [bold]{query}[/bold]")
        return
    console.print(
        _contacts_table(results, f"{len(results)} result(s) for {query!r}"),
        width=None,
    )


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("first_name")
@click.argument("last_name", default="")
@click.option("--email", default=None)
@click.option("--phone", default=None)
@click.option("--note", default=None)
@click.option("--address-line1", default=None)
@click.option("--address-line2", default=None)
@click.option("--city", default=None)
@click.option("--state", default=None)
@click.option("--country", default=None)
@click.option("--postal-code", default=None)
def add(
    path: Path,
    first_name: str,
    last_name: str,
    email: str | None,
    phone: str | None,
    note: str | None,
    address_line1: str | None,
    address_line2: str | None,
    city: str | None,
    state: str | None,
    country: str | None,
    postal_code: str | None,
) -> None:
    """Add a contact to the address book at PATH, creating it if needed."""
    address_book = _load(path) if path.exists() else AddressBook.create_empty()
    contact = Contact.create_with_name(first_name, last_name)
    contact.email_address = email
    contact.note = note
    if phone is not None:
        try:
            contact.phone_number = PhoneNumber.create_new(phone)
        except PhoneNumberParseError as e:
            raise click.BadParameter(str(e), param_hint="--phone")
    address_fields = (address_line1, address_line2, city, state, country, postal_code)
    if any(f is not None for f in address_fields):
        contact.postal_address = PostalAddress(*address_fields)
    address_book.add(contact)
    address_book.save(path)
    Console().print(
        f"Added [bold]{contact}[/bold], {address_book.size()} contact(s) in {path}"
    )


if __name__ == "__main__":
    cli()
