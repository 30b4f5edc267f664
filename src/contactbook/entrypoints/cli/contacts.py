"""CONTACTBOOK contacts CLI.

Loads contact lists from CSV files into a fresh `ContactManager` and reports
on them. Listings go to **stdout** (one contact per line, tab separated) so they
can be piped; status lines go to **stderr**.

Failure modes
- Missing file → Click usage error (exit code 2).
- A row with a missing field → error line naming the file line, exit code 1.
- A file without contacts → warning line, exit code 0.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
import click_extra as clickx

from contactbook.adapters.csv_source import read_numbered_contact_rows
from contactbook.domain.contact_manager import ContactManager
from contactbook.domain.errors import MissingContactFieldError

from .helpers import error, hyperlink, success, warn

logger = logging.getLogger(__name__)

CSV_FILE_ARGUMENT = click.argument(
    "csv_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)


def _file_link(csv_file: Path) -> str:
    return hyperlink(csv_file.resolve().as_uri(), str(csv_file))


def _load_or_exit(csv_file: Path) -> ContactManager:
    manager = ContactManager()
    for line_number, (first_name, last_name, phone_number) in (
        read_numbered_contact_rows(csv_file)
    ):
        try:
            manager.add_contact(first_name, last_name, phone_number)
        except MissingContactFieldError as e:
            logger.warning("Rejected line %d of %s: %s", line_number, csv_file, e)
            error(f"Line {line_number}: {e}")
            raise click.exceptions.Exit(1) from e
    logger.info("Loaded %d contacts from %s", len(manager), csv_file)
    if not len(manager):
        warn(f"No contacts found in {_file_link(csv_file)}.")
    return manager


@click.group(cls=clickx.ExtraGroup)
def contacts() -> None:
    """Contact list commands."""


@contacts.command()
@CSV_FILE_ARGUMENT
def show(csv_file: Path) -> None:
    """List the contacts stored in CSV_FILE."""
    manager = _load_or_exit(csv_file)
    for contact in manager:
        click.echo(
            "\t".join((contact.first_name, contact.last_name, contact.phone_number))
        )
    if len(manager):
        success(f"Loaded {len(manager)} contacts from {_file_link(csv_file)}.")


@contacts.command()
@CSV_FILE_ARGUMENT
def count(csv_file: Path) -> None:
    """Print the number of contacts stored in CSV_FILE."""
    manager = _load_or_exit(csv_file)
    click.echo(len(manager))
