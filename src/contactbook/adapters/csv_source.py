"""CSV sources of contact data.

Reads the small comma-separated files used to seed a `ContactManager`:
either a single column of phone numbers, or full
``first_name,last_name,phone_number`` rows. Blank rows and rows whose first
cell starts with ``#`` are skipped.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from contactbook.domain.contact_manager import ContactManager

logger = logging.getLogger(__name__)

CONTACT_FIELD_COUNT = 3  # pragma: no mutate
COMMENT_PREFIX = "#"  # pragma: no mutate

ContactRow = tuple[str | None, str | None, str | None]


def _iter_rows(path: str | Path) -> Iterator[tuple[int, list[str]]]:
    """Yield ``(line_number, cells)`` for every data row of a CSV file.

    `line_number` is the 1-based physical line on which the row ends, so
    comments and blank lines are counted. Only truly blank lines are skipped;
    a row of empty cells such as ``,,`` is data.
    """
    with Path(path).open("r", encoding="utf-8", newline="") as f:
        reader = csv.reader(f)
        for row in reader:
            if not row or (len(row) == 1 and not row[0].strip()):
                continue
            if row[0].lstrip().startswith(COMMENT_PREFIX):
                continue
            yield reader.line_num, row


def read_phone_numbers(path: str | Path) -> list[str]:
    """Read a one-column CSV file of phone numbers.

    Args:
        path: Location of the CSV file.

    Returns:
        The first cell of every data row, in file order.

    Raises:
        FileNotFoundError: If `path` does not exist.
    """
    return [row[0] for _, row in _iter_rows(path)]


def read_numbered_contact_rows(
    path: str | Path,
) -> Iterator[tuple[int, ContactRow]]:
    """Yield ``(line_number, (first_name, last_name, phone_number))`` pairs.

    Short rows are padded with None so that a missing cell reaches the
    manager as a null value; an empty cell stays an empty string. Cells past
    the third are ignored.

    Args:
        path: Location of the CSV file.

    Yields:
        The physical line number and the three-tuple of each data row.

    Raises:
        FileNotFoundError: If `path` does not exist.
    """
    for line_number, row in _iter_rows(path):
        cells: list[str | None] = list(row[:CONTACT_FIELD_COUNT])
        cells.extend([None] * (CONTACT_FIELD_COUNT - len(cells)))
        yield line_number, (cells[0], cells[1], cells[2])


def read_contact_rows(path: str | Path) -> Iterator[ContactRow]:
    """Yield ``(first_name, last_name, phone_number)`` tuples from a CSV file.

    Same rows as `read_numbered_contact_rows`, without the line numbers.
    """
    for _, row in read_numbered_contact_rows(path):
        yield row


def load_contacts(manager: ContactManager, path: str | Path) -> int:
    """Add every contact row of a CSV file to `manager`.

    Args:
        manager: The manager that receives the contacts.
        path: Location of the CSV file.

    Returns:
        The number of contacts added.

    Raises:
        MissingContactFieldError: If a row lacks a field. Rows before the
            failing one remain added.
    """
    added = 0
    for first_name, last_name, phone_number in read_contact_rows(path):
        manager.add_contact(first_name, last_name, phone_number)
        added += 1
    logger.info("Loaded %d contacts from %s", added, path)
    return added
