"""In-memory owner of an ordered collection of contacts."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from .errors import MissingContactFieldError
from .value_objects import Contact

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


class ContactManager:
    """Validate and collect contacts in insertion order.

    The manager starts empty and only ever grows: contacts are appended on each
    successful `add_contact` call and are never removed, replaced or
    deduplicated. Access to the collection is serialized with a lock so a
    single manager can be shared between threads.
    """

    def __init__(self) -> None:
        self._contacts: list[Contact] = []
        self._lock = threading.Lock()

    def add_contact(
        self, first_name: str | None, last_name: str | None, phone_number: str | None
    ) -> None:
        """Validate the three fields and append a new contact.

        Only null-ness is checked. Empty strings are accepted, and the phone
        number is stored exactly as given.

        Args:
            first_name: The contact's first name.
            last_name: The contact's last name.
            phone_number: The contact's phone number.

        Raises:
            MissingContactFieldError: If any of the fields is None. The first
                missing field (in argument order) is reported and the
                collection is left unchanged.
        """

        for field_name, value in (
            ("first_name", first_name),
            ("last_name", last_name),
            ("phone_number", phone_number),
        ):
            if value is None:
                raise MissingContactFieldError(field_name)

        contact = Contact(
            first_name=first_name,  # type: ignore[arg-type]
            last_name=last_name,  # type: ignore[arg-type]
            phone_number=phone_number,  # type: ignore[arg-type]
        )
        with self._lock:
            self._contacts.append(contact)
            size = len(self._contacts)
        logger.debug("Added contact %s %s (total=%d)", first_name, last_name, size)

    def get_all_contacts(self) -> list[Contact]:
        """Return the contacts in insertion order.

        Returns:
            A new list; mutating it does not affect the manager.
        """
        with self._lock:
            return list(self._contacts)

    def __len__(self) -> int:
        with self._lock:
            return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self.get_all_contacts())
