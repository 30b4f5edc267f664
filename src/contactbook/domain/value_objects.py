"""Module including value objects used across the domain layer."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Contact:
    """Value object representing a single entry of a contact list."""

    first_name: str
    last_name: str
    phone_number: str
