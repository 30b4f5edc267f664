"""Global pytest fixtures for CONTACTBOOK."""

from __future__ import annotations

from pathlib import Path

import pytest

from contactbook.domain.contact_manager import ContactManager

pytest_plugins = [
    "tests.fixtures.csv_files",
]

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def contact_manager() -> ContactManager:
    """Return a brand-new, empty ContactManager."""
    return ContactManager()


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the static CSV fixtures (``data.csv``, ``contacts.csv``)."""
    return FIXTURES_DIR
