"""Fixtures for end-to-end CLI tests.

`log-demo` is a throwaway subcommand that writes a fixed script of log records
through a project logger and a foreign one. Tests attach it to the top-level
group to observe console filtering and flight recorder output.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from contactbook.entrypoints.cli.main import contactbook

# pylint: disable=redefined-outer-name

PROJECT_LOGGER = "contactbook.demo"
FOREIGN_LOGGER = "some.thirdparty"

# (logger, level, message), emitted in this order
LOG_SCRIPT = [
    (PROJECT_LOGGER, logging.DEBUG, "This is a debug-level test message."),
    (PROJECT_LOGGER, logging.INFO, "This is an info-level test message."),
    (PROJECT_LOGGER, logging.WARNING, "This is a warning-level test message."),
    (PROJECT_LOGGER, logging.ERROR, "This is an error-level test message."),
    (PROJECT_LOGGER, logging.CRITICAL, "This is a critical-level test message."),
    (FOREIGN_LOGGER, logging.DEBUG, "This is a debug-level third-party test message."),
    (FOREIGN_LOGGER, logging.INFO, "This is an info-level third-party test message."),
    (
        FOREIGN_LOGGER,
        logging.WARNING,
        "This is a warning-level third-party test message.",
    ),
    (PROJECT_LOGGER, logging.DEBUG, "This is a final debug-level test message."),
]


@click.command("log-demo")
def log_demo() -> None:
    """Replay LOG_SCRIPT."""
    for name, level, message in LOG_SCRIPT:
        logging.getLogger(name).log(level, message)


@pytest.fixture
def registered_log_demo(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make `contactbook log-demo` resolvable for the duration of a test."""
    monkeypatch.setitem(contactbook.commands, log_demo.name, log_demo)


@pytest.fixture
def runner() -> CliRunner:
    """Click test runner."""
    return CliRunner()


@pytest.fixture
def fs(runner: CliRunner):
    """Run the test from an empty temporary working directory."""
    with runner.isolated_filesystem():
        yield
