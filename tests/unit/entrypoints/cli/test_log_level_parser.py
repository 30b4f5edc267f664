"""Unit tests for the CLI log level parser."""

import logging
import types

import click
import pytest

from contactbook.entrypoints.cli.helpers.log_level_parser import (
    DEFAULT_LIB_LEVELS,
    parse_log_level,
)

CTX = types.SimpleNamespace()  # the callback ignores its Click context


def test_empty_uses_defaults():
    """With no items only the default library levels are returned."""
    assert parse_log_level(CTX, None, ()) == DEFAULT_LIB_LEVELS


def test_repeated_flags_later_wins():
    """Later items override earlier ones for the same logger."""
    out = parse_log_level(CTX, None, ("contactbook=INFO", "contactbook=ERROR"))
    assert out["contactbook"] == logging.ERROR


def test_plain_string_with_commas_and_spaces():
    """A single env-var style string is split on commas and whitespace."""
    out = parse_log_level(CTX, None, "contactbook=INFO,  urllib3=WARNING asyncio=ERROR")
    assert out == {
        "contactbook": logging.INFO,
        "urllib3": logging.WARNING,
        "asyncio": logging.ERROR,
    }


def test_case_insensitive_levels():
    """Level names are case-insensitive."""
    out = parse_log_level(CTX, None, ("contactbook=debug", "asyncio=WaRnInG"))
    assert out["contactbook"] == logging.DEBUG
    assert out["asyncio"] == logging.WARNING


@pytest.mark.parametrize("item", ["not-a-pair", "=INFO"])
def test_invalid_pair_raises(item):
    """Malformed NAME=LEVEL items raise click.BadParameter."""
    with pytest.raises(click.BadParameter, match="Expected NAME=LEVEL"):
        parse_log_level(CTX, None, (item,))


def test_invalid_level_raises():
    """Unknown level names raise click.BadParameter."""
    with pytest.raises(click.BadParameter, match="Invalid log level"):
        parse_log_level(CTX, None, ("contactbook=LOUD",))


def test_defaults_are_not_mutated():
    """Overrides never leak into the module-level defaults."""
    parse_log_level(CTX, None, ("asyncio=DEBUG",))
    assert DEFAULT_LIB_LEVELS == {"asyncio": logging.WARNING}
