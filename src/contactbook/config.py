"""Configuration utilities for CONTACTBOOK.

This module centralizes small helpers and constants related to application configuration.
"""

import os

ENV_VAR = "ENV"  # pragma: no mutate
DEV_ENVIRONMENT = "DEV"  # pragma: no mutate


def get_environment() -> str | None:
    """Get the deployment environment name from the environment.

    Returns:
        The value of the `ENV` environment variable, or None when it is
        unset or empty.
    """
    return os.environ.get(ENV_VAR) or None


def is_dev_environment() -> bool:
    """Return True when running on a developer machine (``ENV=DEV``).

    The comparison is exact and case-sensitive.
    """
    return get_environment() == DEV_ENVIRONMENT
