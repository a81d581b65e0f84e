"""Access to the current process environment."""

from __future__ import annotations

import logging
import os

_logger = logging.getLogger(__name__)


def get_var(name: str) -> str:
    """Return the value of `name`, or an empty string if it is not set."""
    return os.environ.get(name, "")


def has_var(name: str) -> bool:
    """Return True if `name` is set in the environment."""
    return name in os.environ


def set_var(name: str, value: str) -> None:
    """Set `name` to `value`, overwriting any existing value."""
    try:
        os.environ[name] = value
    except (ValueError, OSError) as exc:
        _logger.error("Failed to set environment variable %r: %s", name, exc)


def remove_var(name: str) -> None:
    """Remove `name` from the environment if it is set."""
    try:
        os.environ.pop(name, None)
    except (ValueError, OSError) as exc:
        _logger.error("Failed to remove environment variable %r: %s", name, exc)


def current_environment_block() -> dict[str, str]:
    """Return a snapshot of the whole environment as a dict."""
    return dict(os.environ)