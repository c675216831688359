"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable


def _env_value(name: str) -> str | None:
    """Return the stripped value of ``name``; blank counts as unset."""
    value = (os.getenv(name) or "").strip()
    return value or None


def require_env_vars(names: Iterable[str]) -> dict[str, str]:
    """Return the named variables, raising once for every one that is unset or blank."""

    values: dict[str, str] = {}
    missing: list[str] = []
    for name in names:
        value = _env_value(name)
        if value is None:
            missing.append(name)
        else:
            values[name] = value

    if missing:
        raise MissingConfigurationError(
            f"Missing configuration for: {', '.join(sorted(missing))}"
        )
    return values


def require_env_var(name: str) -> str:
    return require_env_vars([name])[name]


def optional_env_var(name: str, default: str) -> str:
    value = _env_value(name)
    return default if value is None else value
