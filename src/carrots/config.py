"""Configuration: home directory and log level, read from the environment."""

from __future__ import annotations

import os

from carrots.errors import ConfigurationError

LOG_LEVEL_ENV = "CARROTS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def home_env_var() -> str:
    """Name of the variable holding the user's home directory on this host."""
    return "USERPROFILE" if os.name == "nt" else "HOME"


def resolve_home() -> str:
    """Return the invoking user's home directory. Fail closed if unset."""
    var = home_env_var()
    home = os.environ.get(var, "")
    if not home:
        raise ConfigurationError(f"{var} is not defined; cannot resolve the home directory.")
    return home


def log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
