from __future__ import annotations

"""Runtime settings loader for envmerge.

This module is the one place that reads process environment variables, so the
rest of the package receives a resolved ``Settings`` object instead of
scattering ``os.getenv`` calls. The active environment name is read here once
and handed to the store explicitly.

Environment variables
---------------------
``APP_ENV``
    Active environment name (the variable name itself is configurable).
``ENVMERGE_LOG_DIR``
    Directory for a rotating log file. Unset means console logging only.
``ENVMERGE_LOG_LEVEL``
    Logging level name, ``INFO`` by default.
"""

import os
import pathlib
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_ENVIRONMENT = "development"
DEFAULT_ENV_VAR = "APP_ENV"


# ---------------------------------------------------------------------------
# Settings Dataclass
# ---------------------------------------------------------------------------
@dataclass(slots=True)
class Settings:
    """Resolved runtime configuration."""

    environment: str = DEFAULT_ENVIRONMENT  # active environment section name
    env_var: str = DEFAULT_ENV_VAR          # where `environment` was read from
    log_dir: Optional[str] = None
    log_level: str = "INFO"

    def ensure_dirs(self) -> None:
        """Create the log directory when one is configured."""
        if self.log_dir:
            pathlib.Path(self.log_dir).mkdir(parents=True, exist_ok=True)

    def asdict(self) -> Dict[str, Any]:  # convenience for logging/JSON
        return asdict(self)


# ---------------------------------------------------------------------------
# Settings Builders
# ---------------------------------------------------------------------------
def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    """Like ``os.getenv`` but treats blank values as unset."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def settings_from_env(env_var: str = DEFAULT_ENV_VAR) -> Settings:
    """Assemble settings from env vars + defaults."""
    s = Settings(env_var=env_var)

    # Active environment ---------------------------------------------------
    s.environment = _getenv(env_var, DEFAULT_ENVIRONMENT)

    # Logging --------------------------------------------------------------
    s.log_dir = _getenv("ENVMERGE_LOG_DIR", s.log_dir)
    s.log_level = _getenv("ENVMERGE_LOG_LEVEL", s.log_level).upper()

    return s


def load_settings(env_var: str = DEFAULT_ENV_VAR, *, dotenv: bool = True) -> Settings:
    """Public loader: returns a fully-initialized :class:`Settings` object.

    When ``dotenv`` is true the nearest ``.env`` (searched upward from the
    working directory) is read first. Variables already present in the
    process environment are left alone.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    settings = settings_from_env(env_var=env_var)
    settings.ensure_dirs()
    return settings
