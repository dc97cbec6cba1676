"""Runtime settings for envmerge.

    from envmerge.config import load_settings

    s = load_settings()
    s.environment  # 'development' unless APP_ENV says otherwise
"""

from .settings import (
    DEFAULT_ENV_VAR,
    DEFAULT_ENVIRONMENT,
    Settings,
    load_settings,
    settings_from_env,
)

__all__ = [
    "DEFAULT_ENV_VAR",
    "DEFAULT_ENVIRONMENT",
    "Settings",
    "load_settings",
    "settings_from_env",
]
