"""envmerge: per-environment settings files merged into one store.

    from envmerge import create_store

    store = create_store().load_dir("config")
    store.get("database")
"""

from typing import Any, Optional

from .config import Settings, load_settings
from .logging_utils import get_logger
from .resolver import COMMON_KEY, merge_into, resolve
from .store import (
    CONFIG_EXTENSION,
    InvalidArgumentError,
    InvalidFormatError,
    Store,
    StoreError,
)
from .utils import camel_case

__version__ = "0.1.0"


def create_store(settings: Optional[Settings] = None, **kwargs: Any) -> Store:
    """Build a :class:`Store` for the environment and logging named in `settings`.

    `settings` defaults to :func:`load_settings`. Extra keyword arguments go to
    the :class:`Store` constructor.
    """
    if settings is None:
        settings = load_settings()
    kwargs.setdefault(
        "logger", get_logger(log_dir=settings.log_dir, level=settings.log_level)
    )
    return Store(settings.environment, **kwargs)


__all__ = [
    "COMMON_KEY",
    "CONFIG_EXTENSION",
    "InvalidArgumentError",
    "InvalidFormatError",
    "Settings",
    "Store",
    "StoreError",
    "camel_case",
    "create_store",
    "load_settings",
    "merge_into",
    "resolve",
]
