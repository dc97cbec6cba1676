"""envmerge settings store (public API).

Import the :class:`Store` facade from here::

    from envmerge.store import Store

Implementation lives in :mod:`envmerge.store.store`.
"""

from .store import (
    CONFIG_EXTENSION,
    InvalidArgumentError,
    InvalidFormatError,
    Store,
    StoreError,
)

__all__ = [
    "CONFIG_EXTENSION",
    "InvalidArgumentError",
    "InvalidFormatError",
    "Store",
    "StoreError",
]
