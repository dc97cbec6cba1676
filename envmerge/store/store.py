from __future__ import annotations

"""
envmerge Store – settings registry
==================================

In-memory mapping from a settings key to the effective value of one settings
file for the active environment. Keys come from file names
(``array-options.py`` -> ``arrayOptions``); values go through
:func:`envmerge.resolver.resolve` before they are stored.

    from envmerge import Store

    store = Store("production").load_dir("config")
    store.get("database")
    store.push("plugins", "audit", "metrics")

Design Goals
------------
- Explicit instances: the active environment and the I/O collaborators are
  constructor arguments, so tests inject fakes instead of patching globals.
- Chainable mutators: ``set``, ``push``, ``reset``, ``load_file`` and
  ``load_dir`` return the store.
- No rollback: a ``load_dir`` that fails halfway keeps what it already loaded.
- Single owner: no locking.
"""

import logging
import os
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, Optional

from envmerge import loader as default_loader
from envmerge.config import load_settings
from envmerge.definitions import is_sequence
from envmerge.logging_utils import get_logger
from envmerge.resolver import resolve
from envmerge.utils import camel_case, has_extension

CONFIG_EXTENSION = ".py"

Lister = Callable[[str], Iterable[str]]
Loader = Callable[[str], Any]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------
class StoreError(Exception):
    """Base class for errors raised by the store itself."""


class InvalidArgumentError(StoreError, TypeError):
    """A path argument was not a string or path-like object."""


class InvalidFormatError(StoreError, ValueError):
    """A settings file does not have the recognized extension."""


def _as_path(value: Any, method: str) -> str:
    if isinstance(value, (str, os.PathLike)):
        path = os.fspath(value)
        if isinstance(path, str):
            return path
    raise InvalidArgumentError(
        f"{method} requires a string or path-like object as first argument"
    )


# ---------------------------------------------------------------------------
# Store Facade
# ---------------------------------------------------------------------------
class Store:
    """
    Settings registry keyed by camel-cased file name.

    Parameters
    ----------
    environment:
        Active environment name. ``None`` reads it once from the runtime
        settings (``APP_ENV``, default ``development``).
    extension:
        File extension recognized as a settings file.
    lister:
        ``lister(dir_path)`` returns the entry names of a directory.
    loader:
        ``loader(file_path)`` returns the raw definition of a settings file.
    logger:
        Logger to report loads on; defaults to the package logger.
    """

    def __init__(
        self,
        environment: Optional[str] = None,
        *,
        extension: str = CONFIG_EXTENSION,
        lister: Optional[Lister] = None,
        loader: Optional[Loader] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if environment is None:
            environment = load_settings().environment

        self._environment = environment
        self.extension = extension
        self._lister = lister or default_loader.list_dir
        self._loader = loader or default_loader.load_settings_file
        self.logger = logger or get_logger()
        self._settings: Dict[str, Any] = {}

    def __repr__(self) -> str:
        return f"Store(environment={self._environment!r}, keys={len(self._settings)})"

    @property
    def environment(self) -> str:
        """Active environment name, fixed for the lifetime of the store."""
        return self._environment

    @property
    def settings(self) -> Dict[str, Any]:
        """The live key -> value mapping."""
        return self._settings

    @settings.setter
    def settings(self, value: Mapping) -> None:
        self._settings = dict(value)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under `key`, or `default` if absent."""
        return self._settings.get(key, default)

    def set(self, key: str, value: Any = None) -> "Store":
        self._settings[key] = value
        return self

    def push(self, key: str, *values: Any) -> "Store":
        """Append `values` to the list under `key`, creating the list if needed.

        A stored tuple is converted to a list keeping its items. Any other
        non-sequence value already stored under `key` is discarded.
        """
        current = self._settings.get(key)
        if not isinstance(current, list):
            current = list(current) if is_sequence(current) else []
            self._settings[key] = current
        current.extend(values)
        return self

    def reset(self) -> "Store":
        """Drop every key."""
        self._settings.clear()
        return self

    def keys(self):
        return self._settings.keys()

    def __contains__(self, key: object) -> bool:
        return key in self._settings

    def __len__(self) -> int:
        return len(self._settings)

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------
    def load_file(self, file_path: Any) -> "Store":
        """Load one settings file and store its effective value.

        Raises
        ------
        InvalidArgumentError
            `file_path` is not a string or path-like object.
        InvalidFormatError
            `file_path` does not end with the recognized extension.
        FileNotFoundError
            Propagated from the loader when the file does not exist.
        """
        path = _as_path(file_path, "load_file")
        if not has_extension(path, self.extension):
            raise InvalidFormatError(
                f"load_file expects a {self.extension} settings file, got {path!r}"
            )

        name = camel_case(path, self.extension)
        definition = self._loader(path)
        self._settings[name] = resolve(definition, self._environment)
        self.logger.debug("Loaded %s as %r (environment=%s)", path, name, self._environment)
        return self

    def load_dir(self, dir_path: Any) -> "Store":
        """Load every settings file in `dir_path`; other entries are skipped.

        Files are loaded in the order the lister returns them. Two files
        mapping to the same key: the later one wins.
        """
        path = _as_path(dir_path, "load_dir")

        loaded = 0
        for filename in self._lister(path):
            if not has_extension(filename, self.extension):
                self.logger.debug("Skipping %s: not a %s file", filename, self.extension)
                continue
            self.load_file(os.path.join(path, filename))
            loaded += 1

        self.logger.info("Loaded %d settings file(s) from %s", loaded, path)
        return self
