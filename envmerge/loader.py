from __future__ import annotations

"""Default I/O collaborators for :class:`envmerge.Store`.

``list_dir`` enumerates a settings directory and ``load_settings_file``
executes one ``.py`` settings file and returns the value it exports. Both are
plain functions so tests (or callers with other storage) can hand the store
their own replacements.

Loading a file never writes bytecode, so nothing is created in the settings
directory.
"""

import importlib.util
import itertools
import os
import sys
from typing import Any, Dict, List


# Name of the module attribute holding a file's definition
SETTINGS_ATTR = "settings"

# Fresh module name per load; modules are never registered in sys.modules
_load_counter = itertools.count()


def list_dir(path: str) -> List[str]:
    """Return the entry names in *path*, sorted for a stable load order."""
    return sorted(os.listdir(path))


def _public_constants(module) -> Dict[str, Any]:
    return {k: v for k, v in vars(module).items() if k.isupper() and not k.startswith("_")}


def load_settings_file(path: str) -> Any:
    """Execute the settings file at *path* and return its definition.

    The definition is the module-level ``settings`` value. A file without one
    exports a dict of its UPPER_CASE names instead.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    Exception
        Anything raised while executing the file propagates unchanged.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Settings file not found: {path}")

    module_name = f"_envmerge_settings_{next(_load_counter)}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load settings file: {path}")

    module = importlib.util.module_from_spec(spec)
    # Settings directories stay read-only: no __pycache__ next to the files
    saved = sys.dont_write_bytecode
    sys.dont_write_bytecode = True
    try:
        spec.loader.exec_module(module)
    finally:
        sys.dont_write_bytecode = saved

    if hasattr(module, SETTINGS_ATTR):
        return getattr(module, SETTINGS_ATTR)
    return _public_constants(module)
