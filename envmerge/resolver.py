from __future__ import annotations

"""Environment resolution for settings definitions.

A mapping-shaped definition may hold a ``common`` section plus one section per
environment name::

    settings = {
        "common": {"option": 33, "deep": {"something": 66}},
        "test": {"option": "x", "deep": {"something": 133}},
    }

Resolving it for ``"test"`` deep-merges ``common`` first and the ``test``
section on top, giving ``{"option": "x", "deep": {"something": 133}}``.

Rules
-----
* Sequences are returned as-is, even when their items look like sections.
* Mappings with neither ``common`` nor the active environment key are
  returned as-is (same object).
* Scalars are returned as-is.
* Nested mappings merge key by key. Anything else (lists included) replaces
  the existing value wholesale.
"""

import copy
from collections.abc import Mapping, MutableMapping
from typing import Any

from .definitions import (
    Definition,
    RecordDefinition,
    SequenceDefinition,
    classify,
    is_mapping,
)

COMMON_KEY = "common"


def merge_into(base: MutableMapping, source: Mapping) -> MutableMapping:
    """Recursively merge *source* into *base* in place and return *base*.

    Values copied out of *source* are deep copies, so the result never
    aliases the definition it was built from.
    """
    for key, value in source.items():
        if is_mapping(value):
            if not is_mapping(base.get(key)):
                base[key] = {}
            merge_into(base[key], value)
        else:
            base[key] = copy.deepcopy(value)

    return base


def resolve_definition(definition: Definition, environment: str) -> Any:
    """Return the effective value of a classified *definition*."""
    if isinstance(definition, SequenceDefinition):
        return definition.items
    if not isinstance(definition, RecordDefinition):
        return definition.value

    has_common = definition.has_section(COMMON_KEY)
    has_env = definition.has_section(environment)
    if not (has_common or has_env):
        return definition.fields

    composite: Any = {}
    if has_common:
        composite = _apply_section(composite, definition.fields[COMMON_KEY])
    if has_env:
        composite = _apply_section(composite, definition.fields[environment])
    return composite


def _apply_section(composite: Any, section: Any) -> Any:
    # A section that is not a mapping is opaque: it replaces what came before.
    if not is_mapping(section):
        return copy.deepcopy(section)
    if not is_mapping(composite):
        composite = {}
    return merge_into(composite, section)


def resolve(value: Any, environment: str) -> Any:
    """Resolve a raw exported *value* for the *environment* name."""
    return resolve_definition(classify(value), environment)
