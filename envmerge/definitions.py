from __future__ import annotations

"""Typed wrappers for raw settings definitions.

A definition is whatever a configuration file exported. These dataclasses tag
it with its shape so the resolver can dispatch on the variant instead of
poking at the raw value.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union


@dataclass(slots=True, frozen=True)
class SequenceDefinition:
    """A list/tuple export. Never environment-resolved."""

    items: Any


@dataclass(slots=True, frozen=True)
class RecordDefinition:
    """A mapping export. May carry ``common`` and per-environment sections."""

    fields: Mapping

    def has_section(self, name: str) -> bool:
        return name in self.fields


@dataclass(slots=True, frozen=True)
class ScalarDefinition:
    value: Any  # str, int, None, objects ... anything without keys


Definition = Union[SequenceDefinition, RecordDefinition, ScalarDefinition]


def is_sequence(value: Any) -> bool:
    """Lists and tuples count as sequences; strings and bytes do not."""
    return isinstance(value, (list, tuple))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def classify(value: Any) -> Definition:
    """Wrap a raw exported value in the matching definition variant.

    Examples
    --------
    >>> classify([1, 2])
    SequenceDefinition(items=[1, 2])
    >>> classify({"common": {}})
    RecordDefinition(fields={'common': {}})
    >>> classify(42)
    ScalarDefinition(value=42)
    """
    if is_sequence(value):
        return SequenceDefinition(value)
    if is_mapping(value):
        return RecordDefinition(value)
    return ScalarDefinition(value)
