"""Ordered configuration documents and the capability sealing protocol.

Purpose
-------
Every builder in this package (layers, scales, themes, ...) ends up as an
``Options`` document: an ordered, read-only mapping from option name to value
that the Lets-Plot engine reads as-is. This module owns the two rules that
all builders share:

- ``None`` means "not set, let the engine decide" and is never emitted.
- Documents combine left to right; a later key replaces an earlier one.

Architecture
------------
A builder that needs several independent groups of options (aesthetics,
geometry parameters, stat parameters, colour options, ...) holds one
``OptionsCapsule`` per group and merges their sealed fragments in a fixed,
declared order with :func:`merge_fragments`. No builder relies on class
inheritance order to decide which group wins a key collision.

Examples
--------
>>> from gg_toolkit.Options import Options
>>> doc = Options.of(color="red", size=None, alpha=0)
>>> doc.to_dict()
{'color': 'red', 'alpha': 0}
>>> (doc + Options.of(color="blue")).to_dict()
{'color': 'blue', 'alpha': 0}
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Any, ClassVar

import numpy as np


class Options(Mapping):
    """Immutable, insertion-ordered configuration document.

    Parameters
    ----------
    entries : Mapping[str, Any], optional
        Initial entries. ``None`` values are dropped.

    Notes
    -----
    Lists, tuples, mappings and arrays are copied into read-only
    containers on the way in, so later changes to the caller's objects do
    not reach the document. Use :meth:`to_dict` to obtain plain nested
    ``dict``/``list`` values.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, Any] | None = None) -> None:
        data: dict[str, Any] = {}
        if entries:
            for key, value in entries.items():
                if value is not None:
                    data[_check_key(key)] = freeze_value(value)
        self._entries = MappingProxyType(data)

    @classmethod
    def of(cls, **entries: Any) -> "Options":
        """Build a document from keyword arguments, keeping argument order."""
        return cls(entries)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, Any]]) -> "Options":
        """Build a document from ``(key, value)`` pairs; later pairs win."""
        data: dict[str, Any] = {}
        for key, value in pairs:
            if value is None:
                continue
            data[_check_key(key)] = value
        return cls(data)

    def __getitem__(self, key: str) -> Any:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __add__(self, other: Any) -> "Options":
        if not isinstance(other, Mapping):
            return NotImplemented
        return merge_fragments(self, other)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return self.to_dict() == _plain(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Options({dict(self._entries)!r})"

    def to_dict(self) -> dict[str, Any]:
        """Return a deep plain-``dict`` copy of this document."""
        return {key: _plain(value) for key, value in self._entries.items()}


def _check_key(key: Any) -> str:
    if not isinstance(key, str):
        raise TypeError(f"Options keys must be str, got {type(key).__name__}")
    return key


def freeze_value(value: Any) -> Any:
    """Return a read-only copy of sequence, mapping and array values.

    Documents, capsules, data frames and scalars are returned unchanged.
    """
    if isinstance(value, (Options, OptionsCapsule)):
        return value
    if isinstance(value, (list, tuple)):
        return tuple(freeze_value(item) for item in value)
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_value(item) for key, item in value.items()})
    if isinstance(value, np.ndarray):
        frozen = value.copy()
        frozen.flags.writeable = False
        return frozen
    return value


def _plain(value: Any) -> Any:
    """Convert nested documents and sequences to plain containers."""
    if isinstance(value, OptionsCapsule):
        return value.seal().to_dict()
    if isinstance(value, Options):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def merge_fragments(*fragments: Mapping[str, Any]) -> Options:
    """Merge fragments left to right; on key collision the later value wins.

    Nested documents are replaced, never merged. Keys keep the position of
    their first occurrence.
    """
    merged: dict[str, Any] = {}
    for fragment in fragments:
        for key, value in fragment.items():
            merged[key] = value
    return Options(merged)


@dataclass(frozen=True)
class OptionsCapsule:
    """One independent contribution to a builder's options.

    Subclasses are frozen dataclasses whose fields are the options they
    contribute. :meth:`seal` emits one entry per field in declaration order,
    skipping ``None``. The option name is the field name unless
    ``option_keys`` maps it to the engine's spelling.
    """

    option_keys: ClassVar[Mapping[str, str]] = {}

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, freeze_value(getattr(self, f.name)))

    def seal(self) -> Options:
        """Return this capability's fragment."""
        return Options.from_pairs(
            (self.option_keys.get(f.name, f.name), getattr(self, f.name))
            for f in fields(self)
        )


def seal_all(capsules: Iterable[OptionsCapsule]) -> Options:
    """Seal ``capsules`` and merge their fragments in the given order."""
    return merge_fragments(*(capsule.seal() for capsule in capsules))


__all__ = ["Options", "OptionsCapsule", "freeze_value", "merge_fragments", "seal_all"]
