"""Immutable structure containers: Map and FixedList."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from .errors import ReadOnlyStructureError


# ---------------------------------------------------------------------------
# Map — keyed mapping
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Map(Mapping):
    """Ordered, read-only mapping of mixed-type keys to structures."""

    entries: tuple[tuple[Hashable, Structure], ...] = ()
    _index: dict[tuple[type, Hashable], tuple[Hashable, Structure]] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        # Keys are told apart by type as well as value, so 1 and True are
        # distinct. A repeated key keeps its first position and last value.
        index: dict[tuple[type, Hashable], tuple[Hashable, Structure]] = {}
        for key, value in self.entries:
            index[_slot(key)] = (key, value)
        object.__setattr__(self, "entries", tuple(index.values()))
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_ordered_pairs(cls, pairs: Iterable[tuple[Hashable, Structure]]) -> Map:
        return cls(tuple(pairs))

    @classmethod
    def from_mapping(cls, mapping: Mapping[Hashable, Structure]) -> Map:
        return cls(tuple(mapping.items()))

    # -- Mapping protocol -----------------------------------------------

    def __getitem__(self, key: Hashable) -> Structure:
        try:
            return self._index[_slot(key)][1]
        except KeyError:
            raise KeyError(key) from None

    def __iter__(self) -> Iterator[Hashable]:
        return (key for key, _ in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        try:
            return _slot(key) in self._index
        except TypeError:
            return False

    def __setitem__(self, key: Hashable, value: Any) -> None:
        raise ReadOnlyStructureError(f"Map is read-only; cannot set key {key!r}")

    def __delitem__(self, key: Hashable) -> None:
        raise ReadOnlyStructureError(f"Map is read-only; cannot delete key {key!r}")

    # -- Convenience accessors ------------------------------------------

    def exists(self, key: Hashable) -> bool:
        return key in self

    def get(self, key: Hashable, default: Any = None) -> Structure:
        if self.exists(key):
            return self[key]
        return default

    def is_empty(self) -> bool:
        return not self.entries

    def to_loose(self) -> dict[Hashable, Any]:
        """Unwrap into plain nested dicts and lists."""
        return {key: _unwrap(value) for key, value in self.entries}


# ---------------------------------------------------------------------------
# FixedList — positional sequence
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FixedList(Sequence):
    """Ordered, read-only sequence of structures."""

    items: tuple[Structure, ...] = ()

    @classmethod
    def from_ordered_values(cls, values: Iterable[Structure]) -> FixedList:
        return cls(tuple(values))

    # -- Sequence protocol ----------------------------------------------

    def __getitem__(self, index):
        if isinstance(index, slice):
            return FixedList(self.items[index])
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Structure]:
        return iter(self.items)

    def __setitem__(self, index: int, value: Any) -> None:
        raise ReadOnlyStructureError(f"FixedList is read-only; cannot set index {index!r}")

    def __delitem__(self, index: int) -> None:
        raise ReadOnlyStructureError(f"FixedList is read-only; cannot delete index {index!r}")

    # -- Convenience accessors ------------------------------------------

    def exists(self, index: int) -> bool:
        """True if *index* is a valid non-negative position."""
        return _is_position(index) and index < len(self.items)

    def get(self, index: int, default: Any = None) -> Structure:
        if self.exists(index):
            return self.items[index]
        return default

    def is_empty(self) -> bool:
        return not self.items

    def to_loose(self) -> list[Any]:
        """Unwrap into plain nested lists and dicts."""
        return [_unwrap(value) for value in self.items]


# Leaves are any non-iterable value, passed through unchanged.
Structure = Union[Map, FixedList, Any]


def _is_position(index: object) -> bool:
    return isinstance(index, int) and not isinstance(index, bool) and index >= 0


def _unwrap(value: Structure) -> Any:
    if isinstance(value, (Map, FixedList)):
        return value.to_loose()
    return value


def _slot(key: Hashable) -> tuple[type, Hashable]:
    return (type(key), key)
