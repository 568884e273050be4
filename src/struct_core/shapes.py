"""Shape classification of loose input values.

Every value is tagged exactly once as one of three shapes:

- ``INDEXABLE``    — a native ``Mapping`` or non-text ``Sequence``
- ``PAIR_SOURCE``  — an object with an ``items()`` method, or any other
                     non-text iterable traversed once
- ``UNSUPPORTED``  — anything else (scalars, text, ``None``, plain objects)
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence
from enum import Enum, auto
from numbers import Integral
from typing import Any

from .errors import InvalidStructuralTypeError

# Text-like values are iterable but always treated as leaves.
_TEXT_TYPES = (str, bytes, bytearray, memoryview)


class InputShape(Enum):
    INDEXABLE = auto()
    PAIR_SOURCE = auto()
    UNSUPPORTED = auto()


def classify_shape(value: Any) -> InputShape:
    """Tag *value* with its input shape."""
    if isinstance(value, _TEXT_TYPES):
        return InputShape.UNSUPPORTED
    if isinstance(value, (Mapping, Sequence)):
        return InputShape.INDEXABLE
    if callable(getattr(value, "items", None)) or isinstance(value, Iterable):
        return InputShape.PAIR_SOURCE
    return InputShape.UNSUPPORTED


def is_integer_key(key: Any) -> bool:
    """Integral keys count as positional; ``bool`` does not."""
    return isinstance(key, Integral) and not isinstance(key, bool)


def iter_entries(value: Any, shape: InputShape) -> Iterator[tuple[Hashable, Any]]:
    """Return the ordered ``(key, value)`` entries of an iterable *value*.

    Native collections are adapted without copying; pair sources are
    traversed exactly once, lazily.
    """
    if shape is InputShape.INDEXABLE:
        if isinstance(value, Mapping):
            return iter(value.items())
        return enumerate(value)
    if shape is InputShape.PAIR_SOURCE:
        items = getattr(value, "items", None)
        if callable(items):
            try:
                pairs = iter(items())
            except TypeError as exc:
                raise InvalidStructuralTypeError.with_type_info(value) from exc
            return _checked_pairs(value, pairs)
        return enumerate(value)
    raise InvalidStructuralTypeError.with_type_info(value)


def _checked_pairs(source: Any, pairs: Iterable[Any]) -> Iterator[tuple[Hashable, Any]]:
    source_name = type(source).__name__
    for pair in pairs:
        if not isinstance(pair, tuple) or len(pair) != 2:
            raise InvalidStructuralTypeError(
                f"Invalid key/value pair {pair!r} from {source_name}.items()",
                value=source,
                type_info=f"pair source of type {source_name}",
            )
        try:
            hash(pair[0])
        except TypeError as exc:
            raise InvalidStructuralTypeError(
                f"Unhashable key {pair[0]!r} from {source_name}.items()",
                value=source,
                type_info=f"pair source of type {source_name}",
            ) from exc
        yield pair
