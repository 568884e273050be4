"""RecursiveStructureBuilder: loose nested data → Map / FixedList tree.

Each level is converted in a single pass: every key updates the level's
classification flag and every iterable value is converted before the level
is closed. Descent is driven by an explicit work-stack, so nesting depth is
bounded by memory rather than by the interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field
from typing import Any, Protocol

from .errors import InvalidStructuralTypeError, describe_type
from .model import FixedList, Map, Structure
from .shapes import InputShape, classify_shape, is_integer_key, iter_entries

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Configuration / protocol
# ---------------------------------------------------------------------------

@dataclass
class BuilderOptions:
    """Tuning knobs for RecursiveStructureBuilder."""

    max_depth: int | None = None  # None = unbounded; top level is depth 1
    detect_cycles: bool = True


class StructureFactory(Protocol):
    def build(self, data: Any) -> Structure: ...


# ---------------------------------------------------------------------------
# Traversal frame
# ---------------------------------------------------------------------------

@dataclass
class _Frame:
    """One open container level on the work-stack."""

    source: Any
    entries: Iterator[tuple[Hashable, Any]]
    depth: int
    parent_key: Hashable | None = None
    is_map: bool = False
    converted: list[tuple[Hashable, Structure]] = field(default_factory=list)

    def close(self) -> Structure:
        if self.is_map:
            return Map.from_ordered_pairs(self.converted)
        return FixedList.from_ordered_values(value for _, value in self.converted)


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

class RecursiveStructureBuilder:
    """Default StructureFactory for building Map / FixedList trees.

    Usage::

        builder = RecursiveStructureBuilder()
        builder.build({"a": [1, 2]})   # → Map({"a": FixedList((1, 2))})
        builder.build([])              # → FixedList(())
        builder.build(42)              # raises InvalidStructuralTypeError
    """

    def __init__(self, options: BuilderOptions | None = None) -> None:
        self.options = options or BuilderOptions()

    def build(self, data: Any) -> Structure:
        """Build a structure from loose *data*.

        Raises InvalidStructuralTypeError if *data*, or anything nested in
        it that has to be iterated, is not a supported iterable shape.
        """
        shape = classify_shape(data)
        if shape is InputShape.UNSUPPORTED:
            raise InvalidStructuralTypeError.with_type_info(data)

        active: set[int] = set()
        stack = [self._open(data, shape, 1, None, active)]
        node_count = 0

        while True:
            frame = stack[-1]
            for key, value in frame.entries:
                frame.is_map = frame.is_map or not is_integer_key(key)
                child_shape = classify_shape(value)
                if child_shape is InputShape.UNSUPPORTED:
                    frame.converted.append((key, value))
                    continue
                stack.append(
                    self._open(value, child_shape, frame.depth + 1, key, active)
                )
                break
            else:
                stack.pop()
                active.discard(id(frame.source))
                node = frame.close()
                node_count += 1
                if not stack:
                    logger.debug(
                        "Built %s from %s (%d containers)",
                        type(node).__name__,
                        type(data).__name__,
                        node_count,
                    )
                    return node
                stack[-1].converted.append((frame.parent_key, node))

    def _open(
        self,
        source: Any,
        shape: InputShape,
        depth: int,
        parent_key: Hashable | None,
        active: set[int],
    ) -> _Frame:
        max_depth = self.options.max_depth
        if max_depth is not None and depth > max_depth:
            raise InvalidStructuralTypeError(
                f"Nesting deeper than {max_depth} levels at {describe_type(source)}",
                value=source,
                type_info=describe_type(source),
            )
        if self.options.detect_cycles:
            if id(source) in active:
                raise InvalidStructuralTypeError(
                    f"Recursive reference to {describe_type(source)}",
                    value=source,
                    type_info=describe_type(source),
                )
            active.add(id(source))
        return _Frame(source, iter_entries(source, shape), depth, parent_key)


_default_builder = RecursiveStructureBuilder()


def build(data: Any) -> Structure:
    """Build a structure from loose *data* with default options."""
    return _default_builder.build(data)
