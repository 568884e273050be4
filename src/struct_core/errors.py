"""Exception hierarchy for struct_core."""

from __future__ import annotations

from collections.abc import Sized
from typing import Any


class StructCoreError(Exception):
    """Root of all errors raised by struct_core."""


class InvalidStructuralTypeError(StructCoreError, TypeError):
    """Raised when a value that must be iterated cannot be.

    ``value`` is the rejected value; ``type_info`` is a short
    human-readable description of its type and shape.
    """

    def __init__(self, message: str, value: Any = None, type_info: str = "") -> None:
        super().__init__(message)
        self.value = value
        self.type_info = type_info

    @classmethod
    def with_type_info(cls, value: Any) -> InvalidStructuralTypeError:
        info = describe_type(value)
        return cls(f"Invalid structural type: {info}", value=value, type_info=info)


class ReadOnlyStructureError(StructCoreError, TypeError):
    """Raised on an attempt to mutate a built structure."""


class StructureLoadError(StructCoreError):
    """Raised when loose data cannot be read from a file or text.

    Examples
    --------
    * File does not exist / unsupported extension
    * JSON or YAML syntax error
    """


def describe_type(value: Any) -> str:
    """Describe *value* for diagnostics, e.g. ``int`` or ``str of length 5``."""
    if value is None:
        return "NoneType"
    type_name = type(value).__name__
    if isinstance(value, (str, bytes, bytearray)):
        return f"{type_name} of length {len(value)}"
    if isinstance(value, (bool, int, float, complex)):
        return type_name
    if isinstance(value, Sized):
        return f"object of type {type_name} (size {len(value)})"
    return f"object of type {type_name}"
