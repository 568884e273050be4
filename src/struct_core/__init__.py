"""struct_core — typed, immutable Map / FixedList trees from loose nested data."""

from .builder import BuilderOptions, RecursiveStructureBuilder, StructureFactory, build
from .errors import (
    InvalidStructuralTypeError,
    ReadOnlyStructureError,
    StructCoreError,
    StructureLoadError,
)
from .loader import load_file, load_text
from .model import FixedList, Map, Structure
from .shapes import InputShape, classify_shape

__all__ = [
    "build",
    "BuilderOptions",
    "RecursiveStructureBuilder",
    "StructureFactory",
    "Map",
    "FixedList",
    "Structure",
    "InputShape",
    "classify_shape",
    "load_file",
    "load_text",
    "StructCoreError",
    "InvalidStructuralTypeError",
    "ReadOnlyStructureError",
    "StructureLoadError",
]
