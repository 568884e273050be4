"""Read loose data from JSON or YAML, given as text or as a file path."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Final

from ruamel.yaml import YAML

from .errors import StructureLoadError

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")

_PARSERS: Final[dict[str, Callable[[str], Any]]] = {
    "json": json.loads,
    "yaml": _yaml.load,
}
_FORMAT_BY_SUFFIX: Final[dict[str, str]] = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def load_text(text: str, fmt: str = "json") -> Any:
    """Parse *text* as ``json`` or ``yaml`` and return the loose data."""
    return _parse(text, fmt, f"{fmt} input")


def load_file(path: str | Path) -> Any:
    """Read a ``.json`` / ``.yaml`` / ``.yml`` file and return the loose data."""
    file_path = Path(path)
    fmt = _FORMAT_BY_SUFFIX.get(file_path.suffix.lower())
    if fmt is None:
        raise StructureLoadError(
            f"Unsupported extension '{file_path.suffix}'. "
            f"Supported: {', '.join(sorted(_FORMAT_BY_SUFFIX))}"
        )

    try:
        text = file_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        logger.error("File not found: %s", file_path)
        raise StructureLoadError(f"File not found: {file_path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise StructureLoadError(f"Cannot read {file_path}: {exc}") from exc

    data = _parse(text, fmt, file_path.name)
    logger.debug("Loaded %s (%s)", file_path, type(data).__name__)
    return data


def _parse(text: str, fmt: str, origin: str) -> Any:
    parser = _PARSERS.get(fmt)
    if parser is None:
        raise StructureLoadError(
            f"Unsupported format '{fmt}'. Supported: {', '.join(sorted(_PARSERS))}"
        )
    try:
        return parser(text)
    except Exception as exc:
        raise StructureLoadError(f"Cannot parse {origin}: {exc}") from exc
