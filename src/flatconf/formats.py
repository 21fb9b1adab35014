from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

import yaml

from .errors import ParseFailedError, UnsupportedFormatError

logger = logging.getLogger(__name__)

_EXTENSIONS = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
    ".toml": "toml",
}


def resolve_format(path: str | Path, explicit_format: str = "") -> str:
    if explicit_format:
        return explicit_format
    return _EXTENSIONS.get(Path(path).suffix.lower(), "")


def _reject_recursive(value: Any, active: set[int]) -> None:
    # Anchors that alias themselves build containers that contain themselves
    if not isinstance(value, (dict, list)):
        return
    if id(value) in active:
        raise yaml.YAMLError("recursive alias: a node contains a reference to itself")
    active.add(id(value))
    children = value.values() if isinstance(value, dict) else value
    for child in children:
        _reject_recursive(child, active)
    active.discard(id(value))


def _parse_yaml(data: bytes) -> Any:
    # Only the first document of a multi-document stream is used
    raw = next(yaml.safe_load_all(data), None)
    _reject_recursive(raw, set())
    return raw


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name!r}")


def _parse_json(data: bytes) -> Any:
    # json.loads rejects an empty document; treat it like the other formats do
    if not data.strip():
        return {}
    return json.loads(data, parse_constant=_reject_constant)


def _parse_toml(data: bytes) -> Any:
    return tomllib.loads(data.decode("utf-8"))


_PARSERS = {
    "yaml": ("yaml", _parse_yaml, (yaml.YAMLError, UnicodeDecodeError)),
    "yml": ("yaml", _parse_yaml, (yaml.YAMLError, UnicodeDecodeError)),
    "json": ("json", _parse_json, (ValueError,)),
    "toml": ("toml", _parse_toml, (tomllib.TOMLDecodeError, UnicodeDecodeError)),
}


def parse_document(data: bytes, fmt: str, path: str | Path) -> Any:
    """
    Parse raw file bytes with the parser registered for fmt.

    Raises UnsupportedFormatError for an unknown fmt and ParseFailedError
    (chained from the parser's own error) for malformed content.
    """
    entry = _PARSERS.get(fmt)
    if entry is None:
        raise UnsupportedFormatError(fmt, path)

    name, parser, parse_errors = entry
    try:
        raw = parser(data)
    except parse_errors as e:
        raise ParseFailedError(name, path, e) from e

    logger.debug("Parsed %s as %s (%d bytes)", path, name, len(data))
    return raw
