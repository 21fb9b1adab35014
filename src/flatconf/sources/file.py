from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from flatconf.core.types import Source
from flatconf.errors import ReadFailedError, RequiredFileNotFoundError
from flatconf.flatten import flatten_value
from flatconf.formats import parse_document, resolve_format

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileOptions:
    # "yaml", "yml", "json" or "toml"; inferred from the extension when empty
    format: str = ""
    required: bool = False


class FileSource(Source):
    """Loads a YAML, JSON or TOML file and flattens it to dot-separated keys."""

    def __init__(self, path: str | Path, options: FileOptions | None = None) -> None:
        self._path = Path(path)
        self._options = options or FileOptions()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def options(self) -> FileOptions:
        return self._options

    @property
    def name(self) -> str:
        return f"file:{self._path.name}"

    def _read(self) -> bytes | None:
        try:
            return self._path.read_bytes()
        except FileNotFoundError as e:
            if self._options.required:
                raise RequiredFileNotFoundError(self._path, e) from e
            logger.debug("Optional config file %s not found, skipping", self._path)
            return None
        except OSError as e:
            raise ReadFailedError(self._path, e) from e

    def load_with_keys(self) -> tuple[dict[str, Any], dict[str, str]]:
        data = self._read()
        if data is None:
            return {}, {}

        fmt = resolve_format(self._path, self._options.format)
        raw = parse_document(data, fmt, self._path)
        values, keys = flatten_value(raw)

        logger.debug("Loaded %d keys from %s", len(values), self._path)
        return values, keys

    def __repr__(self) -> str:
        return f"FileSource(path={str(self._path)!r}, options={self._options!r})"
