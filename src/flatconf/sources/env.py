from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping

from flatconf.core.types import Source
from flatconf.normalize import to_lower_dot_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnvOptions:
    # Stripped from matching variable names before normalization; empty loads everything
    prefix: str = ""
    case_sensitive: bool = False


class EnvSource(Source):
    """Reads environment variables, e.g. APP_DATABASE__HOST -> database.host with prefix APP_."""

    def __init__(self, options: EnvOptions | None = None, environ: Mapping[str, str] | None = None) -> None:
        self._options = options or EnvOptions()
        self._environ = environ

    @property
    def name(self) -> str:
        return f"env:{self._options.prefix}" if self._options.prefix else "env"

    def _strip_prefix(self, var: str) -> str | None:
        prefix = self._options.prefix
        if not prefix:
            return var
        if self._options.case_sensitive:
            matched = var.startswith(prefix)
        else:
            matched = var.upper().startswith(prefix.upper())
        return var[len(prefix):] if matched else None

    def load_with_keys(self) -> tuple[dict[str, Any], dict[str, str]]:
        environ = os.environ if self._environ is None else self._environ
        values: dict[str, Any] = {}
        keys: dict[str, str] = {}

        for var, value in environ.items():
            key = self._strip_prefix(var)
            if not key:
                continue
            normalized = to_lower_dot_path(key)
            values[normalized] = value
            keys[normalized] = var

        logger.debug("Loaded %d keys from %s", len(values), self.name)
        return values, keys
