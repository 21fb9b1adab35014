from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterator

from flatconf.errors import WatchNotSupportedError


@dataclass(frozen=True)
class ChangeEvent:
    at: datetime
    cause: str


class Source(ABC):
    """
    A provider of flat configuration: lowercase dot-separated keys mapped to
    leaf values.

    Optional sources that are absent load as an empty dict. Watching is an
    optional capability; the default raises WatchNotSupportedError.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def load_with_keys(self) -> tuple[dict[str, Any], dict[str, str]]:
        """Return (data, original_keys) where original_keys maps each data key to its source key."""

    def load(self) -> dict[str, Any]:
        data, _ = self.load_with_keys()
        return data

    def watch(self) -> Iterator[ChangeEvent]:
        raise WatchNotSupportedError(self.name)
