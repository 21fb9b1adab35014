from __future__ import annotations

from pathlib import Path

SUPPORTED_FORMATS = ("yaml", "json", "toml")


class ConfigSourceError(Exception):
    """Base class for every error a configuration source raises."""


class ConfigFileError(ConfigSourceError):
    def __init__(self, message: str, path: str | Path) -> None:
        super().__init__(message)
        self.path = str(path)


class RequiredFileNotFoundError(ConfigFileError):
    def __init__(self, path: str | Path, cause: BaseException | None = None) -> None:
        message = f"required config file not found: {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, path)


class ReadFailedError(ConfigFileError):
    def __init__(self, path: str | Path, cause: BaseException) -> None:
        super().__init__(f"read config file {path}: {cause}", path)


class ParseFailedError(ConfigFileError):
    def __init__(self, fmt: str, path: str | Path, cause: BaseException) -> None:
        super().__init__(f"parse {fmt.upper()} file {path}: {cause}", path)
        self.format = fmt


class UnsupportedFormatError(ConfigFileError):
    def __init__(self, fmt: str, path: str | Path) -> None:
        supported = ", ".join(SUPPORTED_FORMATS)
        super().__init__(f"unsupported file format: {fmt} (supported: {supported})", path)
        self.format = fmt


class WatchNotSupportedError(ConfigSourceError):
    def __init__(self, source: str = "") -> None:
        super().__init__("watch not supported by this source")
        self.source = source
