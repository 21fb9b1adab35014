from __future__ import annotations

from typing import Any


def flatten(prefix: str, value: Any, result: dict[str, Any], provenance: dict[str, str]) -> None:
    """
    Flatten nested mappings into dot-separated keys, writing into result.

    Lists are leaves and are stored as-is. Mapping entries whose key is not
    a string are dropped. A leaf with an empty prefix (a bare scalar or list
    document) records nothing.
    """
    if isinstance(value, dict):
        for key, child in value.items():
            if not isinstance(key, str):
                continue
            flatten(f"{prefix}.{key}" if prefix else key, child, result, provenance)
        return

    if prefix:
        result[prefix] = value
        provenance[prefix] = prefix


def flatten_value(value: Any) -> tuple[dict[str, Any], dict[str, str]]:
    result: dict[str, Any] = {}
    provenance: dict[str, str] = {}
    flatten("", value, result, provenance)
    return result, provenance
