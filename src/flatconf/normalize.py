from __future__ import annotations


def to_lower_dot_path(key: str) -> str:
    """FOO__BAR -> foo.bar; single underscores stay inside a segment."""
    return key.replace("__", ".").lower()
