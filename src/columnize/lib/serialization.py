"""Conversion of output payloads into JSON-ready values."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, cast


def to_jsonable(value: Any) -> Any:
    """Recursively turn dataclasses, mappings and collections into plain JSON types.

    >>> to_jsonable({"widths": (3, 1), "path": Path("a/b")})
    {'widths': [3, 1], 'path': 'a/b'}
    """

    if is_dataclass(value) and not isinstance(value, type):
        return to_jsonable(asdict(value))
    if isinstance(value, Path):
        return value.as_posix()
    if isinstance(value, Mapping):
        typed_map = cast("Mapping[object, object]", value)
        return {str(key): to_jsonable(item) for key, item in typed_map.items()}
    if isinstance(value, (set, frozenset)):
        # Sets have no stable order; sort their rendered form.
        return sorted((to_jsonable(item) for item in cast("set[object]", value)), key=repr)
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in cast("list[object]", value)]
    return value
