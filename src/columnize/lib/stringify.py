"""Convert arbitrary values into display cells."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import cast

logger = logging.getLogger(__name__)

_SCALAR_TYPES: tuple[type, ...] = (str, bytes, bytearray, Mapping)


def format_cell(value: object, cell_fmt: str = "") -> str:
    """Render one value, using `cell_fmt` when given.

    Templates containing `{` go through `str.format`; anything else is a
    printf-style `%` template. A value the template rejects falls back to
    `str(value)`.
    """

    if not cell_fmt:
        return str(value)
    try:
        if "{" in cell_fmt:
            return cell_fmt.format(value)
        return cell_fmt % (value,)
    except (TypeError, ValueError, KeyError, IndexError):
        logger.debug("cell format %r rejected %r; using str()", cell_fmt, value, exc_info=True)
        return str(value)


def is_scalar(value: object) -> bool:
    return isinstance(value, _SCALAR_TYPES) or not isinstance(value, Iterable)


def to_string_list(value: object, cell_fmt: str = "") -> list[str]:
    """Stringify every element of `value`; a scalar becomes a list of one.

    >>> to_string_list([1, 2, 3], "%02d")
    ['01', '02', '03']
    >>> to_string_list("abc")
    ['abc']
    """

    if is_scalar(value):
        return [format_cell(value, cell_fmt)]
    return [format_cell(item, cell_fmt) for item in cast("Iterable[object]", value)]
