"""Layout options, presets, and the pure transforms applied before layout."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace

logger = logging.getLogger(__name__)

MIN_CONTENT_WIDTH = 4


@dataclass(frozen=True, slots=True)
class LayoutOptions:
    """How a list of cells is arranged and framed.

    `arrange_array` is a preset request, not a live flag: `apply_array_preset()`
    folds it into the framing fields once, before any layout math runs.
    """

    arrange_array: bool = False
    arrange_vertical: bool = True
    array_prefix: str = ""
    array_suffix: str = ""
    cell_fmt: str = ""
    col_sep: str = "  "
    display_width: int = 80
    line_prefix: str = ""
    line_suffix: str = "\n"
    ljustify: bool = True


_FIELD_TYPES: dict[str, type] = {
    "arrange_array": bool,
    "arrange_vertical": bool,
    "array_prefix": str,
    "array_suffix": str,
    "cell_fmt": str,
    "col_sep": str,
    "display_width": int,
    "line_prefix": str,
    "line_suffix": str,
    "ljustify": bool,
}

OPTION_NAMES: frozenset[str] = frozenset(field.name for field in fields(LayoutOptions))


def default_options() -> LayoutOptions:
    """Column-major listing, 80 columns wide, two-space gutters."""

    return LayoutOptions()


def array_options() -> LayoutOptions:
    """Row-major bracketed listing with every value quoted."""

    return LayoutOptions(
        arrange_vertical=False,
        array_prefix="[",
        array_suffix="]",
        cell_fmt='"{}"',
        col_sep=", ",
        line_suffix=", ",
    )


def coerce_option(name: str, value: object, *, source: str | None = None) -> object:
    """Check one option value against its field type."""

    label = source or name
    expected = _FIELD_TYPES[name]
    if expected is bool:
        if not isinstance(value, bool):
            raise ValueError(
                f"Invalid value for '{label}': expected bool, got "
                f"{type(value).__name__} ({value!r})."
            )
        return value
    if expected is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(
                f"Invalid value for '{label}': expected int, got "
                f"{type(value).__name__} ({value!r})."
            )
        return value
    if not isinstance(value, str):
        raise ValueError(
            f"Invalid value for '{label}': expected str, got "
            f"{type(value).__name__} ({value!r})."
        )
    return value


def set_options(base: LayoutOptions | None = None, **overrides: object) -> LayoutOptions:
    """Return `base` (default preset when omitted) with named fields replaced.

    >>> set_options(display_width=40, ljustify=False).display_width
    40
    """

    changes: dict[str, object] = {}
    for name, value in overrides.items():
        if name not in OPTION_NAMES:
            logger.warning("Ignoring unknown layout option '%s'.", name)
            continue
        changes[name] = coerce_option(name, value)
    return replace(base or default_options(), **changes)


def apply_array_preset(options: LayoutOptions) -> LayoutOptions:
    """Fold `arrange_array` into bracket-and-comma framing.

    Returns `options` unchanged when the flag is off.
    """

    if not options.arrange_array:
        return options
    return replace(
        options,
        array_prefix="[",
        array_suffix="]\n",
        line_prefix=" ",
        line_suffix=",\n",
        col_sep=", ",
        arrange_vertical=False,
    )


def effective_width(options: LayoutOptions) -> int:
    """Width available to cells once the line prefix is accounted for.

    Widths that leave fewer than four columns after the prefix clamp to
    `len(line_prefix) + 4`; the prefix is not subtracted in that case.
    """

    prefix_len = len(options.line_prefix)
    if options.display_width - prefix_len < MIN_CONTENT_WIDTH:
        return prefix_len + MIN_CONTENT_WIDTH
    return options.display_width - prefix_len
