"""Core columnize library exports."""

from columnize.lib.layout import (
    GridLayout,
    cell_size,
    columnize,
    columnize_strings,
    plan_layout,
    render_grid,
)
from columnize.lib.options import (
    LayoutOptions,
    apply_array_preset,
    array_options,
    default_options,
    effective_width,
    set_options,
)
from columnize.lib.stringify import to_string_list

__all__ = [
    "GridLayout",
    "LayoutOptions",
    "apply_array_preset",
    "array_options",
    "cell_size",
    "columnize",
    "columnize_strings",
    "default_options",
    "effective_width",
    "plan_layout",
    "render_grid",
    "set_options",
    "to_string_list",
]
