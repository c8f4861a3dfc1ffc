"""Format lists of strings into aligned columns."""

__version__ = "0.3.0"

from columnize.lib import (  # noqa: E402
    GridLayout,
    LayoutOptions,
    apply_array_preset,
    array_options,
    columnize,
    columnize_strings,
    default_options,
    effective_width,
    set_options,
    to_string_list,
)

__all__ = [
    "GridLayout",
    "LayoutOptions",
    "__version__",
    "apply_array_preset",
    "array_options",
    "columnize",
    "columnize_strings",
    "default_options",
    "effective_width",
    "set_options",
    "to_string_list",
]
