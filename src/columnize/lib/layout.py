"""Column layout engine: pick a grid that fits the display width, then render it.

Both fill orders optimize the same thing (fewest rows within the width); they
differ only in how a cell index maps onto a (row, column) slot:

    vertical    index = nrows * col + row          (column-major)
    horizontal  index = ncols * (row - 1) + col    (row-major, 1-based rows)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from columnize.lib.options import (
    LayoutOptions,
    apply_array_preset,
    default_options,
    effective_width,
)
from columnize.lib.stringify import to_string_list

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GridLayout:
    """Resolved grid shape for one formatting call.

    In horizontal fill a completely full grid carries one extra, empty row;
    it renders as the bare line prefix.
    """

    rows: int
    cols: int
    col_widths: tuple[int, ...]
    vertical: bool


def cell_size(cell: str) -> int:
    return len(cell)


def _column_width(cells: Sequence[str]) -> int:
    return max((cell_size(cell) for cell in cells), default=0)


def _plan_vertical(cells: Sequence[str], col_sep: str, width: int) -> GridLayout:
    size = len(cells)
    sep_len = len(col_sep)
    nrows = ncols = 0
    col_widths: list[int] = []
    for nrows in range(1, size):
        ncols = (size + nrows - 1) // nrows
        col_widths = []
        total = -sep_len
        for col in range(ncols):
            start = nrows * col
            col_width = _column_width(cells[start : start + nrows])
            col_widths.append(col_width)
            total += col_width + sep_len
            if total > width:
                ncols = col
                break
        if total <= width:
            break
    else:
        nrows = size

    ncols = max(ncols, 1)
    if ncols == 1:
        nrows = size
    return GridLayout(rows=nrows, cols=ncols, col_widths=tuple(col_widths), vertical=True)


def _plan_horizontal(cells: Sequence[str], col_sep: str, width: int) -> GridLayout:
    size = len(cells)
    sep_len = len(col_sep)
    nrows = 0
    col_widths: list[int] = []
    for ncols in range(size, 0, -1):
        nrows = (size + ncols - 1) // ncols
        rounded_size = nrows * ncols
        col_widths = []
        total = -sep_len
        for col in range(ncols):
            col_width = _column_width(cells[col:rounded_size:ncols])
            col_widths.append(col_width)
            total += col_width + sep_len
            if total > width:
                break
        if total <= width:
            if rounded_size == size:
                nrows += 1
            break
    else:
        ncols = 1

    if ncols == 1:
        nrows = size
    return GridLayout(rows=nrows, cols=ncols, col_widths=tuple(col_widths), vertical=False)


def plan_layout(cells: Sequence[str], options: LayoutOptions) -> GridLayout:
    """Find the grid with the fewest rows that fits the display width.

    `options` must already have the array preset applied. Lists shorter than
    two cells need no search and come back as a single column.
    """

    if len(cells) < 2:
        return GridLayout(
            rows=len(cells),
            cols=min(len(cells), 1),
            col_widths=tuple(cell_size(cell) for cell in cells),
            vertical=options.arrange_vertical,
        )
    width = effective_width(options)
    if options.arrange_vertical:
        grid = _plan_vertical(cells, options.col_sep, width)
    else:
        grid = _plan_horizontal(cells, options.col_sep, width)
    logger.debug(
        "layout resolved: %d cells -> %d rows x %d cols (%s, width %d)",
        len(cells),
        grid.rows,
        grid.cols,
        "vertical" if grid.vertical else "horizontal",
        width,
    )
    return grid


def _justify(texts: list[str], grid: GridLayout, ljustify: bool) -> list[str]:
    if grid.cols == 1:
        return texts
    if ljustify:
        return [text.ljust(grid.col_widths[col]) for col, text in enumerate(texts)]
    return [text.rjust(grid.col_widths[col]) for col, text in enumerate(texts)]


def _render_line(prefix: str, texts: list[str], options: LayoutOptions) -> str:
    if not texts:
        return prefix
    return f"{prefix}{options.col_sep.join(texts)}{options.line_suffix}"


def render_grid(cells: Sequence[str], grid: GridLayout, options: LayoutOptions) -> str:
    """Render `cells` into the rows of `grid`.

    Vertical fill pads short columns with blank cells and adds no array
    suffix; horizontal fill ends rows early and appends the array suffix once.
    """

    size = len(cells)
    prefix = options.array_prefix or options.line_prefix
    lines: list[str] = []
    for row in range(grid.rows):
        if grid.vertical:
            texts = [
                cells[index] if index < size else ""
                for index in (grid.rows * col + row for col in range(grid.cols))
            ]
        else:
            start = grid.cols * row
            texts = list(cells[start : min(start + grid.cols, size)])
        lines.append(_render_line(prefix, _justify(texts, grid, options.ljustify), options))
        prefix = options.line_prefix

    if grid.vertical:
        return "".join(lines)
    return "".join(lines) + options.array_suffix


def columnize_strings(cells: Sequence[str], options: LayoutOptions | None = None) -> str:
    """Format already-stringified cells into aligned columns.

    >>> columnize_strings(["1", "2", "3", "4"], LayoutOptions(display_width=4))
    '1  3\\n2  4\\n'
    """

    opts = apply_array_preset(options or default_options())
    prefix = opts.array_prefix or opts.line_prefix
    if not cells:
        return f"{prefix}{opts.array_suffix}"
    if len(cells) == 1:
        return f"{prefix}{cells[0]}{opts.array_suffix}"
    return render_grid(cells, plan_layout(cells, opts), opts)


def columnize(values: object, options: LayoutOptions | None = None) -> str:
    """Stringify `values` with the options' cell format, then format them.

    >>> columnize([1, 2, 3], LayoutOptions(col_sep=", ", display_width=10))
    '1, 2, 3\\n'
    """

    opts = options or default_options()
    return columnize_strings(to_string_list(values, opts.cell_fmt), opts)
