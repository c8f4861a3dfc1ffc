"""Layout invariants checked over a seeded sweep of inputs."""

from __future__ import annotations

import random
import string

import pytest

from columnize.lib.layout import columnize_strings, plan_layout
from columnize.lib.options import LayoutOptions, effective_width

_SEP = " | "


def _random_cases(seed: int, count: int) -> list[tuple[list[str], LayoutOptions]]:
    rng = random.Random(seed)
    cases: list[tuple[list[str], LayoutOptions]] = []
    for _ in range(count):
        size = rng.randint(0, 30)
        cells = [
            "".join(rng.choices(string.ascii_letters + string.digits, k=rng.randint(1, 8)))
            for _ in range(size)
        ]
        opts = LayoutOptions(
            col_sep=_SEP,
            display_width=rng.randint(10, 60),
            arrange_vertical=rng.random() < 0.5,
            ljustify=rng.random() < 0.5,
        )
        cases.append((cells, opts))
    return cases


CASES = _random_cases(seed=20131015, count=60)


def _grid_lines(output: str) -> list[list[str]]:
    return [line.split(_SEP) for line in output.split("\n") if line]


@pytest.mark.parametrize(("cells", "opts"), CASES)
def test_every_cell_rendered_once_in_fill_order(cells: list[str], opts: LayoutOptions) -> None:
    lines = _grid_lines(columnize_strings(cells, opts))
    if opts.arrange_vertical and lines:
        ncols = len(lines[0])
        tokens = [line[col] for col in range(ncols) for line in lines]
    else:
        tokens = [token for line in lines for token in line]
    rendered = [token.strip() for token in tokens if token.strip()]
    assert rendered == cells


@pytest.mark.parametrize(("cells", "opts"), CASES)
def test_lines_fit_display_width(cells: list[str], opts: LayoutOptions) -> None:
    for line in columnize_strings(cells, opts).split("\n"):
        assert len(line) <= effective_width(opts)


@pytest.mark.parametrize(("cells", "opts"), CASES)
def test_columns_are_as_wide_as_their_widest_cell(cells: list[str], opts: LayoutOptions) -> None:
    grid = plan_layout(cells, opts)
    if len(cells) < 2 or grid.cols == 1:
        return
    for line in _grid_lines(columnize_strings(cells, opts)):
        for col, token in enumerate(line):
            assert len(token) == grid.col_widths[col]
            assert len(token.strip()) <= grid.col_widths[col]


@pytest.mark.parametrize(("cells", "opts"), CASES)
def test_output_is_deterministic(cells: list[str], opts: LayoutOptions) -> None:
    assert columnize_strings(list(cells), opts) == columnize_strings(list(cells), opts)


@pytest.mark.parametrize("line_prefix", ["", " ", "> ", "prefix: "])
@pytest.mark.parametrize("display_width", [-5, 0, 1, 3])
def test_small_widths_clamp_to_prefix_plus_four(line_prefix: str, display_width: int) -> None:
    opts = LayoutOptions(line_prefix=line_prefix, display_width=display_width)
    assert effective_width(opts) == len(line_prefix) + 4
