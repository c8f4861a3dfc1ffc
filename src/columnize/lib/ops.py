"""Formatting operations behind the command line."""

from __future__ import annotations

from dataclasses import dataclass, replace

from columnize.lib.formatting import FormatContext
from columnize.lib.layout import columnize, columnize_strings, plan_layout
from columnize.lib.options import LayoutOptions, apply_array_preset, array_options
from columnize.lib.stringify import to_string_list

NUMBER_WORDS: tuple[str, ...] = (
    "one", "two", "three", "for", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eightteen", "nineteen", "twenty", "twentyone", "twentytwo",
    "twentythree", "twentyfour", "twentyfive", "twentysix", "twentyseven",
)  # fmt: skip

DEMO_INTEGERS: tuple[int, ...] = (31, 4, 1, 59, 2, 6, 5, 3)


@dataclass(frozen=True, slots=True)
class FormatInput:
    items: tuple[str, ...] = ()
    options: LayoutOptions = LayoutOptions()


@dataclass(frozen=True, slots=True)
class FormatOutput:
    text: str
    cells: int
    rows: int
    cols: int

    def format_text(self, ctx: FormatContext | None = None) -> str:
        _ = ctx
        # print() supplies the final newline.
        return self.text.removesuffix("\n")


@dataclass(frozen=True, slots=True)
class DemoSection:
    title: str
    text: str


@dataclass(frozen=True, slots=True)
class DemoOutput:
    sections: tuple[DemoSection, ...]

    def format_text(self, ctx: FormatContext | None = None) -> str:
        quiet = ctx is not None and ctx.verbosity < 0
        blocks: list[str] = []
        for section in self.sections:
            body = section.text.removesuffix("\n")
            blocks.append(body if quiet else f"# {section.title}\n{body}")
        return "\n\n".join(blocks)


def format_sync(payload: FormatInput) -> FormatOutput:
    """Stringify the items once, then lay them out and report the grid shape."""

    cells = to_string_list(list(payload.items), payload.options.cell_fmt)
    grid = plan_layout(cells, apply_array_preset(payload.options))
    # A full horizontal grid plans one trailing empty row; it holds no cells.
    rows = grid.rows
    if not grid.vertical and grid.cols:
        rows = min(rows, -(-len(cells) // grid.cols))
    return FormatOutput(
        text=columnize_strings(cells, payload.options),
        cells=len(cells),
        rows=rows,
        cols=grid.cols,
    )


def demo_sync(base: LayoutOptions | None = None) -> DemoOutput:
    """Sample layouts of the number words and a short list of integers."""

    opts = base or LayoutOptions()
    words = list(NUMBER_WORDS)
    down = replace(opts, arrange_vertical=True)
    narrow_right = replace(down, display_width=50, ljustify=False)
    across_right = replace(narrow_right, arrange_vertical=False)
    integers_right = replace(across_right, display_width=8)
    return DemoOutput(
        sections=(
            DemoSection("empty list", columnize_strings([], opts)),
            DemoSection("down, width 80", columnize_strings(words, down)),
            DemoSection("down, width 50, right-justified", columnize_strings(words, narrow_right)),
            DemoSection("across, width 50, right-justified", columnize_strings(words, across_right)),
            DemoSection("across, width 8, right-justified", columnize(DEMO_INTEGERS, integers_right)),
            DemoSection("array preset", columnize(DEMO_INTEGERS, array_options())),
            DemoSection(
                "array framing, width 20",
                columnize(DEMO_INTEGERS, replace(opts, arrange_array=True, display_width=20)),
            ),
        )
    )
