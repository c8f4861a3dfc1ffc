"""Cyclopts CLI entry point for columnize."""

from __future__ import annotations

import sys
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated

import structlog
from cyclopts import App, Parameter

from columnize import __version__
from columnize.cli.output import OutputConfig, normalize_output_format
from columnize.cli.output import emit as emit_output
from columnize.lib.ops import FormatInput, demo_sync, format_sync
from columnize.lib.options import LayoutOptions, set_options
from columnize.lib.settings import load_options

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class GlobalOptions:
    """Top-level options that apply to all commands."""

    output: OutputConfig
    verbosity: int = 0


_GLOBAL_OPTIONS: ContextVar[GlobalOptions | None] = ContextVar("_GLOBAL_OPTIONS", default=None)


def get_global_options() -> GlobalOptions:
    """Return parsed global options for current command."""

    default = GlobalOptions(output=OutputConfig(format="text"))
    return _GLOBAL_OPTIONS.get() or default


def emit(payload: object) -> None:
    """Write command output using current output format settings."""

    emit_output(payload, get_global_options().output)


def _extract_global_options(argv: Sequence[str]) -> tuple[list[str], GlobalOptions]:
    json_mode = False
    output_format: str | None = None
    verbosity = 0
    cleaned: list[str] = []

    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--":
            cleaned.extend(argv[i:])
            break
        if arg == "--json":
            json_mode = True
            i += 1
            continue
        if arg == "--no-json":
            i += 1
            continue
        if arg == "--format":
            if i + 1 >= len(argv):
                raise SystemExit("--format requires a value")
            output_format = argv[i + 1]
            i += 2
            continue
        if arg.startswith("--format="):
            output_format = arg.partition("=")[2]
            i += 1
            continue
        if arg in {"--verbose", "-v"}:
            verbosity += 1
            i += 1
            continue
        if arg == "-vv":
            verbosity += 2
            i += 1
            continue

        cleaned.append(arg)
        i += 1

    resolved = normalize_output_format(requested=output_format, json_mode=json_mode)
    return cleaned, GlobalOptions(output=OutputConfig(format=resolved), verbosity=verbosity)


def _read_stdin_items() -> tuple[str, ...]:
    if sys.stdin is None or sys.stdin.isatty():
        return ()
    return tuple(line.rstrip("\r\n") for line in sys.stdin if line.strip())


def _resolve_options(
    *,
    config: str | None,
    width: int | None,
    across: bool,
    right: bool,
    sep: str | None,
    array: bool,
    line_prefix: str | None,
    cell_fmt: str | None,
) -> LayoutOptions:
    changes: dict[str, object] = {}
    if width is not None:
        changes["display_width"] = width
    if across:
        changes["arrange_vertical"] = False
    if right:
        changes["ljustify"] = False
    if sep is not None:
        changes["col_sep"] = sep
    if array:
        changes["arrange_array"] = True
    if line_prefix is not None:
        changes["line_prefix"] = line_prefix
    if cell_fmt is not None:
        changes["cell_fmt"] = cell_fmt
    return set_options(load_options(config), **changes)


app = App(
    name="columnize",
    help="Format a list of items into aligned columns.",
    version=__version__,
    help_formatter="plain",
)


@app.default
def root(
    *items: str,
    width: Annotated[
        int | None,
        Parameter(name=["--width", "-w"], help="Maximum line width, line prefix included."),
    ] = None,
    across: Annotated[
        bool,
        Parameter(name="--across", help="Fill rows left to right instead of columns top down."),
    ] = False,
    right: Annotated[
        bool,
        Parameter(name="--right", help="Right-justify cells within their column."),
    ] = False,
    sep: Annotated[
        str | None,
        Parameter(name="--sep", help="Separator placed between columns."),
    ] = None,
    array: Annotated[
        bool,
        Parameter(name="--array", help="Frame the output as a bracketed array literal."),
    ] = False,
    line_prefix: Annotated[
        str | None,
        Parameter(name="--line-prefix", help="Text placed before every line."),
    ] = None,
    cell_fmt: Annotated[
        str | None,
        Parameter(name="--cell-fmt", help="Per-cell template, e.g. '{:>5}' or '%05s'."),
    ] = None,
    config: Annotated[
        str | None,
        Parameter(name="--config", help="Path to a columnize.toml file."),
    ] = None,
) -> None:
    """Format ITEMS, or the lines of stdin when no items are given.

    Global flags: --json, --format text|json, --verbose/-v.
    """

    options = _resolve_options(
        config=config,
        width=width,
        across=across,
        right=right,
        sep=sep,
        array=array,
        line_prefix=line_prefix,
        cell_fmt=cell_fmt,
    )
    cells = items or _read_stdin_items()
    logger.info(
        "formatting items",
        count=len(cells),
        display_width=options.display_width,
        vertical=options.arrange_vertical,
    )
    emit(format_sync(FormatInput(items=tuple(cells), options=options)))


@app.command(name="demo")
def demo(
    config: Annotated[
        str | None,
        Parameter(name="--config", help="Path to a columnize.toml file."),
    ] = None,
) -> None:
    """Show sample layouts of the same data under different options."""

    emit(demo_sync(load_options(config)))


def _operation_error_message(exc: Exception) -> str:
    message = str(exc).strip()
    if message:
        return message
    return exc.__class__.__name__


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point used by `columnize` and `python -m columnize`."""

    from columnize.lib.logging import configure_logging

    args = list(sys.argv[1:] if argv is None else argv)
    cleaned_args, options = _extract_global_options(args)

    # Configure logging before anything can warn, so nothing lands on stdout.
    configure_logging(json_mode=options.output.format == "json", verbosity=options.verbosity)

    token = _GLOBAL_OPTIONS.set(options)
    try:
        try:
            app(cleaned_args)
        except (ValueError, OSError) as exc:
            print(f"error: {_operation_error_message(exc)}", file=sys.stderr)
            raise SystemExit(1) from None
    finally:
        _GLOBAL_OPTIONS.reset(token)
