"""Formatting protocol shared by CLI payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class FormatContext:
    """Parameters passed to text formatters."""

    verbosity: int = 0  # 0=normal, 1=verbose, -1=quiet


@runtime_checkable
class TextFormattable(Protocol):
    """Payloads that know how to print themselves in text mode."""

    def format_text(self, ctx: FormatContext | None = None) -> str: ...
