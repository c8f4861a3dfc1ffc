"""Shared pytest fixtures for layout and CLI checks."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable

PACKAGE_ROOT = Path(__file__).resolve().parents[1]


@dataclass(frozen=True, slots=True)
class CliResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


@pytest.fixture(autouse=True)
def _clear_columnize_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("COLUMNIZE_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def package_root() -> Path:
    return PACKAGE_ROOT


@pytest.fixture
def cli_env(package_root: Path) -> dict[str, str]:
    env = {key: value for key, value in os.environ.items() if not key.startswith("COLUMNIZE_")}
    existing = env.get("PYTHONPATH", "")
    root = str(package_root / "src")
    env["PYTHONPATH"] = root if not existing else f"{root}:{existing}"
    return env


@pytest.fixture
def run_columnize(
    tmp_path: Path, cli_env: dict[str, str]
) -> Callable[..., CliResult]:
    def _run(
        args: list[str],
        *,
        stdin: str = "",
        env: dict[str, str] | None = None,
        timeout: float = 15.0,
    ) -> CliResult:
        completed = subprocess.run(
            [sys.executable, "-m", "columnize", *args],
            cwd=tmp_path,
            env={**cli_env, **(env or {})},
            input=stdin,
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
        )
        return CliResult(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )

    return _run
