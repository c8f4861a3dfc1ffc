"""columnize.toml loading and environment overrides."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from columnize.lib.options import LayoutOptions, array_options, default_options
from columnize.lib.settings import load_options, resolve_config_path


def _write_config(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_missing_implicit_config_returns_defaults(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.chdir(tmp_path)
    assert resolve_config_path() is None
    assert load_options() == default_options()


def test_implicit_config_in_working_directory(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    _write_config(
        tmp_path / "columnize.toml",
        '[layout]\ndisplay_width = 40\ncol_sep = " | "\narrange_vertical = false\n',
    )
    monkeypatch.chdir(tmp_path)

    assert load_options() == LayoutOptions(display_width=40, col_sep=" | ", arrange_vertical=False)


def test_explicit_config_with_array_preset(tmp_path: Path) -> None:
    path = _write_config(tmp_path / "custom.toml", 'preset = "array"\n[layout]\nljustify = false\n')

    loaded = load_options(path)

    assert loaded.arrange_vertical is False
    assert loaded.array_prefix == "["
    assert loaded.ljustify is False
    assert loaded.cell_fmt == array_options().cell_fmt


def test_explicit_config_must_exist(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_options(tmp_path / "absent.toml")


def test_bad_preset_is_rejected(tmp_path: Path) -> None:
    path = _write_config(tmp_path / "c.toml", 'preset = "fancy"\n')
    with pytest.raises(ValueError, match="preset"):
        load_options(path)


def test_bad_layout_value_type_is_rejected(tmp_path: Path) -> None:
    path = _write_config(tmp_path / "c.toml", '[layout]\ndisplay_width = "wide"\n')
    with pytest.raises(ValueError, match="layout.display_width"):
        load_options(path)


def test_layout_must_be_a_table(tmp_path: Path) -> None:
    path = _write_config(tmp_path / "c.toml", "layout = 3\n")
    with pytest.raises(ValueError, match="expected table"):
        load_options(path)


def test_unknown_keys_are_logged_and_ignored(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = _write_config(tmp_path / "c.toml", "colour = true\n[layout]\nterm_adjust = true\n")

    with caplog.at_level(logging.WARNING, logger="columnize.lib.settings"):
        loaded = load_options(path)

    assert loaded == default_options()
    assert "colour" in caplog.text
    assert "layout.term_adjust" in caplog.text


def test_env_overrides_win_over_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = _write_config(tmp_path / "c.toml", "[layout]\ndisplay_width = 40\nljustify = true\n")
    monkeypatch.setenv("COLUMNIZE_DISPLAY_WIDTH", " 120 ")
    monkeypatch.setenv("COLUMNIZE_LJUSTIFY", "off")
    monkeypatch.setenv("COLUMNIZE_ARRANGE_VERTICAL", "No")
    monkeypatch.setenv("COLUMNIZE_COL_SEP", " ; ")
    monkeypatch.setenv("COLUMNIZE_LINE_PREFIX", "  ")
    monkeypatch.setenv("COLUMNIZE_CELL_FMT", "{:>4}")

    loaded = load_options(path)

    assert loaded == LayoutOptions(
        display_width=120,
        ljustify=False,
        arrange_vertical=False,
        col_sep=" ; ",
        line_prefix="  ",
        cell_fmt="{:>4}",
    )


@pytest.mark.parametrize(
    ("env_name", "raw_value"),
    [
        ("COLUMNIZE_DISPLAY_WIDTH", "eighty"),
        ("COLUMNIZE_LJUSTIFY", "maybe"),
    ],
)
def test_invalid_env_override_raises(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, env_name: str, raw_value: str
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(env_name, raw_value)
    with pytest.raises(ValueError, match=env_name):
        load_options()
