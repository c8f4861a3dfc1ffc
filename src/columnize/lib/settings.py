"""Layout option loading from `columnize.toml` and environment overrides."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import replace
from pathlib import Path
from typing import cast

from columnize.lib.options import (
    OPTION_NAMES,
    LayoutOptions,
    array_options,
    coerce_option,
    default_options,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "columnize.toml"

_PRESETS = {
    "default": default_options,
    "array": array_options,
}

_ENV_OVERRIDE_MAP: dict[str, str] = {
    "COLUMNIZE_DISPLAY_WIDTH": "display_width",
    "COLUMNIZE_COL_SEP": "col_sep",
    "COLUMNIZE_LINE_PREFIX": "line_prefix",
    "COLUMNIZE_ARRANGE_VERTICAL": "arrange_vertical",
    "COLUMNIZE_LJUSTIFY": "ljustify",
    "COLUMNIZE_CELL_FMT": "cell_fmt",
}

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _coerce_env_value(*, field_name: str, raw_value: str, env_name: str) -> object:
    if field_name == "display_width":
        try:
            return int(raw_value.strip())
        except ValueError as error:
            raise ValueError(
                f"Invalid environment override '{env_name}': expected int, got {raw_value!r}."
            ) from error

    if field_name in {"arrange_vertical", "ljustify"}:
        normalized = raw_value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise ValueError(
            f"Invalid environment override '{env_name}': expected bool, got {raw_value!r}."
        )

    # Separators and prefixes are whitespace-significant; keep them verbatim.
    return raw_value


def _base_options(payload: dict[str, object], path: Path) -> LayoutOptions:
    raw_preset = payload.get("preset", "default")
    if not isinstance(raw_preset, str) or raw_preset.strip().lower() not in _PRESETS:
        raise ValueError(
            f"Invalid value for 'preset' in '{path}': expected one of "
            f"{sorted(_PRESETS)}, got {raw_preset!r}."
        )
    return _PRESETS[raw_preset.strip().lower()]()


def _apply_toml_payload(
    *,
    options: LayoutOptions,
    payload: dict[str, object],
    path: Path,
) -> LayoutOptions:
    for key in payload:
        if key not in {"preset", "layout"}:
            logger.warning("Ignoring unknown columnize config key '%s'.", key)

    raw_layout = payload.get("layout", {})
    if not isinstance(raw_layout, dict):
        raise ValueError(f"Invalid value for 'layout' in '{path}': expected table.")

    changes: dict[str, object] = {}
    for key, value in cast("dict[str, object]", raw_layout).items():
        if key not in OPTION_NAMES:
            logger.warning("Ignoring unknown columnize config key 'layout.%s'.", key)
            continue
        changes[key] = coerce_option(key, value, source=f"layout.{key}")
    return replace(options, **changes)


def _apply_env_overrides(options: LayoutOptions) -> LayoutOptions:
    changes: dict[str, object] = {}
    for env_name, field_name in _ENV_OVERRIDE_MAP.items():
        raw_value = os.getenv(env_name)
        if raw_value is None:
            continue
        changes[field_name] = _coerce_env_value(
            field_name=field_name,
            raw_value=raw_value,
            env_name=env_name,
        )
    return replace(options, **changes)


def resolve_config_path(path: str | Path | None = None) -> Path | None:
    """Explicit path if given, else `./columnize.toml` when it exists."""

    if path is not None:
        return Path(path).expanduser()
    candidate = Path.cwd() / DEFAULT_CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def load_options(path: str | Path | None = None) -> LayoutOptions:
    """Load layout options from TOML and apply environment overrides.

    An explicit `path` must exist; the implicit `./columnize.toml` is optional.
    """

    options = default_options()
    config_path = resolve_config_path(path)
    if config_path is not None:
        payload_obj = tomllib.loads(config_path.read_text(encoding="utf-8"))
        payload = cast("dict[str, object]", payload_obj)
        options = _apply_toml_payload(
            options=_base_options(payload, config_path),
            payload=payload,
            path=config_path,
        )
    return _apply_env_overrides(options)
