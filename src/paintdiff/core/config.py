"""Configuration loading (palettes, TOML, env vars)."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from paintdiff.types.config import PaintConfig
from paintdiff.types.style import Color, StyleModifier

logger = logging.getLogger(__name__)

# Load .env from current directory (and parents), won't override existing env vars
load_dotenv()


@dataclass(frozen=True, slots=True)
class Palette:
    """Background colors for removed and added lines."""

    minus: str
    minus_emph: str
    plus: str
    plus_emph: str


DARK_PALETTE = Palette(minus="#3f0001", minus_emph="#901011", plus="#013b01", plus_emph="#11831d")
LIGHT_PALETTE = Palette(minus="#ffdddd", minus_emph="#ffc0c0", plus="#ddffdd", plus_emph="#c0ffc0")

COLOR_KEYS = ("minus_color", "minus_emph_color", "plus_color", "plus_emph_color")

ENV_MAP = {
    "PAINTDIFF_THEME": "theme",
    "PAINTDIFF_MINUS_COLOR": "minus_color",
    "PAINTDIFF_MINUS_EMPH_COLOR": "minus_emph_color",
    "PAINTDIFF_PLUS_COLOR": "plus_color",
    "PAINTDIFF_PLUS_EMPH_COLOR": "plus_emph_color",
    "PAINTDIFF_HIGHLIGHT_REMOVED": "highlight_removed",
    "PAINTDIFF_FONT_STYLES": "font_styles",
    "PAINTDIFF_TAB_WIDTH": "tab_width",
    "PAINTDIFF_LIGHT": "light",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def load_env_config() -> dict[str, Any]:
    """Load configuration from environment variables."""
    config: dict[str, Any] = {}
    for env_var, key in ENV_MAP.items():
        if (value := os.environ.get(env_var)) is not None:
            config[key] = value
    return config


def load_toml_config(cwd: str | None = None) -> dict[str, Any]:
    """Load the ``[paint]`` table from the first config.toml found.

    Searches ``<cwd>/.paintdiff/config.toml``, then the current directory,
    then ``~/.paintdiff/config.toml``.
    """
    search_paths = []
    if cwd:
        search_paths.append(Path(cwd) / ".paintdiff" / "config.toml")
    search_paths.append(Path.cwd() / ".paintdiff" / "config.toml")
    search_paths.append(Path.home() / ".paintdiff" / "config.toml")

    for toml_path in search_paths:
        if not toml_path.exists():
            continue
        try:
            with open(toml_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.warning("Ignoring config file %s: %s", toml_path, exc)
            continue
        logger.debug("Loaded config from %s", toml_path)
        paint = data.get("paint", {})
        if not isinstance(paint, dict):
            logger.warning("Ignoring non-table [paint] in %s", toml_path)
            return {}
        return paint
    return {}


def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"Invalid boolean {value!r}")


def parse_int(value: Any, name: str) -> int:
    try:
        result = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid {name} {value!r}: expected an integer") from None
    if result < 0:
        raise ValueError(f"Invalid {name} {value!r}: must not be negative")
    return result


def background(color: str) -> StyleModifier:
    return StyleModifier(background=Color.from_hex(color))


def build_config(
    overrides: dict[str, Any] | None = None,
    *,
    cwd: str | None = None,
) -> PaintConfig:
    """Resolve a ``PaintConfig`` from palette, TOML, environment and overrides.

    Later sources win. ``None`` values in *overrides* are ignored.
    """
    settings: dict[str, Any] = {}
    settings.update(load_toml_config(cwd))
    settings.update(load_env_config())
    settings.update({k: v for k, v in (overrides or {}).items() if v is not None})

    palette = LIGHT_PALETTE if parse_bool(settings.get("light", False)) else DARK_PALETTE
    colors = {
        "minus_color": palette.minus,
        "minus_emph_color": palette.minus_emph,
        "plus_color": palette.plus,
        "plus_emph_color": palette.plus_emph,
    }
    colors.update({k: settings[k] for k in COLOR_KEYS if k in settings})

    return PaintConfig(
        minus_style_modifier=background(colors["minus_color"]),
        minus_emph_style_modifier=background(colors["minus_emph_color"]),
        plus_style_modifier=background(colors["plus_color"]),
        plus_emph_style_modifier=background(colors["plus_emph_color"]),
        theme=str(settings.get("theme", "monokai")),
        highlight_removed=parse_bool(settings.get("highlight_removed", False)),
        font_styles=parse_bool(settings.get("font_styles", False)),
        tab_width=parse_int(settings.get("tab_width", 4), "tab_width"),
    )
