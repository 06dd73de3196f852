"""Theme profile schema and resolver."""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from reportlab.lib import colors
from reportlab.pdfbase import pdfmetrics


@dataclass(frozen=True)
class ThemeProfile:
    """Serializable theme profile values."""

    enabled: str = "#41D83C"
    disabled: str = "#ECECEC"
    text: str = "#5F5F5F"
    background: str = "#FFFFFF"
    font_regular: str = "Helvetica"
    text_size: float = 14.0

    def to_theme_class(self) -> type:
        """Return a runtime Theme-like class with parsed color objects."""
        return type(
            "Theme",
            (),
            {
                "ENABLED": _parse_color(self.enabled, key="enabled"),
                "DISABLED": _parse_color(self.disabled, key="disabled"),
                "TEXT": _parse_color(self.text, key="text"),
                "BACKGROUND": _parse_color(self.background, key="background"),
                "FONT_REGULAR": _parse_font(self.font_regular, key="font_regular"),
                "TEXT_SIZE": _parse_text_size(self.text_size, key="text_size"),
            },
        )


_BUILTIN_THEME_PROFILES: dict[str, ThemeProfile] = {
    "default": ThemeProfile(),
    "dark": ThemeProfile(
        enabled="#39D353",
        disabled="#161B22",
        text="#C9D1D9",
        background="#0D1117",
    ),
}


def available_theme_profiles() -> tuple[str, ...]:
    """Return built-in theme profile names."""
    return tuple(sorted(_BUILTIN_THEME_PROFILES))


def resolve_theme(
    *,
    profile: str = "default",
    theme_file: str | Path | None = None,
) -> type:
    """Resolve one built-in theme plus optional file overrides."""
    if profile not in _BUILTIN_THEME_PROFILES:
        valid = ", ".join(available_theme_profiles())
        msg = f"unknown theme profile '{profile}'. Valid profiles: {valid}."
        raise ValueError(msg)

    resolved_profile = _BUILTIN_THEME_PROFILES[profile]
    if theme_file is not None:
        resolved_profile = replace(resolved_profile, **_load_theme_file(Path(theme_file)))
    return resolved_profile.to_theme_class()


def _load_theme_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        msg = f"theme file '{path}' does not exist."
        raise ValueError(msg)

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"theme file '{path}' is not valid JSON: {exc}."
        raise ValueError(msg) from exc

    if not isinstance(payload, dict):
        msg = "theme file content must be a JSON object."
        raise ValueError(msg)

    allowed = set(ThemeProfile.__dataclass_fields__)
    unknown = sorted(key for key in payload if key not in allowed)
    if unknown:
        msg = f"unknown theme key(s): {', '.join(unknown)}."
        raise ValueError(msg)

    return payload


def _parse_color(raw_value: str, *, key: str) -> colors.Color:
    if not isinstance(raw_value, str) or not raw_value.strip():
        msg = f"theme key '{key}' must be a non-empty color string."
        raise ValueError(msg)
    try:
        if raw_value.startswith("#"):
            return colors.HexColor(raw_value)
        return colors.toColor(raw_value)
    except Exception as exc:  # noqa: BLE001
        msg = f"invalid color value '{raw_value}' for theme key '{key}'."
        raise ValueError(msg) from exc


def _parse_font(raw_value: str, *, key: str) -> str:
    if not isinstance(raw_value, str) or not raw_value.strip():
        msg = f"theme key '{key}' must be a non-empty font name string."
        raise ValueError(msg)
    try:
        pdfmetrics.getFont(raw_value)
    except KeyError as exc:
        msg = f"unknown font '{raw_value}' for theme key '{key}'."
        raise ValueError(msg) from exc
    return raw_value


def _parse_text_size(raw_value: float, *, key: str) -> float:
    if isinstance(raw_value, bool) or not isinstance(raw_value, (int, float)):
        msg = f"theme key '{key}' must be a number."
        raise ValueError(msg)
    if raw_value <= 0:
        msg = f"theme key '{key}' must be positive."
        raise ValueError(msg)
    return float(raw_value)
