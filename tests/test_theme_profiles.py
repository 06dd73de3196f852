"""Tests for theme profile resolution and validation."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from reportlab.lib import colors

from activityview.theme_profiles import available_theme_profiles, resolve_theme


class ThemeProfileTests(unittest.TestCase):
    def test_available_theme_profiles_contains_builtins(self) -> None:
        self.assertEqual(available_theme_profiles(), ("dark", "default"))

    def test_resolve_theme_defaults_match_builtin_theme_values(self) -> None:
        theme = resolve_theme()
        self.assertEqual(theme.FONT_REGULAR, "Helvetica")
        self.assertEqual(theme.TEXT_SIZE, 14.0)
        self.assertEqual(theme.ENABLED.rgb(), colors.HexColor("#41D83C").rgb())
        self.assertEqual(theme.DISABLED.rgb(), colors.HexColor("#ECECEC").rgb())

    def test_resolve_theme_rejects_unknown_profile(self) -> None:
        with self.assertRaisesRegex(ValueError, "unknown theme profile 'neon'"):
            resolve_theme(profile="neon")

    def test_resolve_theme_applies_json_overrides(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            theme_path = Path(tmp_dir) / "theme.json"
            theme_path.write_text(
                json.dumps(
                    {
                        "enabled": "#112233",
                        "font_regular": "Courier",
                        "text_size": 10,
                    }
                ),
                encoding="utf-8",
            )

            theme = resolve_theme(theme_file=theme_path)
            self.assertEqual(theme.ENABLED.rgb(), colors.HexColor("#112233").rgb())
            self.assertEqual(theme.FONT_REGULAR, "Courier")
            self.assertEqual(theme.TEXT_SIZE, 10.0)

    def test_resolve_theme_rejects_unknown_key(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            theme_path = Path(tmp_dir) / "theme.json"
            theme_path.write_text(json.dumps({"unknown": "#111111"}), encoding="utf-8")

            with self.assertRaisesRegex(ValueError, "unknown theme key\\(s\\): unknown"):
                resolve_theme(theme_file=theme_path)

    def test_resolve_theme_rejects_invalid_color(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            theme_path = Path(tmp_dir) / "theme.json"
            theme_path.write_text(json.dumps({"enabled": "invalid-color"}), encoding="utf-8")

            with self.assertRaisesRegex(ValueError, "invalid color value 'invalid-color'"):
                resolve_theme(theme_file=theme_path)

    def test_resolve_theme_rejects_non_positive_text_size(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            theme_path = Path(tmp_dir) / "theme.json"
            theme_path.write_text(json.dumps({"text_size": 0}), encoding="utf-8")

            with self.assertRaisesRegex(ValueError, "theme key 'text_size' must be positive"):
                resolve_theme(theme_file=theme_path)

    def test_resolve_theme_rejects_unregistered_font(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            theme_path = Path(tmp_dir) / "theme.json"
            theme_path.write_text(json.dumps({"font_regular": "NoSuchFont"}), encoding="utf-8")

            with self.assertRaisesRegex(
                ValueError, "unknown font 'NoSuchFont' for theme key 'font_regular'"
            ):
                resolve_theme(theme_file=theme_path)

    def test_resolve_theme_rejects_missing_file(self) -> None:
        with self.assertRaisesRegex(ValueError, "does not exist"):
            resolve_theme(theme_file=Path("does-not-exist.json"))
