"""Tests for the host-facing heatmap view."""

from __future__ import annotations

import unittest
from datetime import date, timedelta

from activityview.activity_view import ActivityView
from activityview.config import MONTH_LABELS
from activityview.drawing import DrawText, FillRect
from activityview.theme_profiles import resolve_theme


class RecordingSurface:
    def __init__(self) -> None:
        self.rects = 0
        self.texts: list[str] = []

    def fill_rect(self, left, top, right, bottom, color) -> None:
        self.rects += 1

    def draw_text(self, text, x, y, color, font_name, font_size) -> None:
        self.texts.append(text)


class ActivityViewTests(unittest.TestCase):
    def setUp(self) -> None:
        self.view = ActivityView(date(2024, 1, 1))

    def test_range_and_day_count(self) -> None:
        self.assertEqual(self.view.range_start, date(2023, 1, 9))
        self.assertEqual(self.view.range_end, date(2024, 1, 1))
        self.assertEqual(self.view.day_count(), 358)

    def test_set_active_toggles_rendered_cell(self) -> None:
        self.assertTrue(self.view.set_active(self.view.range_end, True))
        self.assertTrue(self.view.is_active(self.view.range_end))
        rects = [item for item in self.view.render(700) if isinstance(item, FillRect)]
        self.assertEqual(rects[-1].color, self.view.theme.ENABLED)
        self.assertEqual(rects[0].color, self.view.theme.DISABLED)

    def test_set_active_outside_window_leaves_render_unchanged(self) -> None:
        before = self.view.render(700)
        self.assertFalse(self.view.set_active(self.view.range_start - timedelta(days=1), True))
        self.assertEqual(self.view.render(700), before)

    def test_render_scenario_700(self) -> None:
        primitives = self.view.render(700)
        _, height = self.view.preferred_size(700)
        first = primitives[0]
        self.assertIsInstance(first, FillRect)
        self.assertEqual(first.left, 0)
        self.assertAlmostEqual(first.right - first.left, 490 / 52)
        header = height - (7 * (490 / 52) + 6 * (210 / 51))
        self.assertAlmostEqual(first.top, header)
        self.assertEqual(sum(isinstance(item, DrawText) for item in primitives), 12)

    def test_paint_draws_every_primitive(self) -> None:
        surface = RecordingSurface()
        self.view.paint(surface, 700)
        self.assertEqual(surface.rects, 358)
        self.assertEqual(surface.texts[0], "Feb")

    def test_initialize_reanchors_window(self) -> None:
        self.view.set_active(date(2023, 6, 1))
        self.view.initialize(date(2024, 1, 7))
        self.assertEqual(self.view.day_count(), 364)
        self.assertEqual(self.view.active_dates(), ())

    def test_theme_and_month_names_apply(self) -> None:
        theme = resolve_theme(profile="dark")
        names = tuple(label.upper() for label in MONTH_LABELS)
        view = ActivityView(date(2024, 1, 1), theme=theme, month_names=names)
        labels = [item for item in view.render(700) if isinstance(item, DrawText)]
        self.assertEqual(labels[0].text, "FEB")
        self.assertEqual(labels[0].color, theme.TEXT)

    def test_rejects_wrong_month_name_count(self) -> None:
        with self.assertRaisesRegex(ValueError, "month_names must contain exactly 12 names"):
            ActivityView(date(2024, 1, 1), month_names=("Jan",))
