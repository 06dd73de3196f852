"""Heatmap layout and render pass producing draw primitives."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import timedelta

from .calendar_window import DateWindow
from .config import (
    DAYS_PER_WEEK,
    HEADER_PADDING_DP,
    MONTH_LABELS,
    TEXT_PROBE,
    WEEK_COLUMNS,
    Theme,
)
from .drawing import DrawText, FillRect, Primitive, TextMetrics
from .heatmap_geometry import (
    HeatmapGeometry,
    cell_index,
    cell_rect,
    compute_heatmap_geometry,
    month_label_origin,
    month_week_indexes,
    remove_overlapping_month_labels,
)

logger = logging.getLogger(__name__)


def measure_header_height(metrics: TextMetrics, *, font_name: str, font_size: float) -> float:
    """Return the height reserved above the grid for month labels."""
    bounds = metrics.measure_text_bounds(TEXT_PROBE, font_name, font_size)
    return bounds.height + metrics.dp_to_pixels(HEADER_PADDING_DP)


def layout_heatmap(width: float, *, metrics: TextMetrics, theme: type = Theme) -> HeatmapGeometry:
    """Compute the full grid geometry for `width`."""
    font_size = metrics.sp_to_pixels(theme.TEXT_SIZE)
    return compute_heatmap_geometry(
        width,
        header_height=measure_header_height(
            metrics, font_name=theme.FONT_REGULAR, font_size=font_size
        ),
        label_padding=metrics.dp_to_pixels(HEADER_PADDING_DP),
    )


def preferred_size(
    width: float,
    *,
    metrics: TextMetrics,
    theme: type = Theme,
) -> tuple[float, float]:
    """Return `(width, height)`; cells are square so height follows width."""
    geometry = layout_heatmap(width, metrics=metrics, theme=theme)
    return width, geometry.total_height


def validate_month_names(month_names: Sequence[str]) -> None:
    if len(month_names) != 12:
        msg = "month_names must contain exactly 12 names."
        raise ValueError(msg)


def visible_month_labels(
    width: float,
    window: DateWindow,
    *,
    metrics: TextMetrics,
    theme: type = Theme,
    month_names: Sequence[str] = MONTH_LABELS,
) -> tuple[tuple[int, int], ...]:
    """Return the `(month_index, week_index)` labels that fit side by side at `width`."""
    validate_month_names(month_names)
    geometry = layout_heatmap(width, metrics=metrics, theme=theme)
    font_size = metrics.sp_to_pixels(theme.TEXT_SIZE)
    text_widths = [
        metrics.measure_text_width(name, theme.FONT_REGULAR, font_size) for name in month_names
    ]
    return remove_overlapping_month_labels(
        month_week_indexes(window.start, window.end),
        item_size=geometry.item_size,
        space_size=geometry.space_size,
        text_widths=text_widths,
    )


def render_heatmap(
    width: float,
    window: DateWindow,
    states: Sequence[bool],
    *,
    metrics: TextMetrics,
    theme: type = Theme,
    month_names: Sequence[str] = MONTH_LABELS,
) -> tuple[Primitive, ...]:
    """Produce the ordered draw primitives for one frame.

    Columns run Monday to Sunday from `window.start`; the last column only
    holds the days up to `window.end`. A month label is drawn above the
    column of each 1st of the month. After a label, one further month start
    falling in the same or the next column is left unlabelled.
    """
    validate_month_names(month_names)
    if len(states) != window.day_count:
        msg = f"states must hold {window.day_count} entries, got {len(states)}."
        raise ValueError(msg)

    geometry = layout_heatmap(width, metrics=metrics, theme=theme)
    font_size = metrics.sp_to_pixels(theme.TEXT_SIZE)
    primitives: list[Primitive] = []

    cursor = window.start
    # 0: next month start gets a label, 1: next month start is suppressed.
    next_month_in = 0
    labelled_week = 0
    for week_idx in range(WEEK_COLUMNS):
        if next_month_in and week_idx > labelled_week + 1:
            next_month_in = 0

        day_max = DAYS_PER_WEEK
        if week_idx == WEEK_COLUMNS - 1:
            day_max = window.days_in_final_week

        for day_idx in range(day_max):
            if cursor.day == 1:
                # Month starts are 28+ days apart, so real calendars never reach the else.
                if next_month_in == 0:
                    origin = month_label_origin(geometry, week_idx)
                    primitives.append(
                        DrawText(
                            text=month_names[cursor.month - 1],
                            x=origin.x,
                            y=origin.y,
                            color=theme.TEXT,
                            font_name=theme.FONT_REGULAR,
                            font_size=font_size,
                        )
                    )
                    next_month_in = 1
                    labelled_week = week_idx
                else:
                    next_month_in -= 1

            rect = cell_rect(geometry, week_idx, day_idx)
            active = states[cell_index(week_idx, day_idx)]
            primitives.append(
                FillRect(
                    left=rect.left,
                    top=rect.top,
                    right=rect.right,
                    bottom=rect.bottom,
                    color=theme.ENABLED if active else theme.DISABLED,
                )
            )
            cursor += timedelta(days=1)

    logger.debug(
        "Rendered %d primitives for %s..%s at width %s",
        len(primitives),
        window.start,
        window.end,
        width,
    )
    return tuple(primitives)
