"""Pure geometry helpers for the heatmap grid."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, timedelta

from .config import DAYS_PER_WEEK, ITEMS_WIDTH_PERCENT, WEEK_COLUMNS


@dataclass(frozen=True)
class Point:
    """2D point in surface pixels, origin top-left."""

    x: float
    y: float


@dataclass(frozen=True)
class CellRect:
    """Cell bounds in surface pixels, origin top-left."""

    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


@dataclass(frozen=True)
class HeatmapGeometry:
    """Resolved geometry for one render pass."""

    width: float
    item_size: float
    space_size: float
    header_height: float
    label_padding: float

    @property
    def step(self) -> float:
        return self.item_size + self.space_size

    @property
    def grid_height(self) -> float:
        return DAYS_PER_WEEK * self.item_size + (DAYS_PER_WEEK - 1) * self.space_size

    @property
    def total_height(self) -> float:
        return self.grid_height + self.header_height


def split_width(width: float) -> tuple[int, float]:
    """Split `width` into the cell share and the gap share."""
    items_width = math.floor(width * ITEMS_WIDTH_PERCENT / 100)
    return items_width, width - items_width


def compute_heatmap_geometry(
    width: float,
    *,
    header_height: float,
    label_padding: float,
) -> HeatmapGeometry:
    """Compute cell and gap sizes for a grid `width` pixels wide.

    Widths too small for the grid are not rejected; they yield zero or
    negative sizes.
    """
    items_width, spaces_width = split_width(width)
    return HeatmapGeometry(
        width=width,
        item_size=items_width / WEEK_COLUMNS,
        space_size=spaces_width / (WEEK_COLUMNS - 1),
        header_height=header_height,
        label_padding=label_padding,
    )


def _validate_cell(week_idx: int, day_idx: int) -> None:
    if not 0 <= week_idx < WEEK_COLUMNS:
        msg = f"week_idx must be between 0 and {WEEK_COLUMNS - 1}."
        raise ValueError(msg)
    if not 0 <= day_idx < DAYS_PER_WEEK:
        msg = f"day_idx must be between 0 and {DAYS_PER_WEEK - 1}."
        raise ValueError(msg)


def cell_index(week_idx: int, day_idx: int) -> int:
    """Return the linear day index of one cell."""
    _validate_cell(week_idx, day_idx)
    return week_idx * DAYS_PER_WEEK + day_idx


def cell_rect(geometry: HeatmapGeometry, week_idx: int, day_idx: int) -> CellRect:
    """Return one day cell rectangle."""
    _validate_cell(week_idx, day_idx)
    left = week_idx * geometry.step
    top = geometry.header_height + day_idx * geometry.step
    return CellRect(
        left=left,
        top=top,
        right=left + geometry.item_size,
        bottom=top + geometry.item_size,
    )


def month_label_origin(geometry: HeatmapGeometry, week_idx: int) -> Point:
    """Return the text baseline origin for a month label above one column."""
    if not 0 <= week_idx < WEEK_COLUMNS:
        msg = f"week_idx must be between 0 and {WEEK_COLUMNS - 1}."
        raise ValueError(msg)
    return Point(
        x=week_idx * geometry.step,
        y=geometry.header_height - geometry.label_padding,
    )


def month_week_indexes(first_day: date, last_day: date) -> tuple[tuple[int, int], ...]:
    """Map each month in a range to the first week column it appears in.

    Returns `(month_index, week_index)` pairs with `month_index` in 0..11.
    The first pair is always the month of `first_day` at week 0.
    """
    if first_day.weekday() != 0:
        msg = "first_day must be a Monday."
        raise ValueError(msg)
    if first_day > last_day:
        msg = "first_day must not be after last_day."
        raise ValueError(msg)

    pairs: list[tuple[int, int]] = [(first_day.month - 1, 0)]
    previous_month = first_day.month
    current = first_day
    week_idx = 0
    while current <= last_day:
        if current.month != previous_month:
            pairs.append((current.month - 1, week_idx))
            previous_month = current.month
        current += timedelta(days=1)
        if current.weekday() == 0:
            week_idx += 1
    return tuple(pairs)


def remove_overlapping_month_labels(
    pairs: Sequence[tuple[int, int]],
    *,
    item_size: float,
    space_size: float,
    text_widths: Sequence[float],
) -> tuple[tuple[int, int], ...]:
    """Thin out `(month_index, week_index)` pairs so their labels do not overlap.

    The first and last pairs are dropped since their months may be only
    partly visible. Of the rest, every x-th pair is kept, with x the smallest
    step for which no label starts at or before the end of the previous one.
    Labels are centred two columns into their month; `text_widths` holds the
    label width for each of the 12 months.
    """
    if len(text_widths) != 12:
        msg = "text_widths must contain exactly 12 widths."
        raise ValueError(msg)
    if len(pairs) <= 2:
        return ()

    candidates = tuple(pairs[1:-1])
    filtered = candidates
    step = item_size + space_size
    keep_every = 1
    while keep_every < len(pairs) - 2:
        previous_end = 0.0
        overlap = False
        for month_idx, week_idx in filtered:
            label_width = text_widths[month_idx]
            left = (week_idx + 2) * step - label_width / 2
            if left <= previous_end:
                overlap = True
            previous_end = left + label_width
        if not overlap:
            break
        keep_every += 1
        filtered = tuple(
            pair for idx, pair in enumerate(candidates) if idx % keep_every == 0
        )
    return filtered
