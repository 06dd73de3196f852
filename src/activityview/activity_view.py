"""Host-facing activity heatmap widget."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime

from .calendar_window import ActivityCalendar, DateWindow
from .config import MONTH_LABELS, Theme
from .drawing import DrawingSurface, Primitive, ReportLabMetrics, TextMetrics, paint_primitives
from .rendering import preferred_size, render_heatmap, validate_month_names


class ActivityView:
    """One-year activity heatmap bound to a host's measurement and drawing surface.

    Colors, font and text size are read from `theme` once; there is no
    runtime reconfiguration. Hosts that call into the view from several
    threads must serialise `set_active` and `render` themselves.
    """

    def __init__(
        self,
        today: date | datetime | None = None,
        *,
        metrics: TextMetrics | None = None,
        theme: type = Theme,
        month_names: Sequence[str] = MONTH_LABELS,
    ) -> None:
        validate_month_names(month_names)
        self._metrics = metrics if metrics is not None else ReportLabMetrics()
        self._theme = theme
        self._month_names = tuple(month_names)
        self._calendar = ActivityCalendar(today)

    def initialize(self, today: date | datetime | None = None) -> None:
        """Re-anchor the window on `today` and clear every day."""
        self._calendar.initialize(today)

    @property
    def window(self) -> DateWindow:
        return self._calendar.window

    @property
    def range_start(self) -> date:
        return self._calendar.range_start

    @property
    def range_end(self) -> date:
        return self._calendar.range_end

    @property
    def theme(self) -> type:
        return self._theme

    def day_count(self) -> int:
        return self._calendar.day_count()

    def set_active(self, day: date | datetime | None, is_active: bool = True) -> bool:
        return self._calendar.set_active(day, is_active)

    def is_active(self, day: date | datetime | None) -> bool:
        return self._calendar.is_active(day)

    def active_dates(self) -> tuple[date, ...]:
        return self._calendar.active_dates()

    def preferred_size(self, width: float) -> tuple[float, float]:
        return preferred_size(width, metrics=self._metrics, theme=self._theme)

    def render(self, width: float) -> tuple[Primitive, ...]:
        """Return the draw primitives for one frame at `width`."""
        return render_heatmap(
            width,
            self._calendar.window,
            self._calendar.states,
            metrics=self._metrics,
            theme=self._theme,
            month_names=self._month_names,
        )

    def paint(self, surface: DrawingSurface, width: float) -> None:
        """Render at `width` and draw the result onto `surface`."""
        paint_primitives(surface, self.render(width))
