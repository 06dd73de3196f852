"""CLI and orchestration for activity heatmap PDF generation."""

from __future__ import annotations

import argparse
import logging
import math
import sys
from collections.abc import Iterable
from datetime import date
from pathlib import Path

from .activity_view import ActivityView
from .calendar_window import compute_date_window
from .config import DEFAULT_FILENAME_TEMPLATE, DEFAULT_WIDTH, MONTH_LABELS, Theme
from .drawing import ReportLabMetrics, create_reportlab_surface
from .heatmap_geometry import month_week_indexes
from .profiles import DEFAULT_DISPLAY, DISPLAY_PROFILES, resolve_display_profile
from .rendering import visible_month_labels
from .theme_profiles import available_theme_profiles, resolve_theme

logger = logging.getLogger(__name__)


def _validate_width(width: float) -> None:
    if isinstance(width, bool) or not isinstance(width, (int, float)):
        msg = "width must be a number."
        raise TypeError(msg)
    if width <= 0:
        msg = "width must be positive."
        raise ValueError(msg)


def load_active_dates(path: str | Path) -> tuple[date, ...]:
    """Read one ISO date per line; blank lines and `#` comments are skipped."""
    source = Path(path)
    if not source.is_file():
        msg = f"activity file '{source}' does not exist or is not a file."
        raise ValueError(msg)

    dates: list[date] = []
    for line_no, raw_line in enumerate(source.read_text(encoding="utf-8").splitlines(), start=1):
        line = raw_line.split("#", 1)[0].strip()
        if not line:
            continue
        try:
            dates.append(date.fromisoformat(line))
        except ValueError as exc:
            msg = f"invalid date '{line}' on line {line_no} of '{source}'."
            raise ValueError(msg) from exc
    return tuple(dates)


def generate_heatmap_pdf(
    output_path: str | Path | None = None,
    *,
    today: date | None = None,
    width: float = DEFAULT_WIDTH,
    active_dates: Iterable[date] = (),
    display: str = DEFAULT_DISPLAY,
    theme: type = Theme,
) -> Path:
    """Generate a one-page heatmap PDF and return the output path."""
    _validate_width(width)
    display_profile = resolve_display_profile(display)
    view = ActivityView(today, metrics=ReportLabMetrics(display_profile), theme=theme)

    skipped = 0
    for active_date in active_dates:
        if not view.set_active(active_date, True):
            skipped += 1
            logger.warning(
                "Skipping %s: outside %s..%s", active_date, view.range_start, view.range_end
            )
    if skipped:
        logger.info("Skipped %d of the given dates", skipped)

    page_width, height = view.preferred_size(width)
    page_height = math.ceil(height)

    destination = Path(
        output_path or DEFAULT_FILENAME_TEMPLATE.format(end=view.range_end.isoformat())
    )
    destination.parent.mkdir(parents=True, exist_ok=True)

    surface = create_reportlab_surface(str(destination), pagesize=(page_width, page_height))
    surface.set_title(f"Activity {view.range_start.isoformat()} to {view.range_end.isoformat()}")
    surface.fill_rect(0, 0, page_width, page_height, theme.BACKGROUND)
    view.paint(surface, page_width)
    surface.show_page()
    surface.save()
    logger.debug("Wrote %s (%sx%s)", destination, page_width, page_height)
    return destination


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        msg = f"invalid date '{value}', expected YYYY-MM-DD."
        raise argparse.ArgumentTypeError(msg) from exc


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a one-year activity heatmap PDF.")
    parser.add_argument(
        "--today",
        type=_iso_date,
        default=None,
        help="Last day shown (YYYY-MM-DD). Default: the current date.",
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Width in pixels.")
    parser.add_argument(
        "--active",
        type=_iso_date,
        action="append",
        default=[],
        help="Day to mark as active (repeatable).",
    )
    parser.add_argument(
        "--active-file",
        type=Path,
        default=None,
        help="Text file with one active day (YYYY-MM-DD) per line.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output PDF path. Default: activity_<today>.pdf",
    )
    parser.add_argument(
        "--display",
        choices=sorted(DISPLAY_PROFILES),
        default=DEFAULT_DISPLAY,
        help="Display density profile.",
    )
    parser.add_argument(
        "--theme-profile",
        choices=available_theme_profiles(),
        default="default",
        help="Built-in theme profile name.",
    )
    parser.add_argument(
        "--theme-file",
        type=Path,
        default=None,
        help="JSON file with theme overrides.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _build_months_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="List the week column under each month label."
    )
    parser.add_argument(
        "--today",
        type=_iso_date,
        default=None,
        help="Last day shown (YYYY-MM-DD). Default: the current date.",
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Width in pixels.")
    parser.add_argument(
        "--display",
        choices=sorted(DISPLAY_PROFILES),
        default=DEFAULT_DISPLAY,
        help="Display density profile.",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="List every month start, including overlapping and partly visible ones.",
    )
    return parser


def _run_months_cli(argv: list[str]) -> int:
    parser = _build_months_arg_parser()
    args = parser.parse_args(argv)

    window = compute_date_window(args.today or date.today())
    if args.all:
        pairs = month_week_indexes(window.start, window.end)
    else:
        try:
            _validate_width(args.width)
        except ValueError as exc:
            parser.exit(status=2, message=f"error: {exc}\n")
        metrics = ReportLabMetrics(resolve_display_profile(args.display))
        pairs = visible_month_labels(args.width, window, metrics=metrics)
    for month_idx, week_idx in pairs:
        print(f"{MONTH_LABELS[month_idx]}\t{week_idx}")
    return 0


def main(argv: list[str] | None = None) -> int:
    argv_list = list(sys.argv[1:] if argv is None else argv)
    if argv_list and argv_list[0] == "months":
        return _run_months_cli(argv_list[1:])

    parser = _build_arg_parser()
    args = parser.parse_args(argv_list)
    _configure_logging(args.verbose)

    try:
        _validate_width(args.width)
        active_dates = list(args.active)
        if args.active_file is not None:
            active_dates.extend(load_active_dates(args.active_file))
        resolved_theme = resolve_theme(profile=args.theme_profile, theme_file=args.theme_file)
        destination = generate_heatmap_pdf(
            output_path=args.output,
            today=args.today,
            width=args.width,
            active_dates=active_dates,
            display=args.display,
            theme=resolved_theme,
        )
    except ValueError as exc:
        parser.exit(status=2, message=f"error: {exc}\n")

    print(f"Generated heatmap at: {destination}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
