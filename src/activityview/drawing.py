"""Draw primitives, surface protocols and ReportLab adapters."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Protocol

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from .profiles import DEFAULT_DISPLAY_PROFILE, DisplayProfile


@dataclass(frozen=True)
class TextBounds:
    """Vertical text extents relative to the baseline (negative is above)."""

    top: float
    bottom: float

    @property
    def height(self) -> float:
        return self.bottom - self.top


@dataclass(frozen=True)
class FillRect:
    """Filled rectangle, origin top-left."""

    left: float
    top: float
    right: float
    bottom: float
    color: Any


@dataclass(frozen=True)
class DrawText:
    """Text drawn with its baseline starting at (x, y)."""

    text: str
    x: float
    y: float
    color: Any
    font_name: str
    font_size: float


Primitive = FillRect | DrawText


class TextMetrics(Protocol):
    """Measurement and density conversion supplied by the host surface."""

    def measure_text_bounds(self, text: str, font_name: str, size: float) -> TextBounds: ...
    def measure_text_width(self, text: str, font_name: str, size: float) -> float: ...
    def dp_to_pixels(self, value_dp: float) -> float: ...
    def sp_to_pixels(self, value_sp: float) -> float: ...


class DrawingSurface(Protocol):
    """Backend-agnostic drawing operations consumed by `paint_primitives`."""

    def fill_rect(self, left: float, top: float, right: float, bottom: float, color: Any) -> None: ...
    def draw_text(
        self, text: str, x: float, y: float, color: Any, font_name: str, font_size: float
    ) -> None: ...


class ReportLabMetrics:
    """ReportLab font metrics scaled by a display profile."""

    def __init__(self, display: DisplayProfile = DEFAULT_DISPLAY_PROFILE) -> None:
        self._display = display

    @property
    def display(self) -> DisplayProfile:
        return self._display

    def measure_text_bounds(self, text: str, font_name: str, size: float) -> TextBounds:
        if not text:
            return TextBounds(top=0.0, bottom=0.0)
        ascent, descent = pdfmetrics.getAscentDescent(font_name, size)
        return TextBounds(top=-ascent, bottom=-descent)

    def measure_text_width(self, text: str, font_name: str, size: float) -> float:
        return pdfmetrics.stringWidth(text, font_name, size)

    def dp_to_pixels(self, value_dp: float) -> float:
        return self._display.dp_to_pixels(value_dp)

    def sp_to_pixels(self, value_sp: float) -> float:
        return self._display.sp_to_pixels(value_sp)


class ReportLabSurface:
    """ReportLab-backed implementation of DrawingSurface.

    PDF space has its origin bottom-left, so every y is flipped against
    `page_height`.
    """

    def __init__(self, target: canvas.Canvas, *, page_height: float) -> None:
        self._target = target
        self._page_height = page_height

    def fill_rect(self, left: float, top: float, right: float, bottom: float, color: Any) -> None:
        self._target.setFillColor(color)
        self._target.rect(
            left,
            self._page_height - bottom,
            right - left,
            bottom - top,
            fill=1,
            stroke=0,
        )

    def draw_text(
        self, text: str, x: float, y: float, color: Any, font_name: str, font_size: float
    ) -> None:
        self._target.setFillColor(color)
        self._target.setFont(font_name, font_size)
        self._target.drawString(x, self._page_height - y, text)

    def set_title(self, title: str) -> None:
        self._target.setTitle(title)

    def show_page(self) -> None:
        self._target.showPage()

    def save(self) -> None:
        self._target.save()


def create_reportlab_surface(
    output_path: str,
    *,
    pagesize: tuple[float, float],
) -> ReportLabSurface:
    """Create a ReportLab-backed surface writing one PDF."""
    return ReportLabSurface(
        canvas.Canvas(output_path, pagesize=pagesize),
        page_height=pagesize[1],
    )


def paint_primitives(surface: DrawingSurface, primitives: Iterable[Primitive]) -> None:
    """Replay render output onto a surface in order."""
    for primitive in primitives:
        if isinstance(primitive, FillRect):
            surface.fill_rect(
                primitive.left, primitive.top, primitive.right, primitive.bottom, primitive.color
            )
        elif isinstance(primitive, DrawText):
            surface.draw_text(
                primitive.text,
                primitive.x,
                primitive.y,
                primitive.color,
                primitive.font_name,
                primitive.font_size,
            )
        else:
            msg = f"unsupported primitive {type(primitive).__name__}."
            raise TypeError(msg)
