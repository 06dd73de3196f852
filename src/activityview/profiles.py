"""Display density profiles for heatmap rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DisplayProfile:
    """Pixel density of a target surface.

    `density` converts device-independent pixels (dp) to pixels and
    `font_scale` is the additional user font scaling applied to sp values.
    """

    name: str
    density: float = 1.0
    font_scale: float = 1.0

    @property
    def scaled_density(self) -> float:
        return self.density * self.font_scale

    def dp_to_pixels(self, value_dp: float) -> float:
        """Convert device-independent pixels into surface pixels."""
        return value_dp * self.density

    def sp_to_pixels(self, value_sp: float) -> float:
        """Convert scale-independent (font) pixels into surface pixels."""
        return value_sp * self.scaled_density


DISPLAY_PROFILES = {
    "mdpi": DisplayProfile(name="mdpi", density=1.0),
    "hdpi": DisplayProfile(name="hdpi", density=1.5),
    "xhdpi": DisplayProfile(name="xhdpi", density=2.0),
    "xxhdpi": DisplayProfile(name="xxhdpi", density=3.0),
    "xxxhdpi": DisplayProfile(name="xxxhdpi", density=4.0),
}

DEFAULT_DISPLAY = "mdpi"
DEFAULT_DISPLAY_PROFILE = DISPLAY_PROFILES[DEFAULT_DISPLAY]


def resolve_display_profile(name: str = DEFAULT_DISPLAY) -> DisplayProfile:
    """Return one built-in display profile by name."""
    if name not in DISPLAY_PROFILES:
        valid = ", ".join(sorted(DISPLAY_PROFILES))
        msg = f"unknown display profile '{name}'. Valid profiles: {valid}."
        raise ValueError(msg)
    return DISPLAY_PROFILES[name]
