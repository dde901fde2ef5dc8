"""Height-color palettes.

Palettes are frozen dataclasses grouping the anchor colors used by the height
color mapper, so a different scheme can be selected by name.
"""

from __future__ import annotations

from dataclasses import dataclass

from wavegrid.config.constants import COLOR_THRESHOLD


@dataclass(frozen=True)
class RGB:
    """An 8-bit color."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} must be in [0, 255], got {value}")

    def as_tuple(self) -> tuple[int, int, int]:
        return self.r, self.g, self.b

    def css(self) -> str:
        """CSS ``rgb()`` notation, e.g. ``"rgb(64, 0, 0)"``."""
        return f"rgb({self.r}, {self.g}, {self.b})"


@dataclass(frozen=True)
class HeightPalette:
    """Anchor colors for negative, neutral, positive and clipped heights."""

    low: RGB = RGB(0, 0, 255)
    mid: RGB = RGB(128, 0, 0)
    high: RGB = RGB(0, 255, 0)
    threshold_color: RGB = RGB(255, 255, 255)
    threshold: float = COLOR_THRESHOLD

    def __post_init__(self) -> None:
        if self.threshold <= 0.0:
            raise ValueError("threshold must be > 0")


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

DEFAULT_BASE_COLOR = RGB(64, 0, 0)
"""Base color used before any HSL triple has been applied."""

DEFAULT_PALETTE = HeightPalette()

CLASSIC_PALETTE = HeightPalette(mid=RGB(255, 0, 0))
"""Brighter neutral red from the first cube-color scheme."""

REGISTERED_PALETTES: dict[str, HeightPalette] = {
    "default": DEFAULT_PALETTE,
    "classic": CLASSIC_PALETTE,
}


def get_palette(name: str) -> HeightPalette:
    """Look up a palette by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_PALETTES:
        valid = ", ".join(sorted(REGISTERED_PALETTES))
        raise ValueError(f"Unknown palette {name!r}; available: {valid}")
    return REGISTERED_PALETTES[key]
