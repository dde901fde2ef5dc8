"""Color layer: palettes, HSL conversion and height-to-color mapping."""

from wavegrid.color.mapper import hsl_to_rgb, map_height_color, map_height_colors
from wavegrid.color.palette import (
    CLASSIC_PALETTE,
    DEFAULT_BASE_COLOR,
    DEFAULT_PALETTE,
    REGISTERED_PALETTES,
    RGB,
    HeightPalette,
    get_palette,
)

__all__ = [
    "CLASSIC_PALETTE",
    "DEFAULT_BASE_COLOR",
    "DEFAULT_PALETTE",
    "HeightPalette",
    "REGISTERED_PALETTES",
    "RGB",
    "get_palette",
    "hsl_to_rgb",
    "map_height_color",
    "map_height_colors",
]
