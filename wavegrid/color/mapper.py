"""Height-to-color mapping and HSL base-color conversion.

The height color is always blended over the base color: at 0 percent the cell
shows only the base color, at 100 percent only the height color. Heights
beyond the palette threshold are drawn in the threshold color regardless of
the blend.
"""

from __future__ import annotations

import colorsys
import math

import numpy as np

from wavegrid.color.palette import DEFAULT_PALETTE, RGB, HeightPalette


def _round_half_up(value: float) -> int:
    return int(math.floor(value * 255 + 0.5))


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> RGB:
    """Convert an HSL triple in ``[0, 1]`` to an 8-bit RGB color."""
    for name, value in (("hue", hue), ("saturation", saturation), ("lightness", lightness)):
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"{name} must be in [0.0, 1.0]")
    # colorsys orders the arguments hue, lightness, saturation
    red, green, blue = colorsys.hls_to_rgb(hue, lightness, saturation)
    return RGB(_round_half_up(red), _round_half_up(green), _round_half_up(blue))


def _check_blend(blend_percent: float) -> float:
    if not 0.0 <= blend_percent <= 100.0:
        raise ValueError("blend_percent must be in [0, 100]")
    return blend_percent / 100


def _blend_channel(base: int, start: int, end: int, t: float, share: float) -> int:
    return math.floor(base * (1 - share) + (start * (1 - t) + end * t) * share)


def map_height_color(
    height: float,
    blend_percent: float,
    base: RGB,
    palette: HeightPalette = DEFAULT_PALETTE,
) -> RGB:
    """Color for a single height sample."""
    share = _check_blend(blend_percent)
    threshold = palette.threshold
    if abs(height) > threshold:
        return palette.threshold_color
    if height < 0:
        t = 1 - abs(height) / threshold
        start, end = palette.low, palette.mid
    else:
        t = abs(height) / threshold
        start, end = palette.mid, palette.high
    return RGB(
        _blend_channel(base.r, start.r, end.r, t, share),
        _blend_channel(base.g, start.g, end.g, t, share),
        _blend_channel(base.b, start.b, end.b, t, share),
    )


def map_height_colors(
    heights: np.ndarray,
    blend_percent: float,
    base: RGB,
    palette: HeightPalette = DEFAULT_PALETTE,
) -> np.ndarray:
    """Vectorised ``map_height_color``; returns uint8 of shape ``heights.shape + (3,)``."""
    share = _check_blend(blend_percent)
    threshold = palette.threshold
    heights = np.asarray(heights, dtype=np.float64)
    magnitude = np.abs(heights)
    negative = heights < 0
    t = np.where(negative, 1 - magnitude / threshold, magnitude / threshold)
    saturated = magnitude > threshold

    channels = []
    for name in ("r", "g", "b"):
        start = np.where(negative, getattr(palette.low, name), getattr(palette.mid, name))
        end = np.where(negative, getattr(palette.mid, name), getattr(palette.high, name))
        value = np.floor(getattr(base, name) * (1 - share) + (start * (1 - t) + end * t) * share)
        value = np.where(saturated, getattr(palette.threshold_color, name), value)
        channels.append(value)
    return np.stack(channels, axis=-1).astype(np.uint8)
