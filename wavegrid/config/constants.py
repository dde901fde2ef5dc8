"""Centralized tuning constants for the wave-field engine.

All magic numbers shared between the scalar and vectorised field code live
here. Config dataclasses in ``wavegrid.config.types`` use them as defaults.
"""

from __future__ import annotations

GRID_SIZE = 5
"""Default grid edge length in cells."""

MARGIN = 0
"""Default emitter spawn inset from the grid edges."""

NUM_EMITTERS = 1
"""Default emitter pool size."""

# Mode 1: ambient wave
AMBIENT_WAVE_SPEED = 2.0
"""Angular speed of the ambient wave (rad/s)."""

AMBIENT_AMPLITUDE = 1.0
"""Amplitude applied to the summed per-axis sinusoids."""

AMBIENT_PHASE_X = 0.7
"""Phase step per cell along x."""

AMBIENT_PHASE_Z = 0.9
"""Phase step per cell along z."""

AMBIENT_COORD_SHIFT = 2
"""Offset added to cell coordinates before applying the phase step."""

# Mode 2: radial pulse
PULSE_WAVE_SPEED = 5.0
"""Angular speed of the radial pulse (rad/s)."""

PULSE_SCALE = 1.5
"""Height multiplier applied to the enveloped pulse."""

# Mode 3: per-cell jitter
JITTER_WAVE_SPEED = 12.0
"""Angular speed of the per-cell jitter (rad/s)."""

JITTER_SCALE = 1.0
"""Height multiplier for the jitter product."""

# Mode 4: multi-emitter ripple field
RIPPLE_WAVE_SPEED = 12.0
"""Angular speed of each emitter ripple (rad/s)."""

RIPPLE_RADIUS = 4.0
"""Hard cutoff distance (cells) beyond which an emitter contributes nothing."""

RIPPLE_TIME_DECAY_FACTOR = 1.0
"""Scale on the remaining lifetime used to warp ripple phase."""

RIPPLE_NORMALIZATION_MS = 2000.0
"""Divisor turning remaining lifetime (ms) into the warped time offset."""

RIPPLE_HEIGHT_MULTIPLIER = 1.0
"""Global multiplier applied to the summed ripple height."""

# Emitter lifecycle
RAINDROP_MIN_DURATION_MS = 500.0
RAINDROP_MAX_DURATION_MS = 4000.0
BUBBLE_MIN_DURATION_MS = 1000.0
BUBBLE_MAX_DURATION_MS = 6000.0

EXPIRY_LEAD_MS = 50.0
"""Emitters expire this long before ``due`` so the ripple settles before relocating."""

# Color mapping
COLOR_THRESHOLD = 2.0
"""Absolute height above which a cell is drawn in the saturation color."""

BLEND_PERCENT = 0
"""Default share (percent) of height color mixed over the base color."""

BASE_HUE = 0.5
BASE_SATURATION = 0.5
BASE_LIGHTNESS = 0.5
