"""Simulation layer: session state and per-frame evaluation."""

from wavegrid.simulation.session import FieldSession, Frame, parse_mode

__all__ = [
    "FieldSession",
    "Frame",
    "parse_mode",
]
