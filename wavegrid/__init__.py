"""Procedural wave-field engine for animated cube grids."""
