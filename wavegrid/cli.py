"""CLI entrypoint for headless field simulation.

Runs a ``FieldSession`` on a synthetic clock and prints a JSON summary of the
heights and colors it produced. Settings resolve CLI > ``--config`` file >
built-in default.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

import numpy as np

from wavegrid.config.constants import (
    BASE_HUE,
    BASE_LIGHTNESS,
    BASE_SATURATION,
    BLEND_PERCENT,
    GRID_SIZE,
    MARGIN,
    NUM_EMITTERS,
)
from wavegrid.config.types import BUBBLE_TIMING, RAINDROP_TIMING, GridConfig, SessionConfig
from wavegrid.simulation.session import FieldSession, parse_mode

logger = logging.getLogger(__name__)

TIMING_PRESETS = {"raindrop": RAINDROP_TIMING, "bubble": BUBBLE_TIMING}
"""Emitter lifetime presets selectable with ``--timing``."""

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        return int(raw)
    raise ValueError(f"{key} must be an integer value")


def _coerce_float(raw: object, key: str) -> float:
    """Coerce raw value to float; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a float value")
    if isinstance(raw, (int, float, str)):
        return float(raw)
    raise ValueError(f"{key} must be a float value")


def _coerce_str(raw: object, key: str) -> str:
    if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
        raise ValueError(f"{key} must be a string-coercible value")
    return str(raw)


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_float(
    cli_val: float | None, key: str, file_cfg: dict[str, object], default: float
) -> float:
    return _coerce_float(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run a headless wave-field simulation")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--mode", type=int, default=None)
    parser.add_argument("--grid-size", type=int, default=None)
    parser.add_argument("--margin", type=int, default=None)
    parser.add_argument("--emitters", type=int, default=None)
    parser.add_argument("--timing", type=str, choices=sorted(TIMING_PRESETS), default=None)
    parser.add_argument("--frames", type=int, default=None)
    parser.add_argument("--fps", type=float, default=None)
    parser.add_argument("--start-ms", type=float, default=None)
    parser.add_argument("--blend-percent", type=float, default=None)
    parser.add_argument("--hue", type=float, default=None)
    parser.add_argument("--saturation", type=float, default=None)
    parser.add_argument("--lightness", type=float, default=None)
    parser.add_argument("--palette", type=str, default=None)
    parser.add_argument("--seed", type=int, default=None)
    return parser


def run_simulation(
    session: FieldSession, frames: int, fps: float, start_ms: float
) -> dict[str, object]:
    """Advance ``session`` through ``frames`` evenly spaced frames and summarise them."""
    if frames < 1:
        raise ValueError("frames must be >= 1")
    if fps <= 0.0:
        raise ValueError("fps must be > 0")
    threshold = session.palette.threshold
    minimum = float("inf")
    maximum = float("-inf")
    total = 0.0
    saturated = 0
    respawns = 0
    cells = 0
    implemented = True
    for index in range(frames):
        elapsed = index / fps
        frame = session.frame(elapsed, now=start_ms + elapsed * 1000.0)
        minimum = min(minimum, float(frame.heights.min()))
        maximum = max(maximum, float(frame.heights.max()))
        total += float(frame.heights.sum())
        saturated += int(np.count_nonzero(np.abs(frame.heights) > threshold))
        respawns += len(frame.respawned)
        cells += frame.heights.size
        implemented = frame.implemented
    return {
        "mode": session.mode.value,
        "implemented": implemented,
        "grid_size": session.grid.grid_size,
        "margin": session.grid.margin,
        "emitters": len(session.pool),
        "frames": frames,
        "height_min": minimum,
        "height_max": maximum,
        "height_mean": total / cells,
        "saturated_cells": saturated,
        "respawns": respawns,
        "base_color": list(session.base_color.as_tuple()),
    }


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for headless simulation."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error("Config file must contain a JSON object")
        logger.debug("loaded config file %s", args.config)

    timing_name = _get_str(args.timing, "timing", file_cfg, "raindrop")
    if timing_name not in TIMING_PRESETS:
        parser.error(f"timing must be one of {', '.join(sorted(TIMING_PRESETS))}")

    try:
        config = SessionConfig(
            grid=GridConfig(
                grid_size=_get_int(args.grid_size, "grid_size", file_cfg, GRID_SIZE),
                margin=_get_int(args.margin, "margin", file_cfg, MARGIN),
            ),
            n_emitters=_get_int(args.emitters, "emitters", file_cfg, NUM_EMITTERS),
            mode=parse_mode(_get_int(args.mode, "mode", file_cfg, 1)),
            blend_percent=_get_float(
                args.blend_percent, "blend_percent", file_cfg, BLEND_PERCENT
            ),
            hue=_get_float(args.hue, "hue", file_cfg, BASE_HUE),
            saturation=_get_float(args.saturation, "saturation", file_cfg, BASE_SATURATION),
            lightness=_get_float(args.lightness, "lightness", file_cfg, BASE_LIGHTNESS),
            palette=_get_str(args.palette, "palette", file_cfg, "default"),
            timing=TIMING_PRESETS[timing_name],
        )
        frames = _get_int(args.frames, "frames", file_cfg, 60)
        fps = _get_float(args.fps, "fps", file_cfg, 60.0)
        start_ms = _get_float(args.start_ms, "start_ms", file_cfg, 0.0)
        seed = file_cfg.get("seed") if args.seed is None else args.seed
        session = FieldSession(
            config,
            seed=None if seed is None else _coerce_int(seed, "seed"),
            now=start_ms,
        )
        summary = run_simulation(session, frames=frames, fps=fps, start_ms=start_ms)
    except ValueError as exc:
        parser.error(str(exc))
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
