"""Fixed-size pool of transient ripple emitters (raindrops / bubbles).

Every emitter is always active. Once ``now`` reaches
``due - lead_ms`` it is marked complete and, in the same tick, respawned in
place with a new location, duration and due time. Emitters leave the pool
only when the pool is resized.
"""

from __future__ import annotations

import time
from collections.abc import Iterator
from dataclasses import dataclass
from random import Random

from wavegrid.config.types import RAINDROP_TIMING, EmitterTiming, GridConfig
from wavegrid.domain.cell import Cell
from wavegrid.errors import ConfigurationError


def now_ms() -> float:
    """Wall-clock milliseconds since the epoch."""
    return time.time() * 1000.0


def random_cell_in_margin(grid: GridConfig, rng: Random) -> Cell:
    """Uniformly pick a cell with both coordinates in ``grid.spawn_range``."""
    low, high = grid.spawn_range
    return Cell(x=rng.randrange(low, high), z=rng.randrange(low, high))


def random_duration(timing: EmitterTiming, rng: Random) -> float:
    """Uniform lifetime in ``[min_duration_ms, max_duration_ms]``."""
    return rng.uniform(timing.min_duration_ms, timing.max_duration_ms)


@dataclass
class Emitter:
    """A single ripple source. ``due`` is spawn time plus ``duration`` (ms)."""

    location: Cell
    duration: float
    due: float
    complete: bool = False
    generation: int = 0  # number of respawns so far

    def remaining(self, now: float) -> float:
        """Milliseconds left until ``due``; negative once overdue."""
        return self.due - now

    def remaining_fraction(self, now: float) -> float:
        """Remaining share of the lifetime, 1 at spawn falling to 0 at ``due``."""
        return (self.due - now) / self.duration


class EmitterPool:
    """Ordered emitters owned by one simulation session."""

    def __init__(
        self,
        grid: GridConfig,
        timing: EmitterTiming = RAINDROP_TIMING,
        rng: Random | None = None,
    ) -> None:
        self.grid = grid
        self.timing = timing
        self.rng = rng if rng is not None else Random()
        self.emitters: list[Emitter] = []

    @classmethod
    def create(
        cls,
        count: int,
        grid: GridConfig,
        timing: EmitterTiming = RAINDROP_TIMING,
        rng: Random | None = None,
        now: float | None = None,
    ) -> EmitterPool:
        """Build a pool holding ``count`` freshly spawned emitters."""
        pool = cls(grid, timing, rng)
        pool.resize(count, now=now)
        return pool

    def __len__(self) -> int:
        return len(self.emitters)

    def __iter__(self) -> Iterator[Emitter]:
        return iter(self.emitters)

    def __getitem__(self, index: int) -> Emitter:
        return self.emitters[index]

    def spawn(self, now: float) -> Emitter:
        """Create a new active emitter at a random in-margin location."""
        duration = random_duration(self.timing, self.rng)
        return Emitter(
            location=random_cell_in_margin(self.grid, self.rng),
            duration=duration,
            due=now + duration,
        )

    def resize(self, target_count: int, now: float | None = None) -> None:
        """Truncate from the tail or append newly spawned emitters."""
        if target_count < 0:
            raise ConfigurationError("emitter count must be >= 0")
        if target_count < len(self.emitters):
            del self.emitters[target_count:]
            return
        stamp = now_ms() if now is None else now
        for _ in range(target_count - len(self.emitters)):
            self.emitters.append(self.spawn(stamp))

    def mark_expired(self, now: float) -> list[int]:
        """Flag emitters whose ``due - lead_ms`` has passed; return their indices."""
        expired: list[int] = []
        for index, emitter in enumerate(self.emitters):
            if now >= emitter.due - self.timing.lead_ms:
                emitter.complete = True
                expired.append(index)
        return expired

    def respawn_completed(self, now: float) -> list[int]:
        """Restart every complete emitter in place; return the respawned indices."""
        respawned: list[int] = []
        for index, emitter in enumerate(self.emitters):
            if not emitter.complete:
                continue
            emitter.location = random_cell_in_margin(self.grid, self.rng)
            emitter.duration = random_duration(self.timing, self.rng)
            emitter.due = now + emitter.duration
            emitter.complete = False
            emitter.generation += 1
            respawned.append(index)
        return respawned

    def tick(self, now: float) -> list[int]:
        """Age the pool by one frame.

        Expiry is decided for the whole pool before any respawn, so an emitter
        restarted during this tick is not re-tested against its new due time.
        """
        self.mark_expired(now)
        return self.respawn_completed(now)
