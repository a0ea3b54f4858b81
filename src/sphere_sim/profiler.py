# MIT License (see LICENSE)
"""
Lightweight timing of simulation phases.

The step driver times its "forces" and "advance" phases whenever a
Profiler is attached to the Scene (or SPHERE_SIM_PROFILE=1 is set).

Example:
    profiler = Profiler()
    scene = Scene(profiler=profiler)
    scene.run(1e-3, 1000)
    print(profiler.stats.summary()["forces"]["mean_ms"])
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ProfileStats:
    """Timing samples (seconds) per named section."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Summarize all recorded sections.

        Returns:
            Dict mapping section name to a dict with keys 'n', 'mean_ms',
            'max_ms' and 'total_ms'.
        """
        out = {}
        for name, times in self.samples.items():
            total = sum(times)
            out[name] = {
                "n": len(times),
                "mean_ms": 1e3 * total / len(times),
                "max_ms": 1e3 * max(times),
                "total_ms": 1e3 * total,
            }
        return out


class Profiler:
    """Collects wall-clock timings for named code sections."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block and record it under name."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)

    def reset(self) -> None:
        self.stats = ProfileStats()
