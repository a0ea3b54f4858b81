# MIT License (see LICENSE)
"""
The simulation scene.

The Scene holds the environment shared by every body and the bodies
themselves. It does not compute dynamics; stepping is delegated to
core.integrators.

Structure:
    - User creates a Scene with environment parameters.
    - User adds bodies via add_body() (or attaches an existing list).
    - User calls scene.run(step_time, steps) and checks the returned Status.
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .constants import STANDARD_AIR_DENSITY, STANDARD_GRAVITY
from .core import integrators
from .errors import Status
from .profiler import Profiler
from .types import Body
from .util import f64, profiling_enabled


@dataclass
class Scene:
    """
    Simulation environment and body collection.

    Attributes:
        air_density: Density of the medium in kg/m³ (0 = vacuum, no drag).
        external_acceleration: Uniform acceleration [ax, ay, az] in m/s²
                               applied to every body regardless of mass.
        wind: Air velocity [wx, wy, wz] in m/s. Drag acts on velocity
              relative to this.
        mutual_gravity: Enable pairwise Newtonian attraction (O(N²) per step).
        elapsed_time: Simulated seconds since construction. Only grows.
        bodies: Simulated bodies, or None when no storage is attached.
                The list is referenced, not copied.
        declared_count: Number of bodies the caller declares. Defaults to
                        len(bodies). Must not exceed the attached storage.
        profiler: Optional Profiler timing the "forces" and "advance" phases.
    """
    air_density: float = STANDARD_AIR_DENSITY
    external_acceleration: np.ndarray | tuple[float, float, float] = (0.0, -STANDARD_GRAVITY, 0.0)
    wind: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    mutual_gravity: bool = False
    elapsed_time: float = 0.0
    bodies: list[Body] | None = field(default_factory=list)
    declared_count: int | None = None
    profiler: Profiler | None = None

    def __post_init__(self) -> None:
        self.external_acceleration = f64(self.external_acceleration)
        self.wind = f64(self.wind)
        if self.profiler is None and profiling_enabled():
            self.profiler = Profiler()
        self._next_id = 1
        for b in self.bodies or []:
            if b.id < 0:
                self._assign_id(b)

    def _assign_id(self, body: Body) -> None:
        body.id = self._next_id
        self._next_id += 1

    @property
    def body_count(self) -> int:
        """Declared number of bodies taking part in the simulation."""
        if self.declared_count is not None:
            return self.declared_count
        return len(self.bodies) if self.bodies is not None else 0

    @property
    def active_bodies(self) -> list[Body]:
        """The first body_count bodies of the attached storage."""
        if self.bodies is None or self.body_count < 0:
            return []
        return self.bodies[:self.body_count]

    def add_body(self, body: Body) -> int:
        """
        Add a body to the simulation.

        Assigns a unique ID to the body. If a declared count is set the body
        is placed right after the declared bodies and the count grows by one,
        so the new body is always simulated.

        Returns:
            The assigned body ID.
        """
        if self.bodies is None:
            self.bodies = []
        self._assign_id(body)
        if self.declared_count is None:
            self.bodies.append(body)
        else:
            self.bodies.insert(self.declared_count, body)
            self.declared_count += 1
        return body.id

    def step(self, step_time: float) -> Status:
        """Advance the scene by one step. See run()."""
        return integrators.run(self, step_time, 1)

    def run(self, step_time: float, steps: int) -> Status:
        """
        Advance the scene by a number of fixed steps.

        Returns:
            Status.OK, or the first error that stopped the run. Progress made
            before the error is kept.
        """
        return integrators.run(self, step_time, steps)
