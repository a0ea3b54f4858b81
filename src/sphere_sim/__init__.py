# MIT License (see LICENSE)
"""
sphere_sim - A step-based Newtonian motion simulator for spheres.

Bodies move under a uniform external acceleration, quadratic air drag
relative to a wind field, and optional pairwise gravitation. Each step
computes every body's net force and then advances all bodies along a
constant-acceleration arc.

Main entry points:
    - Scene: Environment parameters and the bodies being simulated.
    - Body: A sphere with mass, position, velocity and derived geometry.
    - Status: Outcome of a simulation run.

Submodules:
    - core: Force model, step driver and conserved quantities.
    - util: 3D vector helpers (length, spherical angles).
    - constants: Physical constants (G, g₀, standard air density, ...).

Example:
    from sphere_sim import Scene, Body

    scene = Scene(air_density=0.0)
    ball = Body(position=(0, 10, 0), velocity=(5, 5, 0), mass=1.0, radius=0.1)
    scene.add_body(ball)
    status = scene.run(step_time=1e-3, steps=1000)
"""
from .constants import G, PI, SPHERE_DRAG_COEFFICIENT, STANDARD_AIR_DENSITY, STANDARD_GRAVITY
from .errors import NullPointerError, SimulationError, Status, ZeroDistanceError, ZeroMassError
from .profiler import Profiler
from .scene import Scene
from .types import Body

__all__ = [
    # Core simulation
    "Scene",
    "Body",
    "Profiler",
    # Outcomes
    "Status",
    "SimulationError",
    "NullPointerError",
    "ZeroDistanceError",
    "ZeroMassError",
    # Constants
    "G",
    "PI",
    "STANDARD_AIR_DENSITY",
    "STANDARD_GRAVITY",
    "SPHERE_DRAG_COEFFICIENT",
]
