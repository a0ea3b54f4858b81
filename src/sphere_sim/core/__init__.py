# MIT License (see LICENSE)
"""
Core simulation components.

This subpackage provides:
    - Force model: drag, external acceleration, mutual gravity.
    - Step driver: fixed-step parabolic integration of a Scene.
    - Invariants: energy and momentum for verification.

Typical usage:
    from sphere_sim.core import run

    status = run(scene, step_time=1e-3, steps=1000)
"""
from .forces import (
    drag_force,
    external_force,
    mutual_gravity_forces,
    net_forces,
)
from .integrators import check_bodies, run, step
from .invariants import gravitational_potential_energy, kinetic_energy, linear_momentum

__all__ = [
    # Forces
    "drag_force",
    "external_force",
    "mutual_gravity_forces",
    "net_forces",
    # Driver
    "check_bodies",
    "run",
    "step",
    # Invariants
    "kinetic_energy",
    "linear_momentum",
    "gravitational_potential_energy",
]
