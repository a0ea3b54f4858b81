# MIT License (see LICENSE)
"""
Fixed-step driver for sphere simulation.

One step is:
    1. Compute the net force on every body from the current positions
       (drag + external acceleration + optional mutual gravity).
    2. Advance every body by the step time with its own force, holding the
       force constant over the slice (parabolic update, see Body.advance).
    3. Advance scene time.

All forces are computed before any body moves, so gravity always sees
positions from the same instant.

Failure semantics are not transactional. A ZeroMassError on body k leaves
bodies 0..k-1 already advanced for that step; a ZeroDistanceError happens
during the force pass, before any body moves. Steps completed earlier keep
their effect in both cases.
"""
from __future__ import annotations
import logging
from contextlib import nullcontext
from typing import TYPE_CHECKING

from ..errors import NullPointerError, SimulationError, Status
from .forces import net_forces

if TYPE_CHECKING:
    from ..scene import Scene

logger = logging.getLogger(__name__)


def _section(scene: Scene, name: str):
    prof = scene.profiler
    return prof.section(name) if prof else nullcontext()


def check_bodies(scene: Scene) -> None:
    """
    Verify the declared body count matches the attached body storage.

    Raises:
        NullPointerError: If the declared count is negative, or bodies are
                          declared but the storage is absent or shorter
                          than the declared count.
    """
    count = scene.body_count
    if count < 0:
        raise NullPointerError(f"scene declares a negative body count ({count})")
    if count > 0 and scene.bodies is None:
        raise NullPointerError(f"scene declares {count} bodies but has no body storage")
    if scene.bodies is not None and len(scene.bodies) < count:
        raise NullPointerError(
            f"scene declares {count} bodies but storage holds {len(scene.bodies)}"
        )


def step(scene: Scene, step_time: float) -> None:
    """
    Advance the scene by exactly one step.

    Raises:
        ZeroDistanceError: Two bodies coincide with mutual gravity enabled.
        ZeroMassError: A body has zero mass.
    """
    with _section(scene, "forces"):
        forces = net_forces(scene)

    with _section(scene, "advance"):
        for b, f in zip(scene.active_bodies, forces):
            b.advance(step_time, f)

    scene.elapsed_time += step_time


def run(scene: Scene, step_time: float, steps: int) -> Status:
    """
    Advance the scene by a number of fixed steps.

    Stops at the first domain error and reports it. State reached before the
    error is left in place.

    Args:
        scene: Scene to simulate (modified in-place).
        step_time: Duration of each step in seconds.
        steps: Number of steps to perform. 0 is a no-op.

    Returns:
        Status.OK, or the status of the first error encountered.
    """
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")
    if step_time < 0:
        raise ValueError(f"step_time must be non-negative, got {step_time}")

    try:
        check_bodies(scene)
    except NullPointerError as exc:
        logger.warning("Simulation not started: %s", exc)
        return exc.status

    logger.debug(
        "Running %d steps of %g s over %d bodies (t=%g s)",
        steps, step_time, scene.body_count, scene.elapsed_time,
    )
    for k in range(steps):
        try:
            step(scene, step_time)
        except SimulationError as exc:
            logger.warning("Simulation stopped at step %d/%d: %s", k + 1, steps, exc)
            return exc.status

    logger.debug("Run finished at t=%g s", scene.elapsed_time)
    return Status.OK
