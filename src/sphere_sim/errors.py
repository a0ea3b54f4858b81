# MIT License (see LICENSE)
"""
Outcome codes and domain errors for the simulation.

Every domain failure is a caller-input problem detected at the point of use:
  - NullPointerError:  bodies declared but no body storage attached.
  - ZeroDistanceError: two bodies share a centre while mutual gravity is on.
  - ZeroMassError:     a body with mass exactly zero is advanced.

The multi-step driver converts these into a returned Status so a caller can
inspect the outcome and decide whether to keep simulating. Standalone
Body.advance raises them directly.
"""
from __future__ import annotations
from enum import Enum


class Status(Enum):
    """Overall outcome of a simulation call."""
    OK = "ok"
    NULL_POINTER = "null_pointer"
    ZERO_DISTANCE = "zero_distance"
    ZERO_MASS = "zero_mass"

    @property
    def ok(self) -> bool:
        return self is Status.OK


class SimulationError(Exception):
    """
    Base class for errors that abort a simulation step.

    Subclasses set status to the non-OK outcome they stand for.
    """
    status: Status


class NullPointerError(SimulationError):
    status = Status.NULL_POINTER


class ZeroDistanceError(SimulationError):
    status = Status.ZERO_DISTANCE

    def __init__(self, i: int, j: int) -> None:
        super().__init__(f"bodies {i} and {j} share the same position")
        self.pair = (i, j)


class ZeroMassError(SimulationError):
    status = Status.ZERO_MASS
