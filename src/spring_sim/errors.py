"""Exception types raised by the physics core."""

from __future__ import annotations


class InvalidInput(ValueError):
    """A force or energy function received a non-finite or structurally invalid argument."""


class NumericalDivergence(ArithmeticError):
    """An RK4 stage or result became non-finite.

    Attributes:
        stage: Name of the slope or output that failed the finiteness check.
        value: The offending value.
    """

    def __init__(self, stage: str, value: float) -> None:
        super().__init__(f"Non-finite value at {stage}: {value!r}")
        self.stage = stage
        self.value = value
