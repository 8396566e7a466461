"""
Core compensated-summation implementations.

This module contains the scalar Neumaier step and the 3D accumulator built
on it. The accumulator keeps a running sum and a separate per-component
compensation; the two are only combined when a snapshot is resolved.
"""

import logging
from typing import Tuple

from .vector import Vector, VECTOR_SIZE, as_byte_view

logger = logging.getLogger(__name__)

STATE_SIZE = 2 * VECTOR_SIZE


def neumaier_add(total: float, compensation: float, value: float) -> Tuple[float, float]:
    """
    Single-step Neumaier (improved Kahan) addition.

    Unlike classic Kahan, the rounding error is recovered from whichever
    operand has the larger magnitude, so an addend that dwarfs the running
    total does not wipe out the correction.

    Args:
        total: Current running sum
        compensation: Current accumulated correction
        value: Value to add

    Returns:
        Tuple of (new_total, new_compensation)
    """
    t = total + value
    if abs(total) >= abs(value):
        correction = (total - t) + value
    else:
        correction = (value - t) + total
    return t, compensation + correction


class CompensatedAccumulator:
    """
    Drift-free accumulator for 3D vector quantities.

    Applies Neumaier compensated summation independently to x, y and z, so
    the error of the resolved total stays within a few ulps of the exact sum
    no matter how many additions are made.

    Instances are plain mutable state for a single owner. There is no
    internal locking; concurrent writers must synchronize externally.

    Attributes:
        sum: Running best-estimate total (read-only)
        compensation: Rounding error not yet captured in ``sum`` (read-only)
    """

    __slots__ = ("_sx", "_sy", "_sz", "_cx", "_cy", "_cz")

    def __init__(self):
        """Initialize an accumulator with zero sum and zero compensation."""
        self._sx = self._sy = self._sz = 0.0
        self._cx = self._cy = self._cz = 0.0

    @classmethod
    def with_initial(cls, initial: Vector) -> "CompensatedAccumulator":
        """Create an accumulator whose running sum starts at ``initial``."""
        acc = cls()
        acc._sx, acc._sy, acc._sz = initial
        return acc

    @classmethod
    def restore(cls, sum: Vector, compensation: Vector) -> "CompensatedAccumulator":
        """
        Rebuild an accumulator from checkpointed state.

        Args:
            sum: Running sum captured from :attr:`sum`
            compensation: Correction captured from :attr:`compensation`

        Returns:
            Accumulator whose future additions match the checkpointed one
        """
        acc = cls()
        acc._sx, acc._sy, acc._sz = sum
        acc._cx, acc._cy, acc._cz = compensation
        logger.debug("Restored accumulator state sum=%r compensation=%r", sum, compensation)
        return acc

    @property
    def sum(self) -> Vector:
        return Vector(self._sx, self._sy, self._sz)

    @property
    def compensation(self) -> Vector:
        return Vector(self._cx, self._cy, self._cz)

    def add(self, delta: Vector):
        """
        Add a vector with Neumaier compensation.

        Args:
            delta: Increment to accumulate
        """
        self._sx, self._cx = neumaier_add(self._sx, self._cx, delta.x)
        self._sy, self._cy = neumaier_add(self._sy, self._cy, delta.y)
        self._sz, self._cz = neumaier_add(self._sz, self._cz, delta.z)

    def add_scaled(self, direction: Vector, scale: float):
        """
        Add ``direction * scale``.

        The multiplication is ordinary, uncompensated float arithmetic. Only
        its result goes through compensated addition.

        Args:
            direction: Vector to scale, e.g. a velocity
            scale: Scalar factor, e.g. a timestep
        """
        self.add(direction * scale)

    def resolve(self) -> Vector:
        """
        Get the compensated total ``sum + compensation``.

        Computed fresh on every call without touching internal state, so it
        can be called every frame without affecting later accuracy.
        """
        return Vector(self._sx + self._cx, self._sy + self._cy, self._sz + self._cz)

    def reset(self):
        """Reset sum and compensation to zero, discarding all accumulated precision."""
        self._sx = self._sy = self._sz = self._cx = self._cy = self._cz = 0.0
        logger.debug("Accumulator reset")

    def copy(self) -> "CompensatedAccumulator":
        """Return an independent accumulator with identical state."""
        return CompensatedAccumulator.restore(self.sum, self.compensation)

    __copy__ = copy

    def to_bytes(self) -> bytes:
        """
        Encode the exact state as 48 bytes: sum then compensation.

        Each half uses the 24-byte little-endian Vector layout. Restoring
        from these bytes continues accumulation bit-for-bit.
        """
        return self.sum.to_bytes() + self.compensation.to_bytes()

    @classmethod
    def from_bytes(cls, data) -> "CompensatedAccumulator":
        """
        Decode a checkpoint produced by :meth:`to_bytes`.

        Raises:
            MalformedEncoding: If ``data`` is not exactly 48 bytes
        """
        view = as_byte_view(data, STATE_SIZE, what="accumulator checkpoint")
        return cls.restore(
            Vector.from_bytes(view[:VECTOR_SIZE]),
            Vector.from_bytes(view[VECTOR_SIZE:]),
        )

    def __repr__(self) -> str:
        return f"CompensatedAccumulator(sum={self.sum!r}, compensation={self.compensation!r})"
