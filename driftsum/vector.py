"""
Plain 3D vector value type.

Vector carries no error tracking. It is the input to, and the resolved output
of, the compensated accumulator in :mod:`driftsum.core`, and it owns the
fixed 24-byte little-endian binary layout used for determinism checks.
"""

import math
import sys
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from .errors import DegenerateVector, MalformedEncoding

# Three IEEE-754 doubles, x then y then z, little-endian.
LE_FLOAT64 = np.dtype("<f8")
VECTOR_SIZE = 3 * LE_FLOAT64.itemsize


def as_byte_view(data, expected: int, what: str = "buffer") -> memoryview:
    """
    Validate a bytes-like object against a fixed size.

    Args:
        data: Object supporting the buffer protocol
        expected: Required length in bytes
        what: Name used in the error message

    Returns:
        A flat unsigned-byte memoryview over ``data``

    Raises:
        MalformedEncoding: If ``data`` is not bytes-like or has the wrong length
    """
    try:
        view = memoryview(data).cast("B")
    except TypeError as exc:
        raise MalformedEncoding(
            f"{what} must be a contiguous bytes-like object, got {type(data).__name__}"
        ) from exc
    if view.nbytes != expected:
        raise MalformedEncoding(
            f"{what} must be exactly {expected} bytes, got {view.nbytes}"
        )
    return view


def _ieee_div(numerator: float, denominator: float) -> float:
    # Python raises on x / 0.0; IEEE-754 gives +-inf or nan.
    if denominator != 0.0:
        return numerator / denominator
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


@dataclass(frozen=True, eq=False)
class Vector:
    """
    Immutable triple of double-precision components.

    Components are not validated: NaN and infinities pass through every
    operation under the usual IEEE-754 rules. Equality and hashing work on
    the raw bit patterns, so ``Vector(-0.0, 0, 0) != Vector(0.0, 0, 0)`` and
    a NaN compares equal to a NaN with the same payload.

    Attributes:
        x: First component
        y: Second component
        z: Third component
    """

    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> "Vector":
        """Return the zero vector."""
        return cls(0.0, 0.0, 0.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> "Vector":
        if isinstance(scalar, Vector):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector":
        if isinstance(scalar, Vector):
            return NotImplemented
        return Vector(
            _ieee_div(self.x, scalar),
            _ieee_div(self.y, scalar),
            _ieee_div(self.z, scalar),
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def scale(self, scalar: float) -> "Vector":
        """Multiply every component by ``scalar``."""
        return self * scalar

    def dot(self, other: "Vector") -> float:
        """Euclidean dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector") -> "Vector":
        """Right-handed cross product ``self x other``."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        """Squared Euclidean length (no square root)."""
        return self.dot(self)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    magnitude_squared = length_squared
    magnitude = length

    def normalize(self) -> "Vector":
        """
        Return the unit vector pointing along ``self``.

        Vectors whose squared length falls below the smallest normal double
        or overflows to infinity are rescaled by their largest component
        first, so tiny and huge finite vectors still normalize. NaN
        components propagate.

        Returns:
            Unit-length Vector

        Raises:
            DegenerateVector: If every component is zero
        """
        length_squared = self.length_squared()
        if length_squared < sys.float_info.min or math.isinf(length_squared):
            largest = max(abs(self.x), abs(self.y), abs(self.z))
            if largest == 0.0:
                raise DegenerateVector("cannot normalize a zero-length vector")
            if math.isfinite(largest):
                rescaled = self / largest
                return rescaled / rescaled.length()
        return self / math.sqrt(length_squared)

    def to_bytes(self) -> bytes:
        """
        Encode as 24 bytes: x, y, z as little-endian IEEE-754 doubles.

        This is the only representation to hash when comparing simulation
        state across machines. Text formatting collapses ``-0.0`` and NaN
        payloads and must not be used for that.
        """
        return np.array((self.x, self.y, self.z), dtype=LE_FLOAT64).tobytes()

    @classmethod
    def from_bytes(cls, data) -> "Vector":
        """
        Decode the 24-byte layout produced by :meth:`to_bytes`.

        Every bit pattern is a valid double, so any 24-byte input decodes.

        Args:
            data: bytes, bytearray, memoryview or other contiguous buffer

        Returns:
            The decoded Vector, bit-identical to the encoded one

        Raises:
            MalformedEncoding: If ``data`` is not exactly 24 bytes
        """
        view = as_byte_view(data, VECTOR_SIZE, what="Vector encoding")
        x, y, z = np.frombuffer(view, dtype=LE_FLOAT64).tolist()
        return cls(x, y, z)


ZERO = Vector.zero()
