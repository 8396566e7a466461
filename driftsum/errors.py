"""
Exception types raised by driftsum.

The numeric core is pure computation, so the taxonomy is narrow: only
decoding a binary buffer and normalizing a zero-length vector can fail.
"""


class DriftSumError(Exception):
    """Base class for all driftsum errors."""


class MalformedEncoding(DriftSumError, ValueError):
    """A byte buffer does not match the fixed little-endian binary layout."""


class DegenerateVector(DriftSumError, ArithmeticError):
    """Normalization was requested for a zero-length vector."""
