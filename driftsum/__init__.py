"""
Drift-free 3D vector accumulation.

A small numeric substrate for long-running deterministic simulations,
implementing Neumaier compensated summation per vector component.

This library provides:
- An immutable Vector value type with bit-exact equality
- CompensatedAccumulator, whose error stays bounded regardless of operation count
- A fixed 24-byte little-endian binary layout for determinism hashing
- Reference summation algorithms and drift measurement
- numpy / torch conversions and an optional pydantic adapter
"""

import logging

from .errors import DriftSumError, MalformedEncoding, DegenerateVector
from .vector import Vector, ZERO, VECTOR_SIZE
from .core import CompensatedAccumulator, neumaier_add, STATE_SIZE
from .encoding import (
    encode_vector,
    decode_vector,
    pack_vectors,
    unpack_vectors,
    encode_state,
    decode_state,
    state_digest,
)
from .algorithms import (
    naive_sum,
    kahan_sum,
    neumaier_sum,
    sum_vectors,
    integrate_constant,
    measure_drift,
)

__version__ = "1.0.0"
__author__ = "driftsum contributors"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DriftSumError",
    "MalformedEncoding",
    "DegenerateVector",
    "Vector",
    "ZERO",
    "VECTOR_SIZE",
    "STATE_SIZE",
    "CompensatedAccumulator",
    "neumaier_add",
    "encode_vector",
    "decode_vector",
    "pack_vectors",
    "unpack_vectors",
    "encode_state",
    "decode_state",
    "state_digest",
    "naive_sum",
    "kahan_sum",
    "neumaier_sum",
    "sum_vectors",
    "integrate_constant",
    "measure_drift",
]
