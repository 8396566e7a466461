"""
Deterministic binary serialization.

Every value is written as little-endian IEEE-754 doubles: 24 bytes per
Vector, 48 bytes per accumulator checkpoint. These bytes, never a text
rendering, are what gets hashed to verify that two simulation runs produced
bit-identical state.
"""

import hashlib
import logging
from typing import Iterable, List, Union

from .core import CompensatedAccumulator, STATE_SIZE
from .errors import MalformedEncoding
from .vector import Vector, VECTOR_SIZE

logger = logging.getLogger(__name__)

__all__ = [
    "VECTOR_SIZE",
    "STATE_SIZE",
    "encode_vector",
    "decode_vector",
    "pack_vectors",
    "unpack_vectors",
    "encode_state",
    "decode_state",
    "state_digest",
]


def encode_vector(vector: Vector) -> bytes:
    """Encode one Vector as 24 bytes."""
    return vector.to_bytes()


def decode_vector(data) -> Vector:
    """Decode one 24-byte Vector record."""
    return Vector.from_bytes(data)


def pack_vectors(vectors: Iterable[Vector]) -> bytes:
    """Concatenate the 24-byte encodings of ``vectors`` in order."""
    return b"".join(v.to_bytes() for v in vectors)


def unpack_vectors(data) -> List[Vector]:
    """
    Split a buffer of concatenated 24-byte records into Vectors.

    Args:
        data: Bytes-like object produced by :func:`pack_vectors`

    Returns:
        List of decoded Vectors (empty for an empty buffer)

    Raises:
        MalformedEncoding: If the length is not a multiple of 24 bytes
    """
    try:
        view = memoryview(data).cast("B")
    except TypeError as exc:
        raise MalformedEncoding(
            f"vector stream must be a contiguous bytes-like object, got {type(data).__name__}"
        ) from exc
    if view.nbytes % VECTOR_SIZE:
        raise MalformedEncoding(
            f"vector stream length {view.nbytes} is not a multiple of {VECTOR_SIZE}"
        )
    return [
        Vector.from_bytes(view[offset:offset + VECTOR_SIZE])
        for offset in range(0, view.nbytes, VECTOR_SIZE)
    ]


def encode_state(accumulator: CompensatedAccumulator) -> bytes:
    """Encode the exact accumulator state as a 48-byte checkpoint."""
    return accumulator.to_bytes()


def decode_state(data) -> CompensatedAccumulator:
    """Restore an accumulator from a 48-byte checkpoint."""
    return CompensatedAccumulator.from_bytes(data)


def state_digest(*items: Union[Vector, CompensatedAccumulator],
                 algorithm: str = "sha256") -> str:
    """
    Hash simulation state for cross-machine determinism checks.

    Accumulators contribute their resolved Vector, so two runs that reach
    the same resolved state hash identically even if their internal split
    between sum and compensation differs.

    Args:
        items: Vectors and/or accumulators, hashed in the given order
        algorithm: Any algorithm name accepted by :func:`hashlib.new`

    Returns:
        Hex digest of the concatenated 24-byte encodings
    """
    digest = hashlib.new(algorithm)
    for item in items:
        if isinstance(item, CompensatedAccumulator):
            item = item.resolve()
        digest.update(item.to_bytes())
    logger.debug("Computed %s digest over %d items", algorithm, len(items))
    return digest.hexdigest()
