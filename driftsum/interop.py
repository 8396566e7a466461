"""
Conversions between Vector and numpy / torch containers.

Simulation code often keeps per-tick rates in arrays or tensors. These
helpers move values across that boundary in float64 and feed rows into an
accumulator one compensated addition at a time.
"""

import logging
from typing import Optional, Sequence, Union

import numpy as np
import torch

from .core import CompensatedAccumulator
from .vector import Vector

logger = logging.getLogger(__name__)

ArrayLike = Union[Sequence[Sequence[float]], np.ndarray, torch.Tensor]


def vector_to_array(vector: Vector) -> np.ndarray:
    """Return a float64 array of shape (3,)."""
    return np.array((vector.x, vector.y, vector.z), dtype=np.float64)


def vector_from_array(array) -> Vector:
    """
    Build a Vector from a length-3 array.

    Raises:
        ValueError: If the array does not have shape (3,)
    """
    array = np.asarray(array, dtype=np.float64)
    if array.shape != (3,):
        raise ValueError(f"Expected shape (3,), got {array.shape}")
    return Vector(*array.tolist())


def vector_to_tensor(vector: Vector, device=None) -> torch.Tensor:
    """Return a float64 tensor of shape (3,) on ``device``."""
    return torch.tensor((vector.x, vector.y, vector.z), dtype=torch.float64, device=device)


def vector_from_tensor(tensor: torch.Tensor) -> Vector:
    """
    Build a Vector from a length-3 tensor on any device.

    Raises:
        ValueError: If the tensor does not have shape (3,)
    """
    if tuple(tensor.shape) != (3,):
        raise ValueError(f"Expected shape (3,), got {tuple(tensor.shape)}")
    return Vector(*tensor.detach().cpu().double().tolist())


def _as_rows(rows: ArrayLike) -> np.ndarray:
    if isinstance(rows, torch.Tensor):
        rows = rows.detach().cpu().double().numpy()
    rows = np.asarray(rows, dtype=np.float64)
    if rows.shape == (0,):
        return rows.reshape(0, 3)
    if rows.ndim != 2 or rows.shape[1] != 3:
        raise ValueError(f"Expected shape (N, 3), got {rows.shape}")
    return rows


def accumulate_rows(accumulator: CompensatedAccumulator, rows: ArrayLike,
                    scale: Optional[float] = None) -> CompensatedAccumulator:
    """
    Feed each row of an (N, 3) container into ``accumulator`` in order.

    Rows are added one at a time with the same compensated update as
    :meth:`CompensatedAccumulator.add`; nothing is pre-summed.

    Args:
        accumulator: Accumulator to update in place
        rows: List of triples, ndarray or tensor of shape (N, 3)
        scale: If given, each row is added via ``add_scaled(row, scale)``

    Returns:
        The same accumulator, for chaining
    """
    rows = _as_rows(rows)
    for x, y, z in rows.tolist():
        if scale is None:
            accumulator.add(Vector(x, y, z))
        else:
            accumulator.add_scaled(Vector(x, y, z), scale)
    logger.debug("Accumulated %d rows", len(rows))
    return accumulator
