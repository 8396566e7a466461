"""
Reference summation algorithms and drift measurement.

This module provides scalar naive, Kahan and Neumaier summation alongside
helpers that integrate a constant vector rate and measure how far each
method drifts from the exact result.
"""

import logging
import math
from fractions import Fraction
from typing import Dict, Iterable, List, Tuple, Union

import numpy as np
import torch

from .core import CompensatedAccumulator, neumaier_add
from .vector import Vector

logger = logging.getLogger(__name__)

METHODS = ("naive", "kahan", "neumaier")


def kahan_add(a: float, b: float, c: float = 0.0) -> Tuple[float, float]:
    """
    Single-step classic Kahan addition.

    Has no magnitude test, so it loses the correction when ``b`` dwarfs the
    running sum. Kept as a baseline for the Neumaier step.

    Args:
        a: Running sum
        b: Value to add
        c: Current compensation term

    Returns:
        Tuple of (new_sum, new_compensation)
    """
    y = b - c
    t = a + y
    new_c = (t - a) - y
    return t, new_c


def _as_floats(values: Union[Iterable[float], torch.Tensor, np.ndarray]) -> List[float]:
    if isinstance(values, torch.Tensor):
        values = values.detach().cpu().double().numpy()
    if isinstance(values, np.ndarray):
        return values.astype(np.float64).ravel().tolist()
    return [float(v) for v in values]


def naive_sum(values: Union[Iterable[float], torch.Tensor, np.ndarray]) -> float:
    """Left-to-right sum with plain float addition."""
    total = 0.0
    for value in _as_floats(values):
        total += value
    return total


def kahan_sum(values: Union[Iterable[float], torch.Tensor, np.ndarray]) -> float:
    """
    Compute sum using classic Kahan compensated summation.

    Args:
        values: Sequence of values to sum

    Returns:
        Compensated sum
    """
    total = 0.0
    c = 0.0
    for value in _as_floats(values):
        total, c = kahan_add(total, value, c)
    return total


def neumaier_sum(values: Union[Iterable[float], torch.Tensor, np.ndarray]) -> float:
    """
    Compute sum using Neumaier compensated summation.

    Args:
        values: Sequence of values to sum

    Returns:
        Sum with the compensation folded in once at the end
    """
    total = 0.0
    compensation = 0.0
    for value in _as_floats(values):
        total, compensation = neumaier_add(total, compensation, value)
    return total + compensation


def sum_vectors(vectors: Iterable[Vector]) -> Vector:
    """Sum Vectors with a :class:`CompensatedAccumulator`."""
    acc = CompensatedAccumulator()
    for vector in vectors:
        acc.add(vector)
    return acc.resolve()


def integrate_constant(direction: Vector, scale: float, steps: int,
                       method: str = "neumaier") -> Vector:
    """
    Repeatedly add ``direction * scale``, as a fixed-rate integrator would.

    Args:
        direction: Rate vector, e.g. a constant velocity
        scale: Step size, e.g. a timestep
        steps: Number of additions
        method: 'naive', 'kahan' or 'neumaier'

    Returns:
        Accumulated Vector
    """
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")

    delta = direction * scale
    if method == "neumaier":
        acc = CompensatedAccumulator()
        for _ in range(steps):
            acc.add(delta)
        return acc.resolve()

    if method == "naive":
        total = Vector.zero()
        for _ in range(steps):
            total = total + delta
        return total

    if method == "kahan":
        components = []
        for value in delta:
            total, c = 0.0, 0.0
            for _ in range(steps):
                total, c = kahan_add(total, value, c)
            components.append(total)
        return Vector(*components)

    raise ValueError(f"Unknown method: {method}")


def exact_scaled_sum(direction: Vector, scale: float, steps: int) -> Tuple[Fraction, Fraction, Fraction]:
    """
    Exact value of ``steps`` additions of the rounded addend ``direction * scale``.

    The addend is rounded to double once, exactly as the accumulator sees it;
    the sum itself is carried out in rational arithmetic.

    Raises:
        ValueError: If the scaled addend has a NaN or infinite component
    """
    delta = direction * scale
    if not all(math.isfinite(component) for component in delta):
        raise ValueError(f"Exact sums need a finite addend, got {delta!r}")
    return tuple(Fraction(component) * steps for component in delta)


def measure_drift(direction: Vector, scale: float, steps: int) -> Dict[str, float]:
    """
    Measure accumulated error of every method against the exact sum.

    Args:
        direction: Rate vector
        scale: Step size
        steps: Number of additions

    Returns:
        Mapping of method name to the largest absolute component error
    """
    exact = exact_scaled_sum(direction, scale, steps)
    errors = {}
    for method in METHODS:
        result = integrate_constant(direction, scale, steps, method=method)
        errors[method] = max(
            float(abs(Fraction(got) - want)) for got, want in zip(result, exact)
        )
    logger.debug("Drift after %d steps: %s", steps, errors)
    return errors
