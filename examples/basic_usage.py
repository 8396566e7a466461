#!/usr/bin/env python3
"""
Basic usage examples for driftsum.

This script integrates constant rates over many fixed timesteps and shows
how plain float accumulation drifts while the compensated accumulator does
not.
"""

import time

# Import the driftsum library
import sys
sys.path.append('..')

from driftsum import (
    CompensatedAccumulator,
    Vector,
    ZERO,
    measure_drift,
    state_digest,
)
from driftsum.log import setup_logging
from driftsum.schema import AccumulatorModel


def demonstrate_position_drift():
    """Integrate a constant velocity at 60 Hz for 100,000 frames."""
    print("=" * 60)
    print("DEMONSTRATION: Position Drift at 60 Hz")
    print("=" * 60)

    velocity = Vector(1.0, 2.0, 3.0)
    dt = 1.0 / 60.0
    frames = 100_000

    position = CompensatedAccumulator()
    naive = ZERO
    for _ in range(frames):
        position.add_scaled(velocity, dt)
        naive = naive + velocity * dt

    expected = Vector(frames / 60, 2 * frames / 60, 3 * frames / 60)
    resolved = position.resolve()

    print(f"Expected:     {expected}")
    print(f"Naive:        {naive}")
    print(f"Compensated:  {resolved}")
    print(f"Naive error:       {(naive - expected).length():.3e}")
    print(f"Compensated error: {(resolved - expected).length():.3e}")
    print()


def demonstrate_cancellation():
    """Large opposing momenta with a small residual."""
    print("=" * 60)
    print("DEMONSTRATION: Cancellation")
    print("=" * 60)

    momentum = CompensatedAccumulator()
    naive = ZERO
    for delta in (Vector(1e16, 1e16, 1e16), Vector(1.0, 1.0, 1.0), Vector(-1e16, -1e16, -1e16)):
        momentum.add(delta)
        naive = naive + delta

    print("Adding [1e16, 1, -1e16] per component")
    print(f"Naive:        {naive}")
    print(f"Compensated:  {momentum.resolve()}")
    print(f"Internal sum: {momentum.sum}")
    print(f"Compensation: {momentum.compensation}")
    print()


def demonstrate_drift_growth():
    """Show naive error growing with step count while compensated error stays flat."""
    print("=" * 60)
    print("DEMONSTRATION: Error vs Step Count")
    print("=" * 60)

    print(f"{'Steps':<10} {'Naive':<14} {'Kahan':<14} {'Neumaier':<14} {'Time (ms)':<10}")
    print("-" * 62)
    for steps in (1_000, 10_000, 100_000):
        start = time.perf_counter()
        errors = measure_drift(Vector(1.0, 2.0, 3.0), 1.0 / 60.0, steps)
        elapsed = (time.perf_counter() - start) * 1000
        print(f"{steps:<10} {errors['naive']:<14.3e} {errors['kahan']:<14.3e} "
              f"{errors['neumaier']:<14.3e} {elapsed:<10.1f}")
    print()


def demonstrate_checkpointing():
    """Checkpoint exact state, restore it, and verify determinism by digest."""
    print("=" * 60)
    print("DEMONSTRATION: Checkpoints and Determinism")
    print("=" * 60)

    acc = CompensatedAccumulator()
    for i in range(1, 1001):
        acc.add_scaled(Vector(0.1, -0.2, 0.3), 1.0 / i)

    checkpoint = acc.to_bytes()
    branch = CompensatedAccumulator.from_bytes(checkpoint)
    for _ in range(1000):
        acc.add(Vector(1e-3, 1e-3, 1e-3))
        branch.add(Vector(1e-3, 1e-3, 1e-3))

    print(f"Checkpoint size: {len(checkpoint)} bytes")
    print(f"Original digest: {state_digest(acc)}")
    print(f"Branch digest:   {state_digest(branch)}")
    print(f"Bit-identical:   {state_digest(acc) == state_digest(branch)}")
    print()

    print("Structured form (debugging only, not for hashing):")
    print(AccumulatorModel.from_accumulator(acc).model_dump_json(indent=2))
    print()


def main():
    """Run all demonstrations."""
    setup_logging()

    print("DRIFTSUM - BASIC USAGE EXAMPLES")
    print("=" * 60)
    print()

    demonstrate_position_drift()
    demonstrate_cancellation()
    demonstrate_drift_growth()
    demonstrate_checkpointing()

    print("=" * 60)
    print("All demonstrations completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
