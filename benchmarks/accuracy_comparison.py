#!/usr/bin/env python3
"""
Accuracy comparison benchmarks for driftsum.

This script integrates constant rates with naive, Kahan and Neumaier
accumulation over increasing step counts and records how far each one
drifts from the exact rational sum.
"""

import numpy as np
import time
import pandas as pd
import matplotlib.pyplot as plt
from typing import Dict, List, Tuple
import sys
sys.path.append('..')

from driftsum import Vector
from driftsum.algorithms import METHODS, exact_scaled_sum, measure_drift
from driftsum.log import setup_logging


class DriftBenchmark:
    """
    Drift benchmark suite for fixed-timestep accumulation.
    """

    def __init__(self, step_counts: List[int] = None):
        self.step_counts = step_counts or [10**2, 10**3, 10**4, 10**5, 10**6]
        self.results = []

    def generate_test_case(self, case_type: str) -> Tuple[Vector, float]:
        """
        Build a (rate, timestep) pair for a named scenario.

        Args:
            case_type: Name of the scenario

        Returns:
            Tuple of (direction, scale)
        """
        if case_type == 'frame_60hz':
            # Unit-ish velocity at 60 frames per second
            return Vector(1.0, 2.0, 3.0), 1.0 / 60.0
        elif case_type == 'physics_240hz':
            # Small rates, fine physics timestep
            return Vector(0.1, -7.3, 1e-4), 1.0 / 240.0
        elif case_type == 'mixed_magnitude':
            # Components spanning many orders of magnitude
            return Vector(1e8, 1.0, 1e-8), 1.0 / 3.0
        elif case_type == 'orbital':
            # Large velocity, tiny timestep
            return Vector(7.8e3, -1.2e3, 3.1e2), 1e-3
        else:
            raise ValueError(f"Unknown test case type: {case_type}")

    def run_single_benchmark(self, test_name: str, steps: int) -> Dict:
        """
        Run every method on one scenario.

        Args:
            test_name: Name of the scenario
            steps: Number of additions

        Returns:
            Dictionary with benchmark results
        """
        direction, scale = self.generate_test_case(test_name)
        exact = exact_scaled_sum(direction, scale, steps)
        magnitude = float(max(abs(c) for c in exact))

        start_time = time.perf_counter()
        errors = measure_drift(direction, scale, steps)
        elapsed_time = time.perf_counter() - start_time

        results = {
            'test_name': test_name,
            'steps': steps,
            'magnitude': magnitude,
            'time': elapsed_time,
        }
        for method in METHODS:
            results[f'{method}_abs_error'] = errors[method]
            results[f'{method}_rel_error'] = errors[method] / magnitude if magnitude else errors[method]
        return results

    def run_comprehensive_benchmark(self) -> pd.DataFrame:
        """
        Run all scenarios at all step counts.

        Returns:
            DataFrame with all benchmark results
        """
        test_cases = ['frame_60hz', 'physics_240hz', 'mixed_magnitude', 'orbital']

        print("Running drift benchmark...")
        print(f"Test cases: {len(test_cases)}")
        print(f"Step counts: {self.step_counts}")
        print()

        for test_name in test_cases:
            for steps in self.step_counts:
                print(f"  {test_name:<16} steps={steps:<10}", end="", flush=True)
                row = self.run_single_benchmark(test_name, steps)
                self.results.append(row)
                print(f"naive={row['naive_rel_error']:.2e} "
                      f"neumaier={row['neumaier_rel_error']:.2e}")

        return pd.DataFrame(self.results)

    def analyze_results(self, df: pd.DataFrame):
        """Print relative error in units of machine epsilon per method."""
        eps = np.finfo(np.float64).eps
        print("\n" + "=" * 60)
        print("RELATIVE ERROR (units of machine epsilon), worst case per step count")
        print("=" * 60)

        summary = df.groupby('steps')[[f'{m}_rel_error' for m in METHODS]].max() / eps
        summary.columns = list(METHODS)
        print(summary.to_string(float_format=lambda v: f"{v:10.2f}"))

    def plot_results(self, df: pd.DataFrame, save_plots: bool = True):
        """Plot worst-case relative error vs step count."""
        plt.figure(figsize=(8, 5))
        for method in METHODS:
            worst = df.groupby('steps')[f'{method}_rel_error'].max()
            plt.plot(worst.index, worst.values, marker='o', label=method)

        plt.axhline(np.finfo(np.float64).eps, color='gray', linestyle='--', label='machine epsilon')
        plt.xlabel('Steps')
        plt.ylabel('Worst relative error')
        plt.title('Accumulated drift vs step count')
        plt.xscale('log')
        plt.yscale('symlog', linthresh=1e-18)
        plt.legend()
        plt.grid(True, alpha=0.3)

        if save_plots:
            plt.savefig('drift_vs_steps.png', dpi=300, bbox_inches='tight')
        plt.show()


def main():
    """Run the drift benchmark suite."""
    setup_logging()

    print("DRIFTSUM - ACCURACY BENCHMARK")
    print("=" * 60)

    benchmark = DriftBenchmark()
    results_df = benchmark.run_comprehensive_benchmark()

    results_df.to_csv('drift_benchmark_results.csv', index=False)
    print(f"\nResults saved to drift_benchmark_results.csv")

    benchmark.analyze_results(results_df)

    try:
        benchmark.plot_results(results_df)
    except Exception as e:
        print(f"\nError creating plots: {e}")

    print("\n" + "=" * 60)
    print("Accuracy benchmark completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
