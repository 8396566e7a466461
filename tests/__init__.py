"""
Test suite for driftsum.

Test Structure:
- test_vector.py: Vector arithmetic, normalization and bitwise equality
- test_core.py: Neumaier step and CompensatedAccumulator
- test_encoding.py: Binary layout, checkpoints and determinism digests
- test_algorithms.py: Reference summations and drift measurement
- test_interop.py: numpy / torch conversions
- test_schema.py: pydantic adapter
- test_log.py: logging setup
- conftest.py: Shared fixtures and configuration

Usage:
    # Run all tests
    pytest

    # Run tests with coverage
    pytest --cov=driftsum

    # Skip the long-horizon drift runs
    pytest -m "not slow"
"""
