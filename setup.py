#!/usr/bin/env python3
"""
Setup script for driftsum

Builds the pure-Python package for drift-free accumulation of 3D vector
quantities with Neumaier compensated summation.
"""

from pathlib import Path

from setuptools import setup, find_packages

# Package metadata
PACKAGE_NAME = "driftsum"
VERSION = "1.0.0"
DESCRIPTION = "Drift-free compensated accumulation of 3D vectors for deterministic simulations"
AUTHOR = "driftsum contributors"
LICENSE = "MIT"


# Read long description from README
def read_readme():
    readme_path = Path(__file__).parent / "README.md"
    if readme_path.exists():
        with open(readme_path, "r", encoding="utf-8") as f:
            return f.read()
    return DESCRIPTION


# Package requirements
def get_requirements():
    """Get package requirements."""
    base_requirements = [
        "numpy>=1.19.0",
        "torch>=1.9.0",
        "pydantic>=2.7",
    ]

    dev_requirements = [
        "pytest>=6.0",
        "pytest-cov>=2.0",
        "pandas>=1.3",
        "matplotlib>=3.3",
    ]

    return {
        "base": base_requirements,
        "dev": dev_requirements,
    }


def main():
    """Main setup function."""
    requirements = get_requirements()

    setup(
        name=PACKAGE_NAME,
        version=VERSION,
        description=DESCRIPTION,
        long_description=read_readme(),
        long_description_content_type="text/markdown",
        author=AUTHOR,
        license=LICENSE,

        # Package configuration
        packages=find_packages(include=["driftsum", "driftsum.*"]),

        # Dependencies
        install_requires=requirements["base"],
        extras_require={
            "dev": requirements["dev"],
            "test": ["pytest>=6.0", "pytest-cov>=2.0"],
        },
        python_requires=">=3.9",

        classifiers=[
            "Development Status :: 5 - Production/Stable",
            "Intended Audience :: Science/Research",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: MIT License",
            "Programming Language :: Python :: 3",
            "Topic :: Scientific/Engineering :: Mathematics",
            "Topic :: Scientific/Engineering :: Physics",
            "Topic :: Software Development :: Libraries :: Python Modules",
            "Operating System :: OS Independent",
        ],
        keywords=[
            "numerical", "summation", "kahan", "neumaier", "floating-point",
            "precision", "determinism", "simulation",
        ],
        zip_safe=False,
    )


if __name__ == "__main__":
    main()
