"""
Setup script for the airline-seats package.

Public API lives in airline_seats/ (game.py, state.py, config.py,
rng.py, errors.py, types.py); game mechanics live in the internal
airline_seats._core package.
"""

from setuptools import setup, find_packages

setup(
    name="airline-seats",
    version="1.0.0",
    description="Airline Seats - a replayable multi-player seat buying and pricing game",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "numpy>=1.24",
        "pydantic>=2.5.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
        "dev": [
            "pytest>=7.4.0",
            "build",
            "wheel",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Education",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
