#!/usr/bin/python3

from setuptools import setup, find_packages

LONG_DESC = """
gridspiral walks a 2D integer grid in a spiral around some center.

Coordinates are generated on demand, ring by ring, in order of increasing
distance from the center. Three distance measures are supported:
Chebyshev (square rings), Manhattan (diamonds) and Euclidean (circles,
more or less). Coordinates can be confined to a fixed-width integer type,
in which case they wrap around silently.

gridspiral owns no grid: you apply the coordinates to your own data. A
trio-based search helper is included for walking large areas without
blocking other tasks.
"""

setup(
    name="gridspiral",
    version="0.1.0",
    description="Spiral iterators for 2D integer grids",
    long_description=LONG_DESC,
    author="The gridspiral contributors",
    license="GPLv3 or later",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["trio >= 0.16", "pyyaml"],
    extras_require={
        "test": ["pytest", "pytest-trio"],
    },
    keywords=["spiral", "grid", "iterator", "trio"],
    python_requires=">=3.8",
    classifiers=[
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Framework :: Trio",
    ],
)
