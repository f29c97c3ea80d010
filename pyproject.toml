[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mathpuzzles"
version = "0.1.0"
description = "Solvers, enumerations and Monte Carlo simulations for short recreational mathematics puzzles"
requires-python = ">=3.10"
dependencies = [
    "mpmath",
]
keywords = [
    "mathematics",
    "puzzles",
    "combinatorics",
    "probability",
    "monte-carlo",
    "number-theory",
    "numerical-integration",
    "arbitrary-precision",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["mathpuzzles"]

[tool.hatch.build.targets.sdist]
include = [
    "mathpuzzles",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
