[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "musclflow"
version = "0.1.0"
description = "One explicit MUSCL advection step with superbee/minmod limiting for densities on axisymmetric (r, z) grids"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["muscl", "superbee", "minmod", "finite-volume", "advection", "plasma"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest", "numpy"]

[tool.hatch.build.targets.wheel]
packages = ["musclflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
