[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aeroplan"
version = "0.1.0"
description = "Geometry, neighbour, geofence and flight-control helpers for octree-based UAV exploration and planning"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "uav",
    "path planning",
    "lazy theta star",
    "octree",
    "geofence",
    "teleoperation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["aeroplan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
