[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oceanwaves"
version = "1.0.0"
description = "Linear regular ocean wave simulation on a grid, with triangle mesh and ray-intersection geometry"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["waves", "ocean", "simulation", "geometry", "mesh", "hydrodynamics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["oceanwaves"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
