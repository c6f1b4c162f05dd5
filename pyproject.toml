[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "carpath"
version = "0.1.0"
description = "Reeds-Shepp curves, trajectory smoothing and planning helpers for car-like vehicles"
requires-python = ">=3.10"
dependencies = []
keywords = ["reeds-shepp", "path planning", "motion planning", "trajectory smoothing", "robotics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["carpath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
