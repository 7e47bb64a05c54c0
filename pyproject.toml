[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toposwarm"
version = "0.1.0"
description = "Contact-event recording and random velocity commands for a simulated robot swarm"
requires-python = ">=3.10"
dependencies = []
keywords = ["swarm", "robotics", "simulation", "contact", "bumper", "velocity"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["toposwarm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
