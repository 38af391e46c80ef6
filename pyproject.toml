[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skein"
version = "0.3.0"
description = "Composable system modelling: numeric constraints, component graphs, Euler time stepping and thermal components."
requires-python = ">=3.10"
keywords = [
    "modeling",
    "constraints",
    "component graph",
    "thermal",
    "thermostat",
    "schedule",
    "stratified tank",
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
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["skein"]

[tool.pytest.ini_options]
addopts = "-ra"
