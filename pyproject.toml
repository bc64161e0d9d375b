[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lifegrid"
version = "0.1.0"
description = "Interactive Conway's Game of Life with a toolbar, zoom, pan and light/dark themes"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game-of-life", "conway", "cellular-automaton", "pygame", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lifegrid = "lifegrid.app:main"

[tool.hatch.build.targets.wheel]
packages = ["lifegrid"]

[tool.pytest.ini_options]
addopts = "-ra"
