[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lifeboard"
version = "0.1.0"
description = "Conway's Game of Life on a 50x50 board in a pygame window, with preset patterns and colour modes"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game-of-life", "cellular-automaton", "conway", "pygame", "simulation"]
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
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lifeboard = "lifeboard.game:main"

[tool.hatch.build.targets.wheel]
packages = ["lifeboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
