[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lifeterm"
version = "0.1.0"
description = "Conway's Game of Life played in the terminal, with mouse editing and adjustable speed"
requires-python = ">=3.10"
dependencies = []
keywords = ["game-of-life", "cellular-automaton", "terminal", "conway", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lifeterm = "lifeterm.app:main"

[tool.hatch.build.targets.wheel]
packages = ["lifeterm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
