[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2023"
version = "0.1.0"
description = "Solutions to the 2023 Advent of Code puzzles, with a command-line runner that fetches inputs and submits answers"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "aoc", "puzzles", "2023"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2023 = "aoc2023.cli:main"

[tool.hatch.build.targets.sdist]
include = ["aoc2023", "tests"]

[tool.hatch.build.targets.wheel]
packages = ["aoc2023"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
