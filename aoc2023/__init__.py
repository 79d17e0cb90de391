"""Advent of Code 2023 puzzle solutions, a puzzle-site client and a command-line runner."""

__version__ = "0.1.0"