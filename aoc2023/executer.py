"""Dispatching a day and part of the puzzle calendar to its solver."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from aoc2023 import day01, day02, day04, day05, day06, day07, day08, day09

FIRST_DAY = 1
LAST_DAY = 25
PARTS = (1, 2)

_SOLVERS: dict[tuple[int, int], Callable[[str], object]] = {
    (1, 1): day01.part1,
    (1, 2): day01.part2,
    (2, 1): day02.part1,
    (2, 2): day02.part2,
    (4, 1): day04.part1,
    (4, 2): day04.part2,
    (5, 1): day05.part1,
    (6, 1): day06.part1,
    (6, 2): day06.part2,
    (7, 1): day07.part1,
    (7, 2): day07.part2,
    (8, 1): day08.part1,
    (8, 2): day08.part2,
    (9, 1): day09.part1,
    (9, 2): day09.part2,
}


def _unsolved(text: str) -> str:
    return ""


def _check(day: int, part: int) -> None:
    if not FIRST_DAY <= day <= LAST_DAY or part not in PARTS:
        raise ValueError(f"invalid day or part: day {day} part {part}")


def solve(day: int, part: int, text: str) -> str:
    """Answer to ``part`` of ``day`` for the puzzle input ``text``.

    Puzzles without a solver answer with an empty string.
    """
    _check(day, part)
    return str(_SOLVERS.get((day, part), _unsolved)(text))


def execute_day(day: int, part: int, input_dir: str | Path = "input") -> str:
    """Read ``day<N>.txt`` from ``input_dir`` and solve the requested part."""
    _check(day, part)
    text = (Path(input_dir) / f"day{day}.txt").read_text(encoding="utf-8")
    return solve(day, part, text)