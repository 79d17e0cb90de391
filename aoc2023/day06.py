"""Day 6: boat races won by holding the button long enough."""

import math


def count_wins(time: int, distance: int) -> int:
    """Count hold times in ``1..time-1`` whose travelled distance beats ``distance``."""
    half = time // 2
    if half < 1 or half * (time - half) <= distance:
        return 0
    low, high = 1, half
    while low < high:
        middle = (low + high) // 2
        if middle * (time - middle) > distance:
            high = middle
        else:
            low = middle + 1
    return time - 2 * low + 1


def _parse_number(token: str) -> int:
    if not (token.isascii() and token.isdecimal()):
        raise ValueError(f"invalid number: {token!r}")
    return int(token)


def _rows(text: str) -> list[str]:
    rows = [line.split(":")[-1] for line in text.splitlines()]
    if len(rows) < 2:
        raise ValueError("expected a time line and a distance line")
    return rows


def part1(text: str) -> int:
    """Product of the number of ways to win each race."""
    rows = _rows(text)
    times, distances = (
        [_parse_number(token) for token in row.split(" ") if token] for row in rows[:2]
    )
    if len(times) != len(distances):
        raise ValueError("times and distances differ in length")
    return math.prod(count_wins(t, d) for t, d in zip(times, distances))


def part2(text: str) -> int:
    """Ways to win the single race whose numbers ignore the spaces."""
    time, distance = (_parse_number(row.replace(" ", "")) for row in _rows(text)[:2])
    return count_wins(time, distance)