"""Day 9: extrapolating sequences by repeated differences."""

from collections.abc import Iterable


def _differences(values: list[int]) -> list[int]:
    return [current - previous for previous, current in zip(values, values[1:])]


def _settled(values: list[int]) -> bool:
    return len(values) == 1 or (bool(values) and all(value == 0 for value in values))


def extrapolate_forward(values: Iterable[int]) -> int:
    """Next value of the sequence, found from the last values of its differences."""
    sequence = list(values)
    if not sequence:
        raise ValueError("cannot extrapolate an empty sequence")
    total = 0
    while not _settled(sequence):
        total += sequence[-1]
        sequence = _differences(sequence)
    return total


def extrapolate_backward(values: Iterable[int]) -> int:
    """Value preceding the sequence, found from the first values of its differences."""
    sequence = list(values)
    if not sequence:
        raise ValueError("cannot extrapolate an empty sequence")
    total = 0
    sign = 1
    while not _settled(sequence):
        total += sign * sequence[0]
        sign = -sign
        sequence = _differences(sequence)
    return total


def _parse_line(line: str) -> list[int]:
    return [int(token) for token in line.split(" ")]


def part1(text: str) -> int:
    """Sum of the next value of every sequence."""
    return sum(extrapolate_forward(_parse_line(line)) for line in text.splitlines())


def part2(text: str) -> int:
    """Sum of the preceding value of every sequence."""
    return sum(extrapolate_backward(_parse_line(line)) for line in text.splitlines())