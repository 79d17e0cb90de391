"""Day 1: recovering calibration values from lines of text."""

_DIGIT_WORDS = "zero one two three four five six seven eight nine".split()

# Each word keeps its outer letters around the digit, so overlapping words
# such as "eightwo" are both still found after rewriting.
_WORD_REWRITES = tuple(
    (word, f"{word[0]}{value}{word[-1]}") for value, word in enumerate(_DIGIT_WORDS)
)


def _outer_digits(line: str) -> int:
    digits = [char for char in line if char.isnumeric()]
    if not digits:
        raise ValueError(f"no digit in line {line!r}")
    return int(digits[0] + digits[-1])


def first_and_last_digits(line: str) -> int:
    """Return the two-digit number formed by the first and last digit of ``line``."""
    return _outer_digits(line)


def first_and_last_digits_spelled(line: str) -> int:
    """Like :func:`first_and_last_digits`, but spelled-out digits count too."""
    for word, rewrite in _WORD_REWRITES:
        line = line.replace(word, rewrite)
    return _outer_digits(line)


def part1(text: str) -> int:
    """Sum of the calibration values of every line."""
    return sum(map(first_and_last_digits, text.splitlines()))


def part2(text: str) -> int:
    """Sum of the calibration values, reading spelled-out digits as well."""
    return sum(map(first_and_last_digits_spelled, text.splitlines()))