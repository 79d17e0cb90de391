"""Day 4: scratchcards with winning numbers."""

from collections import deque


def _split_pair(text: str, separator: str, what: str) -> tuple[str, str]:
    parts = text.split(separator)
    if len(parts) != 2:
        raise ValueError(f"malformed {what}: {text!r}")
    return parts[0], parts[1]


def _numbers(field: str) -> list[int]:
    return [int(token) for token in field.split(" ") if token.isascii() and token.isdecimal()]


def card_matches(line: str) -> int:
    """Count how many of the card's numbers are among its winning numbers."""
    _, body = _split_pair(line, ": ", "card")
    winning_field, owned_field = _split_pair(body, " | ", "card numbers")
    winning = set(_numbers(winning_field))
    return sum(1 for number in _numbers(owned_field) if number in winning)


def part1(text: str) -> int:
    """Total points: a card with n matches is worth 2 to the power n - 1."""
    return sum(
        2 ** (matches - 1)
        for matches in map(card_matches, text.splitlines())
        if matches > 0
    )


def part2(text: str) -> int:
    """Total number of cards held once won copies are counted."""
    extra_copies: deque[int] = deque()
    total = 0
    for line in text.splitlines():
        matches = card_matches(line)
        copies = 1 + (extra_copies.popleft() if extra_copies else 0)
        for offset in range(matches):
            if offset < len(extra_copies):
                extra_copies[offset] += copies
            else:
                extra_copies.append(copies)
        total += copies
    return total