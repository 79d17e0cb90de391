"""Day 2: games of coloured cubes drawn from a bag."""

import math

MAX_CUBES = {"red": 12, "green": 13, "blue": 14}

Draw = tuple[int, str]


def _split_pair(text: str, separator: str, what: str) -> tuple[str, str]:
    parts = text.split(separator)
    if len(parts) != 2:
        raise ValueError(f"malformed {what}: {text!r}")
    return parts[0], parts[1]


def _parse_count(text: str) -> int:
    if not (text.isascii() and text.isdecimal()):
        raise ValueError(f"invalid number: {text!r}")
    return int(text)


def parse_game(line: str) -> tuple[int, list[list[Draw]]]:
    """Parse ``Game N: a red, b blue; ...`` into the id and its rounds of draws."""
    header, body = _split_pair(line, ": ", "game")
    words = header.split(" ")
    if len(words) < 2:
        raise ValueError(f"missing game id in {header!r}")
    game_id = _parse_count(words[-1])

    rounds = []
    for round_text in body.split("; "):
        draws = []
        for draw in round_text.split(", "):
            count, color = _split_pair(draw, " ", "draw")
            draws.append((_parse_count(count), color))
        rounds.append(draws)
    return game_id, rounds


def _limit(color: str) -> int:
    try:
        return MAX_CUBES[color]
    except KeyError:
        raise ValueError(f"unknown colour: {color!r}") from None


def part1(text: str) -> int:
    """Sum of the ids of games possible with the bag's cube limits."""
    total = 0
    for line in text.splitlines():
        game_id, rounds = parse_game(line)
        if all(
            count <= _limit(color) for draws in rounds for count, color in draws
        ):
            total += game_id
    return total


def part2(text: str) -> int:
    """Sum over games of the product of the fewest cubes of each colour needed."""
    total = 0
    for line in text.splitlines():
        _, rounds = parse_game(line)
        needed = dict.fromkeys(("red", "blue", "green"), 0)
        for draws in rounds:
            for count, color in draws:
                if color in needed:
                    needed[color] = max(needed[color], count)
        total += math.prod(needed.values())
    return total