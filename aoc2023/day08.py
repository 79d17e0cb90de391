"""Day 8: walking a network of nodes by left and right instructions."""

from __future__ import annotations

import functools
import itertools
import math
from collections.abc import Callable, Sequence
from enum import Enum

Network = dict[str, tuple[str, str]]


class Instruction(Enum):
    """Which branch of a node to follow."""

    LEFT = "L"
    RIGHT = "R"


def parse_network(text: str) -> tuple[list[Instruction], Network]:
    """Parse the instruction line and the ``NODE = (LEFT, RIGHT)`` lines."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty input")
    instructions = [Instruction(char) for char in lines[0]]

    network: Network = {}
    for line in lines[1:]:
        if not line:
            continue
        parts = line.split(" = ")
        if len(parts) < 2:
            raise ValueError(f"malformed node line: {line!r}")
        choices = parts[1].split(", ")
        if len(choices) < 2:
            raise ValueError(f"malformed node line: {line!r}")
        network[parts[0]] = (choices[0].replace("(", ""), choices[1].replace(")", ""))
    return instructions, network


def count_steps(
    instructions: Sequence[Instruction],
    network: Network,
    start: str,
    is_end: Callable[[str], bool],
) -> int:
    """Number of steps from ``start`` until ``is_end`` holds, repeating the instructions."""
    directions = itertools.cycle(instructions)
    node, steps = start, 0
    while not is_end(node):
        instruction = next(directions, None)
        if instruction is None:
            raise ValueError("no instructions to follow")
        try:
            left, right = network[node]
        except KeyError:
            raise ValueError(f"unknown node: {node!r}") from None
        node = left if instruction is Instruction.LEFT else right
        steps += 1
    return steps


def part1(text: str) -> int:
    """Steps needed to walk from AAA to ZZZ."""
    instructions, network = parse_network(text)
    return count_steps(instructions, network, "AAA", lambda node: node == "ZZZ")


def part2(text: str) -> int:
    """Steps until every walk from a node ending in A stands on a node ending in Z."""
    instructions, network = parse_network(text)
    starts = [node for node in network if node.endswith("A")]
    return functools.reduce(
        math.lcm,
        (
            count_steps(instructions, network, start, lambda node: node.endswith("Z"))
            for start in starts
        ),
        1,
    )