"""Day 7: ranking Camel Cards hands, with J acting as a wild joker."""

from __future__ import annotations

import functools
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum


class HandType(Enum):
    """Kinds of hand, numbered from strongest (1) to weakest (7)."""

    FIVE_OF_A_KIND = 1
    FOUR_OF_A_KIND = 2
    FULL_HOUSE = 3
    THREE_OF_A_KIND = 4
    TWO_PAIR = 5
    ONE_PAIR = 6
    HIGH_CARD = 7


_FACE_VALUES = {"A": 1, "K": 2, "Q": 3, "J": 16, "T": 5}


def card_value(card: str) -> int:
    """Rank of a single card: lower is stronger, and J is the weakest."""
    if card in _FACE_VALUES:
        return _FACE_VALUES[card]
    if len(card) == 1 and "0" <= card <= "9":
        return 15 - int(card)
    raise ValueError(f"unknown card: {card!r}")


def classify(cards: str) -> HandType:
    """Kind of the hand ``cards``, letting every J stand in for the best card."""
    counts = Counter(cards)
    jokers = counts.get("J", 0)
    distinct = len(counts)

    if distinct == 1:
        return HandType.FIVE_OF_A_KIND
    if distinct == 2:
        if jokers:
            return HandType.FIVE_OF_A_KIND
        first = next(iter(counts.values()))
        return HandType.FOUR_OF_A_KIND if first in (1, 4) else HandType.FULL_HOUSE
    if distinct == 3:
        has_pair = 2 in counts.values()
        if not jokers:
            return HandType.TWO_PAIR if has_pair else HandType.THREE_OF_A_KIND
        if jokers == 1:
            return HandType.FULL_HOUSE if has_pair else HandType.FOUR_OF_A_KIND
        if jokers in (2, 3):
            return HandType.FOUR_OF_A_KIND
        raise ValueError(f"impossible hand: {cards!r}")
    if distinct == 4:
        return HandType.THREE_OF_A_KIND if jokers else HandType.ONE_PAIR
    if distinct == 5:
        return HandType.ONE_PAIR if jokers else HandType.HIGH_CARD
    raise ValueError(f"impossible hand: {cards!r}")


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Hand:
    """A hand of cards, ordered so that a weaker hand compares less."""

    cards: str
    kind: HandType = field(init=False)

    def __post_init__(self) -> None:
        for card in self.cards:
            card_value(card)
        object.__setattr__(self, "kind", classify(self.cards))

    def _compare(self, other: Hand) -> int:
        """Negative when ``self`` is stronger, positive when weaker, zero on a tie."""
        if self.kind is not other.kind:
            return self.kind.value - other.kind.value
        for mine, theirs in zip(self.cards, other.cards):
            difference = card_value(mine) - card_value(theirs)
            if difference:
                return difference
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._compare(other) == 0

    def __lt__(self, other: Hand) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._compare(other) > 0

    __hash__ = None  # type: ignore[assignment]


def _parse_number(token: str) -> int:
    if not (token.isascii() and token.isdecimal()):
        raise ValueError(f"invalid number: {token!r}")
    return int(token)


def total_winnings(text: str) -> int:
    """Sum of each bid multiplied by its hand's rank, the weakest hand ranking 1."""
    entries = []
    for line in text.splitlines():
        fields = line.split(" ")
        if len(fields) < 2:
            raise ValueError(f"expected a hand and a bid: {line!r}")
        entries.append((Hand(fields[0]), _parse_number(fields[1])))

    strongest_first = sorted(entries, key=lambda entry: entry[0], reverse=True)
    return sum(
        rank * bid for rank, (_, bid) in enumerate(reversed(strongest_first), start=1)
    )


def part1(text: str) -> int:
    """Total winnings of the list of hands."""
    return total_winnings(text)


def part2(text: str) -> int:
    """Total winnings of the list of hands, with jokers."""
    return total_winnings(text)