"""Count the poker hands won by the first player."""

from __future__ import annotations

import argparse
import sys
import time
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

_VALUES = {
    "2": 2, "3": 3, "4": 4, "5": 5, "6": 6, "7": 7, "8": 8, "9": 9,
    "T": 10, "J": 11, "Q": 12, "K": 13, "A": 14,
}
_SUITS = {"S": 1, "C": 2, "H": 3, "D": 4}
_HAND_SIZE = 5
_ACE = 14


class Combination(IntEnum):
    """Poker hand ranks from lowest to highest."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIRS = 2
    THREE_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9


@dataclass(frozen=True)
class Hand:
    """The features of a five-card hand that decide how it ranks."""

    same_suit: bool
    consecutive: bool
    max_value: int
    four_kind: int
    three_kind: int
    pair_high: int
    pair_low: int

    def combination(self) -> Combination:
        """Return the rank of the hand."""
        if self.same_suit and self.consecutive and self.max_value == _ACE:
            return Combination.ROYAL_FLUSH
        if self.same_suit and self.consecutive:
            return Combination.STRAIGHT_FLUSH
        if self.four_kind:
            return Combination.FOUR_KIND
        if self.three_kind and self.pair_low:
            return Combination.FULL_HOUSE
        if self.same_suit:
            return Combination.FLUSH
        if self.consecutive:
            return Combination.STRAIGHT
        if self.three_kind:
            return Combination.THREE_KIND
        if self.pair_high and self.pair_low:
            return Combination.TWO_PAIRS
        if self.pair_low:
            return Combination.ONE_PAIR
        return Combination.HIGH_CARD

    def beats(self, other: Hand) -> bool:
        """Return True if this hand wins against ``other``."""
        mine = self.combination()
        theirs = other.combination()
        if mine != theirs:
            return mine > theirs
        if mine is Combination.FOUR_KIND:
            return self._tie_break(other, "four_kind", "max_value")
        if mine is Combination.FULL_HOUSE:
            return self._tie_break(other, "three_kind", "pair_low")
        if mine is Combination.THREE_KIND:
            return self._tie_break(other, "three_kind", "max_value")
        if mine is Combination.TWO_PAIRS:
            return self._tie_break(other, "pair_high", "pair_low")
        if mine is Combination.ONE_PAIR:
            return self._tie_break(other, "pair_low", "max_value")
        return self.max_value > other.max_value

    def _tie_break(self, other: Hand, primary: str, secondary: str) -> bool:
        first, second = getattr(self, primary), getattr(other, primary)
        if first == second:
            return getattr(self, secondary) > getattr(other, secondary)
        return first > second


def parse_hand(cards: str | Iterable[str]) -> Hand:
    """Build a hand from five cards such as ``"5H 5C 6S 7S KD"``."""
    tokens = cards.split() if isinstance(cards, str) else list(cards)
    if len(tokens) != _HAND_SIZE:
        raise ValueError(f"a hand needs {_HAND_SIZE} cards, got {len(tokens)}")
    values: Counter[int] = Counter()
    suits: Counter[int] = Counter()
    for card in tokens:
        if len(card) != 2 or card[0] not in _VALUES or card[1] not in _SUITS:
            raise ValueError(f"invalid card {card!r}")
        values[_VALUES[card[0]]] += 1
        suits[_SUITS[card[1]]] += 1

    same_suit = _HAND_SIZE in suits.values()
    consecutive = False
    max_value = four_kind = three_kind = pair_high = pair_low = 0
    run = 0
    for value in range(_ACE + 1):
        count = values[value]
        if count:
            max_value = value
            run += 1
        else:
            run = 0
        if run == _HAND_SIZE:
            consecutive = True
            break
        if count == 4:
            four_kind = value
        elif count == 3:
            three_kind = value
        if count == 2:
            if pair_low:
                pair_high = value
            else:
                pair_low = value

    return Hand(
        same_suit=same_suit,
        consecutive=consecutive,
        max_value=max_value,
        four_kind=four_kind,
        three_kind=three_kind,
        pair_high=pair_high,
        pair_low=pair_low,
    )


def count_player_one_wins(lines: Iterable[str]) -> int:
    """Return how many deals of ten cards per line the first player wins.

    Blank lines are skipped.
    """
    wins = 0
    for line in lines:
        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) != 2 * _HAND_SIZE:
            raise ValueError(f"a deal needs {2 * _HAND_SIZE} cards: {line!r}")
        first = parse_hand(tokens[:_HAND_SIZE])
        second = parse_hand(tokens[_HAND_SIZE:])
        wins += first.beats(second)
    return wins


def main(argv: list[str] | None = None) -> int:
    """Read deals from a file and print how many the first player wins."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", nargs="?", default="poker.txt")
    args = parser.parse_args(argv)
    begin = time.perf_counter()
    try:
        with open(args.path, encoding="ascii") as handle:
            answer = count_player_one_wins(handle)
    except OSError as error:
        print(f"cannot open file {args.path!r}: {error}", file=sys.stderr)
        return 1
    elapsed = time.perf_counter() - begin
    print(f"answer = {answer} runtime = {elapsed:f}")
    return 0