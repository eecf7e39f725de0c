# agents/card_hold.py
"""
Draw-phase exchange heuristic.

Rules run in priority order and the first one that holds anything wins:
pairs, then four-to-a-flush, then four-to-a-straight. Everything not held
is exchanged.
"""
from __future__ import annotations

from collections import Counter
from typing import List, Sequence, Set

STRAIGHT_WINDOW = 4


def _adjacent_pairs(cards: Sequence) -> Set[int]:
    # neighbours in hand order only; 3-x-3 is not a pair here
    held: Set[int] = set()
    for i in range(1, len(cards)):
        if cards[i].number == cards[i - 1].number:
            held.update((i - 1, i))
    return held


def _any_pairs(cards: Sequence) -> Set[int]:
    counts = Counter(card.number for card in cards)
    return {i for i, card in enumerate(cards) if counts[card.number] >= 2}


def _four_flush(cards: Sequence) -> Set[int]:
    suit_count: Counter = Counter()
    flush_suit = None
    for card in cards:
        suit_count[card.suit] += 1
        if suit_count[card.suit] >= 4:
            flush_suit = card.suit
    if flush_suit is None:
        return set()
    return {i for i, card in enumerate(cards) if card.suit == flush_suit}


def _four_straight(cards: Sequence) -> Set[int]:
    held: Set[int] = set()
    for i in range(max(0, len(cards) - (STRAIGHT_WINDOW - 1))):
        base = cards[i].number
        if all(cards[i + k].number == base + k for k in range(1, STRAIGHT_WINDOW)):
            held.update(range(i, i + STRAIGHT_WINDOW))
    return held


def select_exchange(cards: Sequence, pair_scan: str = "adjacent") -> List[bool]:
    """Return one flag per card, True meaning "exchange this card".

    The input is never modified; hold markers live in a local index set.
    """
    held: Set[int] = set()
    handled = False

    held |= _adjacent_pairs(cards) if pair_scan == "adjacent" else _any_pairs(cards)
    if held:
        handled = True

    if not handled:
        held |= _four_flush(cards)
        handled = bool(held)

    if not handled:
        # final pass: the hand counts as resolved whether or not a window matched
        held |= _four_straight(cards)

    return [i not in held for i in range(len(cards))]


def held_cards(cards: Sequence, pair_scan: str = "adjacent") -> List:
    return [card for card, swap in zip(cards, select_exchange(cards, pair_scan)) if not swap]
