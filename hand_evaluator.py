# hand_evaluator.py
from typing import Sequence

from treys import Card as TreysCard, Evaluator

from deck import RANKS, Card

evaluator = Evaluator()

# treys rank classes run 1 (straight flush) .. 9 (high card)
_TIER_BY_CLASS = {rank_class: 10 - rank_class for rank_class in range(1, 10)}
ROYAL_FLUSH_TIER = 10
NO_HAND_TIER = 1


def card_to_treys(card: Card) -> int:
    """Convert a Card to Treys internal representation."""
    return TreysCard.new(RANKS[card.number] + card.suit)


def _score(cards: Sequence[Card]) -> int:
    converted = [card_to_treys(c) for c in cards]
    # treys wants a (hand, board) split; any 2/3 split scores the same 5 cards
    return evaluator.evaluate(converted[:2], converted[2:])


def evaluate_hand(cards: Sequence[Card]) -> int:
    """
    Returns the hand tier: higher = stronger, <= 1 means no made hand.
    Hands shorter than five cards score 0.
    """
    if len(cards) < 5:
        return 0
    score = _score(cards[:5])
    if score == 1:
        return ROYAL_FLUSH_TIER
    return _TIER_BY_CLASS[evaluator.get_rank_class(score)]


def hand_label(cards: Sequence[Card]) -> str:
    if len(cards) < 5:
        return ""
    score = _score(cards[:5])
    return evaluator.class_to_string(evaluator.get_rank_class(score))
