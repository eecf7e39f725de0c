import pytest

from deck import parse_hand
from hand_evaluator import NO_HAND_TIER, evaluate_hand, hand_label


@pytest.mark.parametrize(
    "text, tier",
    [
        ("2c 5d 9h Js Kd", 1),
        ("2c 2d 5s 9h Kd", 2),
        ("2c 2d 5s 5h Kd", 3),
        ("7c 7d 7s 9h Kd", 4),
        ("5c 6d 7h 8s 9d", 5),
        ("2h 5h 9h Jh Kh", 6),
        ("7c 7d 7s 9h 9d", 7),
        ("3c 3d 3s 3h 7d", 8),
        ("5h 6h 7h 8h 9h", 9),
        ("Tc Jc Qc Kc Ac", 10),
    ],
)
def test_tiers_increase_with_hand_strength(text, tier):
    assert evaluate_hand(parse_hand(text)) == tier


def test_short_hand_scores_zero():
    assert evaluate_hand(parse_hand("2c 2d")) == 0
    assert hand_label(parse_hand("2c 2d")) == ""


def test_hand_label_names_the_class():
    assert hand_label(parse_hand("2c 2d 5s 9h Kd")) == "Pair"


def test_high_card_is_the_no_hand_tier():
    assert evaluate_hand(parse_hand("2c 5d 9h Js Kd")) == NO_HAND_TIER
