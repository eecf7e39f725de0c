import pytest

from agent_logging import create_logger
from agents import AgentState, BettingPolicy
from config import PolicyConfig
from game_info import GameInfo

from helpers import snapshot

HIGH_CARD = "2c 5d 9h Js Kd"
PAIR = "2c 2d 5s 9h Kd"
TWO_PAIR = "2c 2d 5s 5h Kd"
TRIPS = "7c 7d 7s 9h Kd"
STRAIGHT = "5c 6d 7h 8s 9d"
FLUSH = "2h 5h 9h Jh Kh"


def _decide(phase, cards, config=None, bet_unit=1, **kwargs):
    data = GameInfo.from_dict(snapshot(phase, cards, **kwargs))
    state = AgentState(id="g1", name="me", bet_unit=bet_unit)
    return BettingPolicy(config).decide(data, state)


def test_first_round_no_hand_checks_when_nobody_has_bet():
    assert _decide("bet-1", HIGH_CARD, point=1000, min_bet=0) == 0


def test_first_round_no_hand_drops_when_bet_exceeds_tenth_of_stack():
    assert _decide("bet-1", HIGH_CARD, point=100, min_bet=11) == -1


def test_first_round_no_hand_calls_small_bets():
    assert _decide("bet-1", HIGH_CARD, point=100, min_bet=10) == 0


@pytest.mark.parametrize("cards", [PAIR, TWO_PAIR, TRIPS])
def test_first_round_made_hand_calls_within_quarter_stack(cards):
    assert _decide("bet-1", cards, point=100, min_bet=25) == 0


@pytest.mark.parametrize("cards", [PAIR, TWO_PAIR, TRIPS])
def test_first_round_made_hand_drops_beyond_quarter_stack(cards):
    assert _decide("bet-1", cards, point=100, min_bet=26) == -1


def test_first_round_straight_raises_by_tier():
    assert _decide("bet-1", STRAIGHT, point=100000, min_bet=0) == 800 * 5


def test_first_round_raise_scales_with_bet_unit():
    assert _decide("bet-1", FLUSH, bet_unit=2, point=100000, min_bet=0) == 2 * 800 * 6


def test_first_round_strong_hand_calls_when_stack_is_covered():
    # owes 200 with only 150 behind
    assert _decide("bet-1", STRAIGHT, point=150, min_bet=200) == 0


@pytest.mark.parametrize("min_bet", [0, 1, 50, 5000])
@pytest.mark.parametrize("point", [0, 100, 100000])
def test_second_round_no_hand_always_drops(min_bet, point):
    assert _decide("bet-2", HIGH_CARD, point=point, min_bet=min_bet) == -1


def test_second_round_pair_calls_with_room():
    assert _decide("bet-2", PAIR, point=400, min_bet=100) == 0


def test_second_round_pair_drops_beyond_quarter_stack():
    assert _decide("bet-2", TWO_PAIR, point=400, min_bet=101) == -1


def test_second_round_pair_drops_when_it_cannot_raise():
    assert _decide("bet-2", PAIR, point=100, min_bet=100) == -1


def test_second_round_trips_raise_when_deep():
    assert _decide("bet-2", TRIPS, point=1500, min_bet=50) == 4000


def test_second_round_trips_call_when_moderate():
    assert _decide("bet-2", TRIPS, point=1500, min_bet=200) == 0


def test_second_round_trips_drop_when_short():
    assert _decide("bet-2", TRIPS, point=1500, min_bet=500) == -1


def test_second_round_strong_hand_raises_fixed_amount():
    assert _decide("bet-2", STRAIGHT, point=100000, min_bet=100) == 15000


def test_second_round_strong_hand_calls_when_it_cannot_raise():
    assert _decide("bet-2", FLUSH, point=100, min_bet=200) == 0


def test_all_in_probability_shoves_remaining_points():
    config = PolicyConfig(all_in_probability=1.0, seed=3)
    assert _decide("bet-2", FLUSH, config=config, point=100, min_bet=200) == 100


def test_thresholds_are_configurable():
    config = PolicyConfig(first_raise_multiplier=10)
    assert _decide("bet-1", STRAIGHT, config=config, point=100000, min_bet=0) == 50


def test_missing_seat_falls_back_to_check_or_drop():
    state = AgentState(id="g1", name="ghost", bet_unit=1)
    open_table = GameInfo.from_dict(snapshot("bet-1", STRAIGHT, min_bet=0))
    facing_bet = GameInfo.from_dict(snapshot("bet-1", STRAIGHT, min_bet=10))
    policy = BettingPolicy()
    assert policy.decide(open_table, state) == 0
    assert policy.decide(facing_bet, state) == -1


def test_logging_does_not_change_decisions():
    logger = create_logger("memory", player_name="me")
    state = AgentState(id="g1", name="me", bet_unit=1)
    for phase, cards, min_bet in [("bet-1", STRAIGHT, 0), ("bet-2", TRIPS, 200), ("bet-1", PAIR, 30)]:
        data = GameInfo.from_dict(snapshot(phase, cards, point=1500, min_bet=min_bet))
        assert BettingPolicy(logger=logger).decide(data, state) == BettingPolicy().decide(data, state)
    assert logger._writer.events
