"""
Bet sizing for five-card draw.

Return encoding shared with the host engine:
    0      check / call
    v > 0  raise by v on top of the table minimum (more than the stack = all-in)
    -1     drop
"""
from __future__ import annotations

from random import Random
from typing import Optional

from agent_logging import AgentLogger, null_logger
from config import PolicyConfig
from game_info import GameInfo, Phase
from hand_evaluator import NO_HAND_TIER, evaluate_hand

from .agent_state import AgentState

CHECK = 0
DROP = -1


class BettingPolicy:
    """Tiered bet/call/drop decisions driven by hand strength and stack depth."""

    def __init__(
        self,
        config: Optional[PolicyConfig] = None,
        logger: Optional[AgentLogger] = None,
        rng: Optional[Random] = None,
    ) -> None:
        self.config = config or PolicyConfig()
        self.logger = logger or null_logger()
        self._random = rng or Random(self.config.seed)

    def decide(self, data: GameInfo, state: AgentState) -> int:
        self.logger.info(
            f"Phase {data.phase}. pot: {data.pot}, minBetPoint: {data.min_bet_point}"
        )
        for player in data.players.values():
            self.logger.debug(
                f"{player.name} info. point: {player.point}, betPoint: {player.round.bet_point}"
            )

        me = data.player(state.name)
        hand_value = evaluate_hand(me.round.cards) if me else 0
        point = me.point if me else 0
        bet_point = me.round.bet_point if me else 0

        diff = data.min_bet_point - bet_point  # owed to match the table
        stack = point - diff  # free to spend after matching
        can_raise = stack > 0

        self.logger.debug(
            f"{state.name} info. point: {point}, betPoint: {bet_point}, "
            f"currentHandValue: {hand_value}"
        )
        self._trace_smallest_stack(data)

        if data.phase == Phase.BET_1:
            return self._first_round(data, state, hand_value, point, can_raise)
        return self._second_round(data, state, hand_value, point, stack, diff, can_raise)

    def _trace_smallest_stack(self, data: GameInfo) -> None:
        funded = [p for p in data.players.values() if p.point > 0]
        if not funded:
            return
        smallest = min(funded, key=lambda p: p.point)
        self.logger.debug(f"Smallest stack: {smallest.name} ({smallest.point})")

    def _first_round(
        self, data: GameInfo, state: AgentState, hand_value: int, point: int, can_raise: bool
    ) -> int:
        cfg = self.config
        min_bet = data.min_bet_point

        if hand_value <= NO_HAND_TIER:
            if not min_bet:
                return CHECK
            if point / cfg.first_fold_divisor < min_bet:
                return DROP
            return CHECK

        if hand_value <= 4:
            if point / cfg.first_call_divisor >= min_bet:
                return CHECK
            return DROP

        if can_raise:
            return state.bet_unit * cfg.first_raise_multiplier * hand_value
        return CHECK

    def _second_round(
        self,
        data: GameInfo,
        state: AgentState,
        hand_value: int,
        point: int,
        stack: int,
        diff: int,
        can_raise: bool,
    ) -> int:
        cfg = self.config
        min_bet = data.min_bet_point

        if hand_value <= NO_HAND_TIER:
            return DROP

        if hand_value <= 3:
            if can_raise and point / cfg.second_call_divisor >= min_bet:
                return CHECK
            return DROP

        if hand_value == 4:
            if point / cfg.second_raise_divisor > min_bet:
                return state.bet_unit * cfg.second_raise_multiplier
            if point / cfg.second_hold_divisor > min_bet:
                return CHECK
            return DROP

        if can_raise:
            return cfg.second_strong_raise

        me = data.player(state.name)
        cards = " ".join(str(c) for c in me.round.cards) if me else "[]"
        self.logger.info(f"my cards: {cards}, diff: {diff}, stack: {stack}")
        if cfg.all_in_probability and self._random.random() < cfg.all_in_probability:
            # anything above the remaining stack is taken as all-in
            return max(point, 0)
        return CHECK
