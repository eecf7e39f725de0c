# agents/draw_poker_agent.py
from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Union

from agent_logging import AgentLogger, null_logger
from config import PolicyConfig
from game_info import GameInfo

from .agent_state import AgentState
from .betting_policy import BettingPolicy
from .card_hold import select_exchange

Snapshot = Union[GameInfo, Mapping]


class PhaseOrderError(RuntimeError):
    """A lifecycle hook arrived out of the start/bet/draw/bet/end order."""


class DrawPokerAgent:
    """
    Five-card-draw seat driven by the host engine.

    Per round the host calls start -> bet (one or more) -> draw -> bet -> end,
    each with a fresh GameInfo snapshot. The agent may read every player's
    data but only acts for its own seat.
    """

    # hook -> lifecycle states it may be called from
    _ALLOWED = {
        "start": {"idle", "ended"},
        "bet": {"started", "betting-1", "drawn", "betting-2"},
        "draw": {"started", "betting-1"},
        "end": {"started", "betting-1", "drawn", "betting-2"},
    }

    def __init__(
        self,
        game_id: str,
        name: str,
        *,
        config: Optional[PolicyConfig] = None,
        logger: Optional[AgentLogger] = None,
    ) -> None:
        self.config = config or PolicyConfig()
        self.logger = logger or null_logger()
        self.state = AgentState(id=game_id, name=name)
        self.lifecycle = "idle"
        self.betting = BettingPolicy(self.config, self.logger)

        self.logger.info(f"Start game. ID: {game_id}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.state.name})"

    # ------------------------------------------------------------------
    # Host-facing hooks
    # ------------------------------------------------------------------

    def start(self, data: Snapshot) -> None:
        data = self._coerce(data)
        self._advance("start", "started")
        self.state.round = data.current_round
        self.logger.round = data.current_round
        self.logger.info("Round start.")

        for player in data.players.values():
            self.logger.debug(
                f"Round start. {player.name} info. status: {player.status}, point: {player.point}"
            )

        self.state.bet_unit = self.config.bet_unit
        self.logger.debug(f"bet unit: {self.state.bet_unit}.")

    def bet(self, data: Snapshot) -> int:
        data = self._coerce(data)
        after_draw = self.lifecycle in ("drawn", "betting-2")
        self._advance("bet", "betting-2" if after_draw else "betting-1")
        return self.betting.decide(data, self.state)

    def draw(self, data: Snapshot) -> List[bool]:
        data = self._coerce(data)
        self._advance("draw", "drawn")
        me = data.player(self.state.name)
        cards = me.round.cards if me else ()
        self.logger.info(
            f"phase: {data.phase}. my cards: {' '.join(str(c) for c in cards) or '[]'}"
        )
        return select_exchange(cards, self.config.pair_scan)

    def end(self, data: Snapshot) -> None:
        data = self._coerce(data)
        self._advance("end", "ended")
        self.logger.info(f"Round end. winner: {data.winner}")

        for player in data.players.values():
            cards = " ".join(str(c) for c in player.round.cards) or "[]"
            self.logger.debug(
                f"Round end. {player.name} info. status: {player.status}, "
                f"point: {player.point}, cards: {cards}, hand: {player.round.hand}"
            )

        if data.winner == self.state.name:
            self.state.win += 1
            self.logger.debug(f"Win count: {self.state.win}")

    def test(self) -> Dict:
        """Read-only snapshot of the agent's counters."""
        return self.state.snapshot()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _coerce(data: Snapshot) -> GameInfo:
        if isinstance(data, GameInfo):
            return data
        return GameInfo.from_dict(data)

    def _advance(self, hook: str, target: str) -> None:
        if self.config.strict_phases and self.lifecycle not in self._ALLOWED[hook]:
            raise PhaseOrderError(
                f"{hook}() called in state {self.lifecycle!r} for {self.state.name}"
            )
        self.lifecycle = target
