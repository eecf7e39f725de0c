"""Read-only game snapshots handed to an agent at every lifecycle hook."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from deck import Card


class Phase:
    START = "start"
    BET_1 = "bet-1"
    DRAW = "draw"
    BET_2 = "bet-2"
    END = "end"

    BETTING = (BET_1, BET_2)


def _pick(data: Mapping, *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return default


@dataclass(frozen=True)
class PlayerRoundState:
    point: int = 0
    bet_point: int = 0
    cards: Tuple[Card, ...] = ()
    hand: str = ""
    status: str = "active"

    def __post_init__(self) -> None:
        if not isinstance(self.cards, tuple):
            object.__setattr__(self, "cards", tuple(self.cards))

    @classmethod
    def from_dict(cls, data: Mapping) -> "PlayerRoundState":
        return cls(
            point=int(_pick(data, "point", default=0) or 0),
            bet_point=int(_pick(data, "betPoint", "bet_point", default=0) or 0),
            cards=tuple(Card.coerce(c) for c in _pick(data, "cards", default=()) or ()),
            hand=str(_pick(data, "hand", default="") or ""),
            status=str(_pick(data, "status", default="active") or "active"),
        )


@dataclass(frozen=True)
class PlayerInfo:
    name: str
    point: int = 0
    status: str = "active"
    round: PlayerRoundState = field(default_factory=PlayerRoundState)

    @classmethod
    def from_dict(cls, name: str, data: Mapping) -> "PlayerInfo":
        return cls(
            name=str(data.get("name", name)),
            point=int(data.get("point", 0) or 0),
            status=str(data.get("status", "active")),
            round=PlayerRoundState.from_dict(data.get("round", {}) or {}),
        )

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.round.cards) if self.round.cards else "[]"
        return (
            f"{self.name}: status={self.status}, point={self.point}, "
            f"betPoint={self.round.bet_point}, cards={cards_str}"
        )


@dataclass(frozen=True)
class GameInfo:
    phase: str
    pot: int = 0
    min_bet_point: int = 0
    current_round: int = 0
    winner: Optional[str] = None
    players: Mapping[str, PlayerInfo] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.players, MappingProxyType):
            # frozen: bypass __setattr__ once to seal the player table
            object.__setattr__(self, "players", MappingProxyType(dict(self.players)))

    @classmethod
    def from_dict(cls, data: Mapping) -> "GameInfo":
        players_data: Mapping = data.get("players", {}) or {}
        players: Dict[str, PlayerInfo] = {
            name: PlayerInfo.from_dict(name, entry) for name, entry in players_data.items()
        }
        return cls(
            phase=str(data.get("phase", "")),
            pot=int(data.get("pot", 0) or 0),
            min_bet_point=int(_pick(data, "minBetPoint", "min_bet_point", default=0) or 0),
            current_round=int(_pick(data, "currentRound", "current_round", default=0) or 0),
            winner=data.get("winner"),
            players=players,
        )

    def player(self, name: str) -> Optional[PlayerInfo]:
        return self.players.get(name)
