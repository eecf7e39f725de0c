"""Snapshot builders shared by the agent tests."""
from __future__ import annotations

from typing import Dict, Optional


def player_entry(name: str, cards: str, point: int = 1000, bet_point: int = 0, status: str = "active") -> Dict:
    return {
        "name": name,
        "point": point,
        "status": status,
        "round": {
            "point": point,
            "betPoint": bet_point,
            "cards": cards.split(),
            "hand": "",
            "status": status,
        },
    }


def snapshot(
    phase: str,
    cards: str,
    *,
    name: str = "me",
    point: int = 1000,
    bet_point: int = 0,
    min_bet: int = 0,
    pot: int = 0,
    current_round: int = 1,
    winner: Optional[str] = None,
) -> Dict:
    return {
        "phase": phase,
        "pot": pot,
        "minBetPoint": min_bet,
        "currentRound": current_round,
        "winner": winner,
        "players": {
            name: player_entry(name, cards, point, bet_point),
            "rival": player_entry("rival", "2s 4h 6d 8c Ts", point=500, bet_point=min_bet),
        },
    }
