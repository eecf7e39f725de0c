from dataclasses import dataclass
from typing import Dict


@dataclass
class AgentState:
    """Per-seat counters, owned and mutated only by the agent itself."""

    id: str
    name: str
    round: int = 0
    bet_unit: int = 0  # recomputed at every round start
    win: int = 0

    def snapshot(self) -> Dict:
        return {
            "id": self.id,
            "name": self.name,
            "round": self.round,
            "betUnit": self.bet_unit,
            "win": self.win,
        }
