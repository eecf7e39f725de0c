from __future__ import annotations

"""Agent exports and the seat-name registry used by the host engine."""

import importlib
from typing import Dict, Type

from .agent_state import AgentState
from .betting_policy import BettingPolicy
from .card_hold import select_exchange
from .draw_poker_agent import DrawPokerAgent, PhaseOrderError

# seat name -> agent class
AGENTS: Dict[str, Type] = {
    "draw_poker": DrawPokerAgent,
}


def load_agent(agent_path: str, game_id: str, player_name: str, **kwargs):
    """Instantiate an agent from a registry key or a dotted path like ``agents.module.Agent``."""

    if agent_path in AGENTS:
        agent_cls = AGENTS[agent_path]
    else:
        if ":" in agent_path:
            module_name, class_name = agent_path.split(":", 1)
        elif "." in agent_path:
            module_name, class_name = agent_path.rsplit(".", 1)
        else:
            raise KeyError(f"Unknown agent: {agent_path}")
        module = importlib.import_module(module_name)
        agent_cls = getattr(module, class_name)
    return agent_cls(game_id, player_name, **kwargs)


__all__ = [
    "AGENTS",
    "AgentState",
    "BettingPolicy",
    "DrawPokerAgent",
    "PhaseOrderError",
    "load_agent",
    "select_exchange",
]
