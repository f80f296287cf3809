"""
Agent registry for Amazons.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from agents.alphabeta_agent import AlphaBetaAgent
from agents.gameplay_protocol import AgentProtocol
from agents.random_agent import RandomAgent
from agents.search_config import SearchConfig

AGENT_TYPES = ("random", "alphabeta")


@dataclass
class AgentSpec:
    name: str
    agent_type: str
    seed: Optional[int] = None
    config_path: Optional[str] = None


def build_agent(agent_type: str, seed: Optional[int] = None, config: Optional[SearchConfig] = None) -> AgentProtocol:
    agent_type = agent_type.lower()
    if agent_type == "random":
        return RandomAgent(seed=seed)
    if agent_type == "alphabeta":
        return AlphaBetaAgent(config=config)
    raise ValueError(f"Unknown agent type: {agent_type}")


def build_agent_from_spec(spec: AgentSpec) -> AgentProtocol:
    config = SearchConfig.from_file(spec.config_path) if spec.config_path else None
    return build_agent(spec.agent_type, seed=spec.seed, config=config)
