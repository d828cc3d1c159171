"""
Minesweeper agents module.

Provides agents that play through MinesweeperEnv:
- RandomAgent: Baseline random dig selection
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
