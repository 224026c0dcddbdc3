from __future__ import annotations

from collections.abc import Sequence

from aiutility import config
from aiutility.agent import Agent
from aiutility.utility import Action, Reasoner


def constant(value: float):
    """Return a scoring function that always yields ``value``."""
    return lambda _reasoner: value


def make_reasoner(scores: Sequence[tuple[str, float]]) -> Reasoner:
    """Build a Reasoner with one constant-scoring action per (name, score)."""
    reasoner = Reasoner()
    for name, score in scores:
        reasoner.add_action(Action(name, constant(score)))
    return reasoner


def make_agent(
    *,
    health: float = 1.0,
    food: float = 1.0,
    rest: float = 1.0,
    hunger: float = 0.0,
) -> Agent:
    """Build an Agent from normalized stats (0.0..1.0)."""
    return Agent(
        health=health * config.STAT_MAX,
        food=food * config.STAT_MAX,
        hunger=hunger * config.STAT_MAX,
        rest=rest * config.STAT_MAX,
    )
