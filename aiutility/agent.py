"""Sample survival agent driven by a Reasoner.

The agent has four stats on a 0..STAT_MAX scale. ``build_reasoner`` exposes
each one as a normalized consideration and registers five competing actions
whose scoring functions and effects close over the same Agent instance.
"""

from __future__ import annotations

from dataclasses import dataclass

from aiutility import config
from aiutility.curves import URGENT_WHEN_EMPTY, URGENT_WHEN_HIGH, URGENT_WHEN_LOW
from aiutility.types import ConsiderationParams, StatValue
from aiutility.utility import Reasoner


@dataclass
class Agent:
    """Mutable survival stats. Higher is better except for hunger."""

    health: StatValue = config.STAT_MAX
    food: StatValue = config.STAT_MAX
    hunger: StatValue = 0.0
    rest: StatValue = config.STAT_MAX

    def describe(self) -> str:
        return (
            f"health: {self.health:.1f}, food: {self.food:.1f}, "
            f"rest: {self.rest:.1f}, hunger: {self.hunger:.1f}"
        )


def register_considerations(reasoner: Reasoner, agent: Agent) -> None:
    """Expose the agent's stats as normalized considerations."""

    def health(_params: ConsiderationParams) -> float:
        return agent.health / config.STAT_MAX

    def food(_params: ConsiderationParams) -> float:
        return agent.food / config.STAT_MAX

    def rest(_params: ConsiderationParams) -> float:
        return agent.rest / config.STAT_MAX

    def hunger(_params: ConsiderationParams) -> float:
        return agent.hunger / config.STAT_MAX

    reasoner.register_consideration("health", health)
    reasoner.register_consideration("food", food)
    reasoner.register_consideration("rest", rest)
    reasoner.register_consideration("hunger", hunger)


def register_actions(reasoner: Reasoner, agent: Agent) -> None:
    """Register heal, eat, sleep, find food and idle, in that order."""

    # Heal: the lower our health, the more urgent.
    def heal_utility(r: Reasoner) -> float:
        return URGENT_WHEN_LOW(r.consider("health"))

    def heal() -> None:
        agent.health = min(config.STAT_MAX, agent.health + config.HEAL_AMOUNT)

    # Eat: only possible with food in the inventory, urgent as hunger peaks.
    def eat_utility(r: Reasoner) -> float:
        if r.consider("food") <= 0:
            return 0.0
        return URGENT_WHEN_HIGH(r.consider("hunger"))

    def eat() -> None:
        agent.food = max(0.0, agent.food - config.MEAL_COST)
        agent.hunger = 0.0

    # Sleep: the less rested, the more urgent.
    def sleep_utility(r: Reasoner) -> float:
        return URGENT_WHEN_LOW(r.consider("rest"))

    def sleep() -> None:
        agent.rest = config.STAT_MAX

    # Find food: pointless with a full inventory, urgent once it runs dry.
    def find_food_utility(r: Reasoner) -> float:
        if r.consider("food") >= 1.0:
            return 0.0
        return URGENT_WHEN_EMPTY(r.consider("food"))

    def find_food() -> None:
        agent.food = config.STAT_MAX

    reasoner.action("heal", heal_utility, heal)
    reasoner.action("eat", eat_utility, eat)
    reasoner.action("sleep", sleep_utility, sleep)
    reasoner.action("find food", find_food_utility, find_food)
    # Fallback that keeps the agent busy when every need is met.
    reasoner.action("idle", lambda r: config.IDLE_UTILITY)


def build_reasoner(agent: Agent) -> Reasoner:
    """Create a Reasoner wired to ``agent``'s stats and actions."""
    reasoner = Reasoner()
    register_considerations(reasoner, agent)
    register_actions(reasoner, agent)
    return reasoner
