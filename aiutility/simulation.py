"""Tick loop that lets a Reasoner drive the sample survival agent.

Each tick the agent's needs decay, it may be injured at random, and the
Reasoner picks the action to execute. The loop owns the cadence; the
Reasoner only answers "what now?".
"""

from __future__ import annotations

import logging
from collections import Counter

from aiutility import config
from aiutility.agent import Agent, build_reasoner
from aiutility.events import ActionSelectedEvent, DecisionFeed, NoActionEvent
from aiutility.types import TickNumber
from aiutility.util import rng
from aiutility.util.metrics import UtilityHistory
from aiutility.utility import Action, Reasoner

logger = logging.getLogger(__name__)

_rng = rng.get("simulation.injury")


class Simulation:
    """Run an Agent and its Reasoner for a number of ticks.

    Args:
        agent: The agent to simulate. A fresh Agent when omitted.
        reasoner: Decision engine for ``agent``. Built with
            ``build_reasoner(agent)`` when omitted. A custom reasoner must
            close over the same agent for stat decay to matter.
        hunger_rate: Hunger gained per tick.
        rest_rate: Rest lost per tick.
        injury_chance: Probability per tick of losing ``injury_damage`` health.
        injury_damage: Health lost per injury.
        history_samples: How many recent chosen utilities to keep.
    """

    def __init__(
        self,
        agent: Agent | None = None,
        reasoner: Reasoner | None = None,
        *,
        hunger_rate: float = config.HUNGER_RATE,
        rest_rate: float = config.REST_RATE,
        injury_chance: float = config.INJURY_CHANCE,
        injury_damage: float = config.INJURY_DAMAGE,
        history_samples: int = config.UTILITY_HISTORY_SAMPLES,
    ) -> None:
        if not 0.0 <= injury_chance <= 1.0:
            raise ValueError(f"injury_chance must be in [0, 1], got {injury_chance}")

        self.agent = agent if agent is not None else Agent()
        self.reasoner = reasoner if reasoner is not None else build_reasoner(self.agent)
        self.hunger_rate = hunger_rate
        self.rest_rate = rest_rate
        self.injury_chance = injury_chance
        self.injury_damage = injury_damage
        self.tick_count = TickNumber(0)
        self.history = UtilityHistory(history_samples)
        self.decisions = DecisionFeed()

    def _update_needs(self) -> None:
        agent = self.agent
        agent.hunger = min(config.STAT_MAX, agent.hunger + self.hunger_rate)
        agent.rest = max(0.0, agent.rest - self.rest_rate)

        if _rng.random() < self.injury_chance:
            agent.health -= self.injury_damage
            logger.debug("Agent injured (-%.1f health)", self.injury_damage)

    def tick(self) -> Action | None:
        """Advance one step and execute the Reasoner's choice, if any."""
        self.tick_count = TickNumber(self.tick_count + 1)
        self._update_needs()
        logger.info(self.agent.describe())

        chosen = self.reasoner.select()
        if chosen is None:
            self.decisions.publish(NoActionEvent(tick=self.tick_count))
            return None

        action, utility = chosen.action, chosen.utility
        logger.info("best action: %s", action.name)
        action.execute()
        self.history.record(utility)
        self.decisions.publish(
            ActionSelectedEvent(
                tick=self.tick_count, action_name=action.name, utility=utility
            )
        )
        return action

    def run(self, ticks: int = config.DEFAULT_TICKS) -> Counter[str]:
        """Run ``ticks`` ticks and count how often each action was chosen.

        Raises:
            ValueError: If ``ticks`` is negative.
        """
        if ticks < 0:
            raise ValueError(f"ticks must be non-negative, got {ticks}")

        counts: Counter[str] = Counter()
        for _ in range(ticks):
            action = self.tick()
            if action is not None:
                counts[action.name] += 1
        return counts
