"""Utility-based action selection.

A Reasoner holds the candidate actions of one agent and the named
considerations their scoring functions read. Every decision cycle the driver
asks the Reasoner for its best action and executes it. The Reasoner has no
loop of its own; tick cadence belongs to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeAlias

from aiutility.types import ConsiderationParams, NormalizedValue, Utility

logger = logging.getLogger(__name__)

# A named input signal. Receives an opaque params value from whoever calls it
# and returns a value that is, by convention, normalized to 0.0..1.0.
# TODO: give considerations typed params (e.g. two entities for a distance
# consideration) once a shipped consideration needs them.
Consideration: TypeAlias = Callable[[ConsiderationParams], NormalizedValue]

ScoringFunction: TypeAlias = Callable[["Reasoner"], Utility]
ExecuteFunction: TypeAlias = Callable[[], None]


def _do_nothing() -> None:
    pass


@dataclass(slots=True, eq=False)
class Action:
    """A named behavior with a scoring function and an execute function.

    Both functions are plain callables, usually closures over the agent's
    state. ``utility`` receives the Reasoner so it can read considerations;
    ``execute`` takes no arguments and only has external effects.

    Actions compare by identity, so two actions sharing a name are still
    distinct entries.
    """

    name: str
    utility: ScoringFunction
    execute: ExecuteFunction = field(default=_do_nothing)


@dataclass(slots=True)
class ScoredAction:
    """Debug snapshot of one action's scoring result."""

    action: Action
    utility: Utility

    @property
    def name(self) -> str:
        return self.action.name


class Reasoner:
    """Registry of actions and considerations, and the best-action selector.

    Actions keep their registration order, which only matters for breaking
    ties. Consideration names are unique; registering a name again replaces
    the previous function.

    Not thread-safe. Callers that mutate the containers from several threads
    must serialize access themselves.
    """

    def __init__(self) -> None:
        self.actions: list[Action] = []
        self.considerations: dict[str, Consideration] = {}

    def register_consideration(self, name: str, consideration: Consideration) -> None:
        """Register ``consideration`` under ``name``, replacing any previous one."""
        if name in self.considerations:
            logger.debug("Replacing consideration %r", name)
        self.considerations[name] = consideration

    def consider(self, name: str, params: ConsiderationParams = None) -> float:
        """Evaluate the named consideration.

        ``params`` is passed through untouched.

        Raises:
            KeyError: If no consideration is registered under ``name``.
        """
        return self.considerations[name](params)

    def add_action(self, action: Action) -> Action:
        """Append ``action`` to the candidates and return it."""
        self.actions.append(action)
        return action

    def action(
        self,
        name: str,
        utility: ScoringFunction,
        execute: ExecuteFunction | None = None,
    ) -> Action:
        """Build an Action from the given callables and append it.

        Args:
            name: Display name. Need not be unique.
            utility: Scoring function, called with this Reasoner.
            execute: Called when the action is chosen. Defaults to a no-op.

        Returns:
            The newly registered Action.
        """
        return self.add_action(
            Action(name, utility, execute if execute is not None else _do_nothing)
        )

    def remove_action(self, action: Action) -> None:
        """Remove ``action`` from the candidates.

        Raises:
            ValueError: If the action is not registered.
        """
        self.actions.remove(action)

    def score_actions(self) -> list[ScoredAction]:
        """Score every action once, in registration order, without selecting."""
        return [ScoredAction(action, action.utility(self)) for action in self.actions]

    def select(self) -> ScoredAction | None:
        """Return the winning action together with its utility, or None.

        The running best starts at 0.0, so an action must score strictly
        above zero to be chosen. An empty Reasoner, or one where every action
        scores <= 0.0, yields None. Ties keep the earlier-registered action
        because replacement requires a strictly greater score.

        Each scoring function is called exactly once, in registration order.
        Exceptions raised by scoring functions propagate to the caller.
        """
        best_action: Action | None = None
        best_utility = 0.0

        for action in self.actions:
            utility = action.utility(self)
            if utility > best_utility:
                best_action = action
                best_utility = utility

        if best_action is None:
            logger.debug(
                "No action scored above 0.0 (%d candidates)", len(self.actions)
            )
            return None
        logger.debug("Best action %r (utility=%.4f)", best_action.name, best_utility)
        return ScoredAction(best_action, best_utility)

    def best_action(self) -> Action | None:
        """Return the action with the highest utility, or None. See ``select``."""
        scored = self.select()
        return scored.action if scored is not None else None
