"""Decision events announced by a Simulation after every tick.

Observers (loggers, tests, a UI) subscribe to a simulation's DecisionFeed.
Delivery is synchronous and fire-and-forget; observers watch the decisions
but never influence them.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

from aiutility.types import TickNumber, Utility

logger = logging.getLogger(__name__)


@dataclass
class DecisionEvent:
    """Base class for all decision events."""

    tick: TickNumber


@dataclass
class ActionSelectedEvent(DecisionEvent):
    """An action won the tick and has been executed."""

    action_name: str
    utility: Utility


@dataclass
class NoActionEvent(DecisionEvent):
    """No action scored above the 0.0 floor this tick."""


DecisionObserver: TypeAlias = Callable[[DecisionEvent], None]


class DecisionFeed:
    """Per-simulation list of observers, each filtered by event class.

    Subscribing to ``DecisionEvent`` itself receives every decision.
    """

    def __init__(self) -> None:
        self._observers: list[tuple[type[DecisionEvent], DecisionObserver]] = []

    def subscribe(
        self,
        observer: DecisionObserver,
        event_type: type[DecisionEvent] = DecisionEvent,
    ) -> None:
        self._observers.append((event_type, observer))

    def publish(self, event: DecisionEvent) -> None:
        """Hand ``event`` to every observer of its class or a base class.

        An observer that raises is logged and skipped; the decision has
        already been executed, so the remaining observers still run.
        """
        for event_type, observer in self._observers:
            if not isinstance(event, event_type):
                continue
            try:
                observer(event)
            except Exception:
                logger.exception(
                    "Observer %r failed on tick %d (%s)",
                    observer,
                    event.tick,
                    type(event).__name__,
                )
