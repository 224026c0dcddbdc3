"""
Utility-based action selection for simple autonomous agents.

An agent's behavior is a handful of competing actions. Each action scores
itself from named considerations; every decision cycle the highest-scoring
action wins and is executed.

Package structure:
    utility     - Scoring framework: Reasoner, Action, Consideration.
    curves      - Response curves for shaping considerations into urgency.
    agent       - Sample survival agent and its five actions.
    simulation  - Tick loop driving the sample agent.
    events      - Event bus announcing each tick's decision.
"""

from .curves import ResponseCurve, ResponseCurveType
from .utility import Action, Consideration, Reasoner, ScoredAction

__all__ = [
    "Action",
    "Consideration",
    "Reasoner",
    "ResponseCurve",
    "ResponseCurveType",
    "ScoredAction",
]
