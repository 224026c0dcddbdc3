from __future__ import annotations

from typing import Any, NewType, TypeAlias

# =============================================================================
# SCORING TYPES
# =============================================================================

# A raw utility value produced by an action's scoring function. Unbounded,
# but by convention kept comparable across the actions of one Reasoner.
Utility: TypeAlias = float

# A utility value on the conventional 0.0..1.0 scale used by considerations
# and response curves.
NormalizedValue: TypeAlias = float  # Example: 0.3 = 30% health

# Opaque value handed to a consideration by whoever calls it. The engine
# never builds or interprets it.
ConsiderationParams: TypeAlias = Any

# =============================================================================
# SIMULATION TYPES
# =============================================================================

# Index of a simulation step, starting at 1 for the first tick.
TickNumber = NewType("TickNumber", int)

# Raw agent stat on the 0..STAT_MAX scale (not normalized).
StatValue: TypeAlias = float  # Example: 90.0 = 90 health points

# Master seed for deterministic random streams. None means system entropy.
RandomSeed: TypeAlias = int | str | None
