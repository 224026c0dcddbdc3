"""
Configuration constants.

Centralizes the tuning values of the sample survival agent and its
simulation loop. Command-line flags override the simulation values per run.
"""

from aiutility.types import RandomSeed

# =============================================================================
# GENERAL
# =============================================================================

# RANDOM_SEED = None
RANDOM_SEED: RandomSeed = "survivor1"

# =============================================================================
# AGENT STATS
# =============================================================================

# Every agent stat lives on a 0..STAT_MAX scale. Considerations divide by this
# to produce normalized values.
STAT_MAX = 100.0

HEAL_AMOUNT = 10.0  # Health restored by one "heal"
MEAL_COST = 10.0  # Food consumed by one "eat"

# Fixed score of the idle fallback. Must stay above the selector's 0.0 floor
# so that something is always chosen when every need is satisfied.
IDLE_UTILITY = 0.01

# =============================================================================
# SIMULATION
# =============================================================================

DEFAULT_TICKS = 100

HUNGER_RATE = 1.0  # Hunger gained per tick
REST_RATE = 1.0  # Rest lost per tick

INJURY_CHANCE = 0.1  # Probability per tick of a random injury
INJURY_DAMAGE = 10.0

# Number of recent chosen utilities kept for the end-of-run summary.
UTILITY_HISTORY_SAMPLES = 256

# =============================================================================
# LOGGING
# =============================================================================

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
