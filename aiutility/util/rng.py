"""Seeded random draws for the simulation.

Each named domain gets its own ``random.Random`` seeded from the master seed
and the domain name, so a run replays exactly from its seed. The simulation
only draws injury rolls today; a new domain would not shift those rolls.

Usage:
    from aiutility.util import rng
    rng.init(config.RANDOM_SEED)

    _injury_rng = rng.get("simulation.injury")
    injured = _injury_rng.random() < config.INJURY_CHANCE
"""

from __future__ import annotations

import zlib
from random import Random
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aiutility.types import RandomSeed

_master_seed: RandomSeed = None
_streams: dict[str, Random] = {}


def _stream_for(domain: str) -> Random:
    stream = _streams.get(domain)
    if stream is None:
        if _master_seed is None:
            stream = Random()
        else:
            # crc32 rather than hash(): str hashing is salted per process
            stream = Random(zlib.crc32(f"{_master_seed}:{domain}".encode()))
        _streams[domain] = stream
    return stream


class RNGStream:
    """Draws for one domain from whatever seed the last ``init`` set.

    Safe to cache at module level: the underlying Random is looked up on
    every draw.
    """

    def __init__(self, domain: str) -> None:
        self.domain = domain

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return _stream_for(self.domain).random()


def init(master_seed: RandomSeed = None) -> None:
    """Reseed every domain. ``None`` draws from system entropy."""
    global _master_seed
    _master_seed = master_seed
    _streams.clear()


def get(domain: str) -> RNGStream:
    return RNGStream(domain)
