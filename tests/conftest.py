import pytest

from aiutility.util import rng


@pytest.fixture(autouse=True)
def seeded_rng() -> None:
    """Reseed the random streams so tests are deterministic."""
    rng.init("tests")
