"""Shared API dependencies."""

import random
from functools import lru_cache

from rentalhaven.core.config import settings


@lru_cache(maxsize=1)
def get_rng() -> random.Random:
    """Process-wide random source for generated listing fields.

    Seeded once from ``SEED_RANDOM_SEED`` when configured, otherwise from the OS,
    so successive requests keep drawing from the same sequence.
    """
    return random.Random(settings.SEED_RANDOM_SEED)
