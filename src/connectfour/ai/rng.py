# src/connectfour/ai/rng.py

from __future__ import annotations
import logging
import random
import time
from typing import Optional

logger = logging.getLogger(__name__)

_rng: Optional[random.Random] = None


def seed_process_rng(seed: Optional[int] = None) -> random.Random:
    """
    Create the process-wide generator. Seeded from wall-clock time unless a
    seed is given. Only the first call seeds; later calls return the same
    generator untouched.
    """
    global _rng
    if _rng is not None:
        return _rng

    if seed is None:
        seed = time.time_ns()
    _rng = random.Random(seed)
    logger.debug("process rng seeded with %d", seed)
    return _rng


def process_rng() -> random.Random:
    return seed_process_rng()
