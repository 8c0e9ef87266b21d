"""Random number generators for resampling."""

from __future__ import annotations

import random
import threading
import time

_local = threading.local()


def _seed_source() -> random.Random:
    source = getattr(_local, "source", None)
    if source is None:
        source = random.Random(time.time_ns() // 1_000_000)
        _local.source = source
    return source


def new_rng() -> random.Random:
    """Return a fresh generator seeded from this thread's seed source."""
    return random.Random(_seed_source().getrandbits(128))