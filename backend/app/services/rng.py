"""Seeded draw stream for worksheet generation.

One `random.Random` per generation call, seeded from the seed string and
threaded explicitly through every sampler. String seeds are hashed with
SHA-512 by `random.Random`, so the stream is identical across processes
and platforms (unaffected by PYTHONHASHSEED).
"""
import math
import random
import time

from app.core.exceptions import InvalidRangeError


def make_rng(seed: str) -> random.Random:
    return random.Random(seed)


def fallback_seed() -> str:
    """Time-derived seed (milliseconds since epoch) for callers that supply none."""
    return str(int(time.time() * 1000))


def random_int(rng: random.Random, low: float, high: float) -> int:
    """Uniform integer in [ceil(low), floor(high)], consuming exactly one draw."""
    lo = math.ceil(low)
    hi = math.floor(high)
    if hi < lo:
        raise InvalidRangeError(lo, hi)
    return math.floor(rng.random() * (hi - lo + 1)) + lo
