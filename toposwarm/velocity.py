"""Random velocity commands published at a fixed rate."""

from __future__ import annotations

import random
import time
import zlib
from collections.abc import Iterator
from dataclasses import dataclass, field

from toposwarm.contact import Vector3


@dataclass
class Twist:
    """A velocity command with linear and angular parts."""

    linear: Vector3 = field(default_factory=Vector3)
    angular: Vector3 = field(default_factory=Vector3)


def seed_for_node(node_name: str, now: float) -> int:
    """Return a 32-bit seed mixing the current time with the node name."""
    return (int(now) + zlib.crc32(node_name.encode("utf-8"))) & 0xFFFFFFFF


def random_twist(rng: random.Random) -> Twist:
    """Return a twist with x and y velocity drawn uniformly from [-1, 1]."""
    x = rng.uniform(-1.0, 1.0)
    y = rng.uniform(-1.0, 1.0)
    return Twist(linear=Vector3(x, y, 0.0))


def velocity_stream(
    node_name: str, rate: float = 2.0, seed: int | None = None
) -> Iterator[Twist]:
    """Yield random twists forever, ``rate`` times per second."""
    if rate <= 0:
        raise ValueError("rate must be positive")
    if seed is None:
        seed = seed_for_node(node_name, time.time())
    rng = random.Random(seed)
    period = 1.0 / rate
    next_tick = time.monotonic() + period
    while True:
        yield random_twist(rng)
        delay = next_tick - time.monotonic()
        if delay > 0:
            time.sleep(delay)
            next_tick += period
        else:
            next_tick = time.monotonic() + period