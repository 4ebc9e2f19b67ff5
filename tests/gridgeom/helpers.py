from __future__ import annotations

import random

from gridgeom.core.point import Point


def make_endpoint_pairs(rng: random.Random, count: int = 40) -> list[tuple[Point, Point]]:
    span = range(-12, 13)
    return [(Point.random(rng, span, span), Point.random(rng, span, span)) for _ in range(count)]
