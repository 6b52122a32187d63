"""
Distance helpers over point-like structures (anything with x, y and optional z).
"""
import math


def _z(point) -> float:
    z = getattr(point, "z", None)
    return 0.0 if z is None else z


def distance_2d(a, b) -> float:
    """Euclidean distance using only x and y."""
    return math.hypot(a.x - b.x, a.y - b.y)


def distance_3d(a, b) -> float:
    """
    Euclidean distance using x, y and z.

    A missing z on either side counts as 0, so two flat points give the
    same result as distance_2d.
    """
    return math.hypot(a.x - b.x, a.y - b.y, _z(a) - _z(b))
