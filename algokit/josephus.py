"""The Josephus elimination problem."""

from __future__ import annotations


def josephus_survivor(n: int, k: int) -> int:
    """Return the last one left when people 0..n-1 in a circle drop out every k-th.

    Counting starts at person 0, and after each removal it resumes with the
    next person still in the circle.
    """
    if n < 1:
        raise ValueError("there must be at least one person")
    if k < 1:
        raise ValueError("step must be at least 1")
    circle = list(range(n))
    position = 0
    while len(circle) > 1:
        position = (position + k - 1) % len(circle)
        circle.pop(position)
        position %= len(circle)
    return circle[0]