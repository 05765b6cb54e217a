"""Greedy algorithms: fractional knapsack and job sequencing."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An item that can be taken whole or in part."""

    value: int
    weight: int

    @property
    def ratio(self) -> float:
        return self.value / self.weight


@dataclass(frozen=True)
class Job:
    """A unit-length job that earns ``profit`` if done by ``deadline``."""

    id: int
    deadline: int
    profit: int


def fractional_knapsack(capacity: int, items: Iterable[Item]) -> float:
    """Return the greatest value that fits in ``capacity``, splitting items if needed."""
    used = 0
    total = 0.0
    for item in sorted(items, key=lambda it: it.ratio, reverse=True):
        if used + item.weight <= capacity:
            used += item.weight
            total += item.value
        else:
            total += item.ratio * (capacity - used)
            break
    return total


def job_scheduling(jobs: Iterable[Job]) -> tuple[int, int]:
    """Schedule jobs greedily by profit; return (jobs done, total profit)."""
    ordered = sorted(jobs, key=lambda job: job.profit, reverse=True)
    if not ordered:
        return 0, 0
    latest = max(job.deadline for job in ordered)
    taken = [False] * (latest + 1)
    count = profit = 0
    for job in ordered:
        for slot in range(job.deadline, 0, -1):
            if not taken[slot]:
                taken[slot] = True
                count += 1
                profit += job.profit
                break
    return count, profit