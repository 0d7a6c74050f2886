"""Greedy job sequencing with deadlines for maximum profit."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import count


@dataclass(frozen=True)
class Job:
    """A unit-time job that must finish by ``deadline`` to earn ``profit``."""

    id: str
    deadline: int
    profit: int


def schedule_jobs(jobs: Iterable[Job]) -> list[Job]:
    """Choose jobs that maximise total profit, returned in deadline order.

    Works backwards over the deadlines, filling the free slots between
    consecutive deadlines with the most profitable jobs still available.
    """
    ordered = sorted(jobs, key=lambda job: job.deadline)
    order = count()
    available: list[tuple[int, int, Job]] = []
    chosen: list[Job] = []
    for i in range(len(ordered) - 1, -1, -1):
        job = ordered[i]
        slots = job.deadline - (ordered[i - 1].deadline if i > 0 else 0)
        heapq.heappush(available, (-job.profit, next(order), job))
        while slots > 0 and available:
            chosen.append(heapq.heappop(available)[2])
            slots -= 1
    chosen.sort(key=lambda job: job.deadline)
    return chosen