"""Classic job scheduling problems."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import cmp_to_key

from sortedcontainers import SortedList


@dataclass(frozen=True)
class PenaltyJob:
    """A job whose penalty grows linearly with its completion time."""

    penalty: int
    time: int
    index: int


@dataclass(frozen=True)
class TwoMachineJob:
    """A job run on machine one for ``a`` then machine two for ``b``."""

    a: int
    b: int
    index: int


@dataclass(frozen=True)
class DeadlineJob:
    deadline: int
    duration: int
    index: int


@dataclass(frozen=True)
class WeightedJob:
    start: int
    finish: int
    profit: int


def _penalty_order(x: PenaltyJob, y: PenaltyJob) -> int:
    left, right = x.time * y.penalty, x.penalty * y.time
    if left == right:
        return (x.index > y.index) - (x.index < y.index)
    return -1 if left < right else 1


def order_by_penalty(jobs: Iterable[PenaltyJob]) -> list[PenaltyJob]:
    """Order minimising the total linear penalty; ties keep the smaller index first."""
    return sorted(jobs, key=cmp_to_key(_penalty_order))


def johnsons_rule(jobs: Iterable[TwoMachineJob]) -> list[TwoMachineJob]:
    """Order of jobs on two machines that minimises the makespan."""
    ordered = sorted(jobs, key=lambda job: min(job.a, job.b))
    first = [job for job in ordered if job.a < job.b]
    last = [job for job in ordered if job.a >= job.b]
    return first + last[::-1]


def finish_times(jobs: Iterable[TwoMachineJob]) -> tuple[int, int]:
    """When each machine finishes running ``jobs`` in the given order."""
    t1 = t2 = 0
    for job in jobs:
        t1 += job.a
        t2 = max(t2, t1) + job.b
    return t1, t2


def compute_schedule(jobs: Iterable[DeadlineJob]) -> list[int]:
    """Indices of a largest set of jobs that can all finish by their deadlines."""
    ordered = sorted(jobs, key=lambda job: job.deadline)
    pending: SortedList = SortedList()
    schedule: list[int] = []
    previous = [0] + [job.deadline for job in ordered[:-1]]
    for job, before in zip(reversed(ordered), reversed(previous)):
        free = job.deadline - before
        pending.add((job.duration, job.index))
        while free and pending:
            duration, index = pending.pop(0)
            if duration <= free:
                free -= duration
                schedule.append(index)
            else:
                pending.add((duration - free, index))
                free = 0
    return schedule


def max_profit(jobs: Sequence[WeightedJob]) -> int:
    """Largest total profit from jobs that do not overlap."""
    ordered = sorted(jobs, key=lambda job: job.finish)
    finishes = [job.finish for job in ordered]
    best = [0] * (len(ordered) + 1)
    for i, job in enumerate(ordered, start=1):
        compatible = bisect_right(finishes, job.start, 0, i - 1)
        best[i] = max(best[i - 1], job.profit + best[compatible])
    return best[-1]