import itertools
import random

import pytest

from cpnotes.scheduling import (
    DeadlineJob,
    PenaltyJob,
    TwoMachineJob,
    WeightedJob,
    compute_schedule,
    finish_times,
    johnsons_rule,
    max_profit,
    order_by_penalty,
)


def _penalty_cost(order):
    elapsed = 0
    total = 0
    for job in order:
        elapsed += job.time
        total += job.penalty * elapsed
    return total


@pytest.mark.parametrize("seed", range(6))
def test_order_by_penalty_is_optimal(seed):
    rng = random.Random(seed)
    jobs = [PenaltyJob(rng.randint(1, 9), rng.randint(1, 9), i) for i in range(6)]
    best = min(_penalty_cost(p) for p in itertools.permutations(jobs))
    result = order_by_penalty(jobs)
    assert sorted(j.index for j in result) == list(range(6))
    assert _penalty_cost(result) == best


def test_order_by_penalty_breaks_ties_by_index():
    jobs = [PenaltyJob(2, 4, index=1), PenaltyJob(1, 2, index=0)]
    assert [job.index for job in order_by_penalty(jobs)] == [0, 1]


@pytest.mark.parametrize("seed", range(6))
def test_johnsons_rule_minimises_makespan(seed):
    rng = random.Random(100 + seed)
    jobs = [TwoMachineJob(rng.randint(1, 9), rng.randint(1, 9), i) for i in range(6)]
    best = min(finish_times(p)[1] for p in itertools.permutations(jobs))
    result = johnsons_rule(jobs)
    assert sorted(j.index for j in result) == list(range(6))
    assert finish_times(result)[1] == best


def test_finish_times_first_machine_is_total_work():
    jobs = [TwoMachineJob(3, 1, 0), TwoMachineJob(2, 5, 1)]
    t1, t2 = finish_times(jobs)
    assert t1 == 3 + 2
    assert t2 >= t1 + jobs[-1].b


def test_finish_times_empty():
    assert finish_times([]) == (0, 0)


def _feasible(jobs):
    elapsed = 0
    for job in sorted(jobs, key=lambda j: j.deadline):
        elapsed += job.duration
        if elapsed > job.deadline:
            return False
    return True


@pytest.mark.parametrize("seed", range(8))
def test_compute_schedule_is_largest_feasible_set(seed):
    rng = random.Random(200 + seed)
    jobs = [DeadlineJob(rng.randint(1, 10), rng.randint(1, 5), i) for i in range(6)]
    best = max(
        r
        for r in range(len(jobs) + 1)
        for subset in itertools.combinations(jobs, r)
        if _feasible(subset)
    )
    schedule = compute_schedule(jobs)
    assert len(schedule) == len(set(schedule))
    assert len(schedule) == best
    by_index = {job.index: job for job in jobs}
    assert _feasible([by_index[i] for i in schedule])


def test_compute_schedule_empty():
    assert compute_schedule([]) == []


def _overlap_free(subset):
    ordered = sorted(subset, key=lambda j: j.finish)
    return all(a.finish <= b.start for a, b in zip(ordered, ordered[1:]))


@pytest.mark.parametrize("seed", range(8))
def test_max_profit_matches_brute_force(seed):
    rng = random.Random(300 + seed)
    jobs = []
    for _ in range(7):
        start = rng.randint(0, 10)
        jobs.append(WeightedJob(start, start + rng.randint(1, 5), rng.randint(1, 20)))
    best = max(
        sum(j.profit for j in subset)
        for r in range(len(jobs) + 1)
        for subset in itertools.combinations(jobs, r)
        if _overlap_free(subset)
    )
    assert max_profit(jobs) == best


def test_max_profit_single_and_empty():
    assert max_profit([]) == 0
    assert max_profit([WeightedJob(1, 3, 7)]) == 7


def test_max_profit_touching_jobs_are_compatible():
    jobs = [WeightedJob(0, 2, 4), WeightedJob(2, 5, 6)]
    assert max_profit(jobs) == 4 + 6