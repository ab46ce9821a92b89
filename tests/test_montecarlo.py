import math

import pytest

from numlab.montecarlo import (
    local_sample_count,
    main,
    montecarlo,
    montecarlo_partitioned,
)


def half_circle(x):
    return math.sqrt(1 - x * x)


@pytest.mark.parametrize("n", [0, 1, 7, 10, 100, 101])
@pytest.mark.parametrize("size", [1, 2, 3, 8])
def test_local_counts_cover_all_samples(n, size):
    counts = [local_sample_count(n, r, size) for r in range(size)]
    assert sum(counts) == n
    assert max(counts) - min(counts) <= 1
    assert counts == sorted(counts, reverse=True)


def test_local_count_invalid_rank():
    with pytest.raises(ValueError):
        local_sample_count(10, 3, 3)


def test_constant_function_is_exact():
    integral, variance = montecarlo(lambda x: 1.0, 1000)
    assert integral == 2.0
    assert variance == 0.0


def test_same_seed_is_reproducible():
    first = montecarlo(half_circle, 500, seed=3)
    second = montecarlo(half_circle, 500, seed=3)
    assert first == second
    integral, variance = first
    assert variance > 0
    assert abs(integral - math.pi / 2) < 5 * math.sqrt(variance)


def test_estimate_close_to_half_pi():
    integral, variance = montecarlo(half_circle, 100000)
    assert variance > 0
    assert abs(integral - math.pi / 2) < 5 * math.sqrt(variance)


def test_single_process_matches_serial():
    assert montecarlo_partitioned(half_circle, 2000, 1) == montecarlo(half_circle, 2000, 0)


def test_partitioned_estimate_close_to_half_pi():
    integral, variance = montecarlo_partitioned(half_circle, 50000, 4)
    assert abs(integral - math.pi / 2) < 5 * math.sqrt(variance)


@pytest.mark.parametrize("n", [0, 1])
def test_too_few_samples(n):
    with pytest.raises(ValueError):
        montecarlo(half_circle, n)
    with pytest.raises(ValueError):
        montecarlo_partitioned(half_circle, n, 2)


def test_invalid_size():
    with pytest.raises(ValueError):
        montecarlo_partitioned(half_circle, 100, 0)


def test_main_output(capsys):
    assert main(["2000", "--size", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Elapsed: ")
    assert lines[1].startswith("Integral: ")
    assert abs(float(lines[1].split(": ")[1]) - math.pi / 2) < 0.1
    assert lines[2].startswith("Error estimator: ")