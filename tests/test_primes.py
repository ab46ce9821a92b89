import pytest

from numlab.primes import (
    get_primes_segmented,
    get_primes_v1,
    get_primes_v2,
    get_primes_v3,
    get_primes_v4,
    get_primes_v5,
)

SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def _trial(k):
    return k >= 2 and all(k % d for d in range(2, int(k ** 0.5) + 1))


def test_v1_primes_below_thirty():
    flags = get_primes_v1(30)
    assert [k for k, f in enumerate(flags) if f] == SMALL_PRIMES


def test_v1_matches_trial_division():
    n = 1000
    flags = get_primes_v1(n)
    assert len(flags) == n + 1
    assert all(flags[k] == _trial(k) for k in range(n + 1))


@pytest.mark.parametrize("n", [1, 2, 10, 100, 997, 1000])
def test_v2_matches_v1(n):
    assert get_primes_v2(n) == get_primes_v1(n)


@pytest.mark.parametrize("n", [10, 99, 1000])
def test_v3_odd_layout(n):
    flags = get_primes_v3(n)
    assert len(flags) == (n + 1) // 2
    checked = [(2 * i + 3, f) for i, f in enumerate(flags) if 2 * i + 3 <= n]
    assert all(f == _trial(k) for k, f in checked)


def test_v4_odd_entries_match_across_blocks():
    n = 600_000
    reference = get_primes_v1(n)
    flags = get_primes_v4(n)
    assert len(flags) == n + 1
    assert not flags[0] and not flags[1]
    assert all(flags[k] == reference[k] for k in range(3, n, 2))


def test_v5_odd_entries_match_across_blocks():
    n = 600_000
    reference = get_primes_v1(n)
    flags = get_primes_v5(n)
    assert len(flags) == (n + 1) // 2
    assert all(flags[(k - 3) // 2] == reference[k] for k in range(3, n, 2))


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5])
@pytest.mark.parametrize("n", [100, 101])
def test_segmented_matches_serial(n, size):
    flags = get_primes_segmented(n, size)
    assert len(flags) == n
    assert flags == get_primes_v1(n)[:n]


def test_segmented_small_primes():
    flags = get_primes_segmented(30, 3)
    assert [k for k, f in enumerate(flags) if f] == SMALL_PRIMES


def test_limit_must_be_positive():
    with pytest.raises(ValueError):
        get_primes_v1(0)
    with pytest.raises(ValueError):
        get_primes_v5(-3)


def test_segmented_rejects_tiny_first_segment():
    with pytest.raises(ValueError):
        get_primes_segmented(10, 10)


def test_segmented_rejects_bad_arguments():
    with pytest.raises(ValueError):
        get_primes_segmented(1, 1)
    with pytest.raises(ValueError):
        get_primes_segmented(100, 0)