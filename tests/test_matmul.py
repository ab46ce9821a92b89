import numpy as np
import pytest

from numlab.matmul import naive_matmul, naive_matmul_parallel


def _pair(rows, inner, cols, seed=0):
    rng = np.random.default_rng(seed)
    return rng.uniform(-1.0, 1.0, (rows, inner)), rng.uniform(-1.0, 1.0, (inner, cols))


def test_matches_numpy_square():
    a, b = _pair(6, 6, 6)
    assert np.allclose(naive_matmul(a, b), a @ b)


def test_matches_numpy_rectangular():
    a, b = _pair(2, 3, 4, seed=1)
    c = naive_matmul(a, b)
    assert c.shape == (2, 4)
    assert np.allclose(c, a @ b)


def test_identity_leaves_matrix_unchanged():
    _, m = _pair(1, 5, 5, seed=2)
    assert np.array_equal(naive_matmul(np.eye(5), m), m)


def test_accepts_nested_lists():
    a = [[1.0, 2.0], [3.0, 4.0]]
    b = [[5.0, 6.0], [7.0, 8.0]]
    assert np.array_equal(naive_matmul(a, b), np.array(a) @ np.array(b))


@pytest.mark.parametrize("threads", [1, 2, 3, 8])
def test_parallel_matches_serial(threads):
    a, b = _pair(5, 4, 3, seed=threads)
    assert np.allclose(naive_matmul_parallel(a, b, threads), naive_matmul(a, b))


def test_parallel_default_threads():
    a, b = _pair(7, 7, 7, seed=4)
    assert np.allclose(naive_matmul_parallel(a, b), a @ b)


def test_shape_mismatch_rejected():
    a, b = _pair(2, 3, 4)
    with pytest.raises(ValueError):
        naive_matmul(a, a)
    with pytest.raises(ValueError):
        naive_matmul_parallel(b, b, 2)


def test_one_dimensional_rejected():
    with pytest.raises(ValueError):
        naive_matmul([1.0, 2.0], [[1.0], [2.0]])


def test_parallel_rejects_zero_threads():
    a, b = _pair(2, 2, 2)
    with pytest.raises(ValueError):
        naive_matmul_parallel(a, b, 0)