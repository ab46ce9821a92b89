import pytest

from numlab.inner import chunk_sizes, inner_product_v1, inner_product_v2, main


def sum_of_squares(n):
    return (n * (n + 1) * (2 * n + 1)) / 6.0


@pytest.mark.parametrize("n", [0, 1, 5, 6, 7, 100, 1001])
@pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 16])
def test_chunk_sizes_invariants(n, size):
    sizes = chunk_sizes(n, size)
    assert len(sizes) == size
    assert sum(sizes) == n
    assert max(sizes) - min(sizes) <= 1
    assert sizes == sorted(sizes, reverse=True)


@pytest.mark.parametrize("n", [5, 6, 7, 1000])
@pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 8])
def test_versions_match_closed_form(n, size):
    x = [float(k) for k in range(1, n + 1)]
    assert inner_product_v1(x, x, size) == sum_of_squares(n)
    assert inner_product_v2(x, x, size) == sum_of_squares(n)


def test_more_processes_than_elements():
    x = [1.0, 2.0, 3.0]
    y = [4.0, 5.0, 6.0]
    expected = sum(p * q for p, q in zip(x, y))
    assert inner_product_v1(x, y, 5) == expected
    assert inner_product_v2(x, y, 5) == expected


def test_empty_vectors():
    assert inner_product_v1([], [], 2) == 0.0
    assert inner_product_v2([], [], 2) == 0.0


def test_incompatible_sizes():
    with pytest.raises(ValueError):
        inner_product_v1([1.0, 2.0], [1.0], 2)
    with pytest.raises(ValueError):
        inner_product_v2([1.0], [1.0, 2.0], 2)


def test_invalid_size():
    with pytest.raises(ValueError):
        inner_product_v1([1.0], [1.0], 0)
    with pytest.raises(ValueError):
        chunk_sizes(4, 0)


def test_main_reports_zero_error(capsys):
    assert main(["--size", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert all(line.startswith("Elapsed: ") for line in lines)
    assert lines[0].endswith("| Error: 0")