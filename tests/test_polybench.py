import math

import pytest

from numlab.polybench import coefficients, main, run_benchmarks, sample_points


def test_sample_points_endpoints_and_spacing():
    points = sample_points(0.0, 1.0, 11)
    assert len(points) == 11
    assert points[0] == 0.0
    assert math.isclose(points[-1], 1.0)
    gaps = [b - a for a, b in zip(points, points[1:])]
    assert all(math.isclose(g, gaps[0]) for g in gaps)


def test_sample_points_too_few():
    with pytest.raises(ValueError):
        sample_points(0.0, 1.0, 1)


def test_coefficients_shape():
    coeffs = coefficients(5)
    assert len(coeffs) == 6
    assert coeffs[0] == 0.0
    assert all(-2.0 <= c <= 2.0 for c in coeffs)


def test_run_benchmarks_reports_every_strategy():
    params = {"x_0": 0.0, "x_f": 1.0, "n_points": 50.0, "degree": 4.0}
    result = run_benchmarks(params, False)
    assert len(result) == 5
    assert "horner" in result
    assert all(isinstance(v, int) and v >= 0 for v in result.values())


def test_run_benchmarks_missing_parameter():
    with pytest.raises(KeyError):
        run_benchmarks({"x_0": 0.0}, False)


def test_main_prints_report(tmp_path, capsys):
    path = tmp_path / "params.dat"
    path.write_text("x_0=0\nx_f=1\nn_points=50\ndegree=3\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Parsed parameter are:" in out
    assert "-- n_points: 50" in out
    assert "parallel execution: ON" in out
    assert "parallel execution: OFF" in out
    assert out.count("Elapsed:") == 10