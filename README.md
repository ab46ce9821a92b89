# numlab

A collection of small numerical kernels, most with a command that runs the
kernel, checks its result and reports how long it took.

## Contents

- `numlab.timing`: `timeit(f)` returns the wall-clock time of one call in
  whole milliseconds; `format_vector(values)` renders `[a, b, c]` (an empty
  sequence gives an empty string).
- `numlab.powers`: `pow_recursive` and `pow_iterative` raise a value to a
  non-negative integer power by squaring; `rel_error(a, b)` is the relative
  difference of two numbers.
- `numlab.horner`: polynomial evaluation term by term (`eval_std`,
  `eval_pow_integer`, `eval_squaring`, `eval_branchless`) and by Horner's
  scheme (`eval_horner`); `evaluate_poly` applies one of them to many points,
  optionally in a thread pool; `parse_parameters` reads `name=number` pairs.
- `numlab.polybench`: `sample_points`, `coefficients` and `run_benchmarks`,
  timing every evaluation strategy.
- `numlab.branchless`: `smaller_standard` / `smaller_branchless` and
  `toupper_standard` / `toupper_branchless`, plus `random_alphanum`.
- `numlab.shapes`: the abstract `Shape` with a `name` and an `area()` method,
  and the dataclasses `Circle(radius)` and `Rectangle(basis, height)`.
- `numlab.newton`: `NewtonSolver` with residual and step tolerances; after
  `solve(x0)` it exposes `result`, `residual`, `step`, `iterations` and
  `history`.
- `numlab.drills`: `sorted_unique`, `word_count`, `evaluate_named` and
  `even_squares`.
- `numlab.sparse`: `CooMatrix` (optionally kept sorted) and `MapMatrix`
  (ordered or unordered rows), both `SparseMatrix` subclasses indexed as
  `m[i, j]`, growing as entries are written, with `nrows`, `ncols`, `nnz`,
  `items()`, `vmult(x)` and `format()`; `fill_tridiagonal` fills and checks a
  tridiagonal matrix.
- `numlab.greeting`: `greeting_message` and `gather_messages`.
- `numlab.gradient`: `compute_gradient` by central differences and
  `compute_gradient_partitioned`, components shared among worker threads.
- `numlab.montecarlo`: `montecarlo` integrates over [-1, 1] and returns the
  estimate with its variance; `montecarlo_partitioned` and
  `local_sample_count` split the samples among seeded ranks.
- `numlab.inner`: `chunk_sizes`, `inner_product_v1` (equal chunks plus a
  remainder handled by rank 0) and `inner_product_v2` (balanced chunks).
- `numlab.simpson`: `simpson`, `simpson_threaded` and
  `integrate_quarter_circle`.
- `numlab.power_method`: `tridiagonal(n)`, `power_method` and
  `power_method_partitioned` (equal row blocks), returning a `PowerResult`
  with `vector`, `iterations`, `error` and `eigenvalue`.
- `numlab.primes`: sieves of Eratosthenes `get_primes_v1` to `get_primes_v5`
  (plain, byte array, odd numbers only, cache-blocked) and
  `get_primes_segmented` over ranks.
- `numlab.kdtree`: `build_kdtree` and `build_kdtree_parallel` return, for each
  point, the indices of its left and right children (`None` when absent).
- `numlab.matmul`: `naive_matmul` and `naive_matmul_parallel` (row blocks in
  threads).

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Using it from Python

```python
from numlab.powers import pow_iterative, pow_recursive
from numlab.horner import eval_horner, eval_std
from numlab.drills import sorted_unique

pow_iterative(3, 5)                # 243
pow_recursive(2.0, 10)             # 1024.0
eval_horner([1.0, 2.0, 3.0], 2.0)  # 1 + 2*2 + 3*4 = 17.0
eval_std([1.0, 2.0, 3.0], 2.0)     # same value, computed term by term
sorted_unique([3, 1, 3, 2, 1])     # [1, 2, 3]
```

```python
from numlab.newton import NewtonSolver

solver = NewtonSolver(lambda x: x * x - 2.0, lambda x: 2.0 * x)
solver.solve(1.0)      # converges towards the square root of 2
solver.iterations, solver.residual
```

```python
from numlab.sparse import MapMatrix

m = MapMatrix()
m[0, 0] = 1
m[1, 1] = 1
m.vmult([2.0, 3.0])    # [2.0, 3.0]
```

```python
from numlab.primes import get_primes_v1

flags = get_primes_v1(20)   # flags[k] is true when k is prime
```

## Commands

```
numlab-polybench [params]            # default parameter file: params.dat
numlab-branchless [--tests N] [--seed S]
numlab-newton [x0]
numlab-sparse [--size N] [--print]
numlab-greeting [greeting] [--size N]
numlab-gradient [--size N]
numlab-montecarlo [n] [--size N]
numlab-inner [--size N]
numlab-simpson intervals threads [--size N]
numlab-power-method [--n N] [--size N] [--max-iter M] [--tol T] [--seed S]
numlab-primes [--n N] [--size N]
numlab-kdtree [--workers N]
numlab-matmul n [--threads N] [--seed S]
```

Pass `--help` to any of them for details. `numlab-polybench` reads a file of
`name=number` lines and needs `x_0`, `x_f`, `n_points` and `degree`, for
example:

```
x_0=0
x_f=1
n_points=100000
degree=10
```

## What it does not do

The `--size` options and the `*_partitioned`, `*_segmented` and rank-based
functions split the work the way separate processes would, but all of it runs
inside one Python process, serially or in a thread pool. There is no
communication between machines or processes, and no launcher for running the
kernels on a cluster.