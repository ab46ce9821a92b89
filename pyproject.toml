[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numlab"
version = "0.1.0"
description = "Small numerical kernels with checks and timings: polynomial evaluation, root finding, sparse matrices, sieves, quadrature, Monte Carlo and partitioned work."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "numerical",
    "horner",
    "newton",
    "sparse-matrix",
    "monte-carlo",
    "simpson",
    "power-method",
    "sieve",
    "kd-tree",
    "benchmark",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
numlab-polybench = "numlab.polybench:main"
numlab-branchless = "numlab.branchless:main"
numlab-newton = "numlab.newton:main"
numlab-sparse = "numlab.sparse:main"
numlab-greeting = "numlab.greeting:main"
numlab-gradient = "numlab.gradient:main"
numlab-montecarlo = "numlab.montecarlo:main"
numlab-inner = "numlab.inner:main"
numlab-simpson = "numlab.simpson:main"
numlab-power-method = "numlab.power_method:main"
numlab-primes = "numlab.primes:main"
numlab-kdtree = "numlab.kdtree:main"
numlab-matmul = "numlab.matmul:main"

[tool.hatch.build.targets.wheel]
packages = ["numlab"]

[tool.hatch.build.targets.sdist]
include = ["numlab", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
