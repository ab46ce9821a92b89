"""Small numerical kernels with checks and timings: powers, polynomials, root finding,
sparse matrices, sieves, quadrature, Monte Carlo, k-d trees and partitioned work."""

__version__ = "0.1.0"