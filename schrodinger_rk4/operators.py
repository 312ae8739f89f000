"""
Discrete Hamiltonian operators on the closed grid.

Kinetic term (finite differences, ψ assumed to vanish just outside the grid):

    T = −ℏ²/(2mΔx²) · D,     D = tridiag(1, −2, 1)

Right-hand side of one RK4 stage:

    F(ψ) = Δt/(iℏ) · (T ψ + V ψ)

Two interchangeable implementations of F:
    StencilHamiltonian   O(n)   second difference applied directly
    MatrixHamiltonian    O(n²)  U = Δt/(iℏ)·(T + V) precomputed, U @ ψ

The matrix form is the slow but easy-to-verify reference for the stencil.
"""

import logging
from abc import ABC, abstractmethod

import numpy as np

from .potentials import evaluate_potential, is_zero_potential

logger = logging.getLogger(__name__)


# ── Matrix form ──────────────────────────────────────────

def derivative_matrix(size):
    """−2 on the diagonal, +1 right above and below it."""
    m = np.zeros((size, size), dtype=complex)
    rows = np.arange(size)
    m[rows, rows] = -2.0
    m[rows[:-1], rows[:-1] + 1] = 1.0
    m[rows[1:], rows[1:] - 1] = 1.0
    return m


def kinetic_matrix(config, size):
    return config.kinetic_prefactor * derivative_matrix(size)


def potential_matrix(potential, x):
    """Diagonal matrix with V(xᵢ); all zeros without a potential."""
    size = len(x)
    m = np.zeros((size, size), dtype=complex)
    if not is_zero_potential(potential):
        rows = np.arange(size)
        m[rows, rows] = evaluate_potential(potential, x)
    return m


def propagator_matrix(config, x, potential=None):
    """U = Δt/(iℏ) · (T + V)."""
    T = kinetic_matrix(config, len(x))
    V = potential_matrix(potential, x)
    return complex(config.time_factor) * (T + V)


# ── Stencil form ─────────────────────────────────────────

def stencil_derivative(f):
    """
    Unscaled second difference with one-sided ends:

        out[0]   = −2f₀ + f₁
        out[i]   = fᵢ₋₁ − 2fᵢ + fᵢ₊₁
        out[N−1] = f_{N−2} − 2f_{N−1}
    """
    f = np.asarray(f)
    out = -2.0 * f
    out[:-1] += f[1:]
    out[1:] += f[:-1]
    return out


# ── Strategies ───────────────────────────────────────────

class HamiltonianOperator(ABC):
    """F(ψ) = Δt/(iℏ)·(T + V)ψ, one RK4 stage worth of time derivative."""

    @abstractmethod
    def apply(self, psi):
        ...

    def __call__(self, psi):
        return self.apply(psi)


class StencilHamiltonian(HamiltonianOperator):

    def __init__(self, config, x, potential=None):
        self.config = config
        self._prefactor = config.kinetic_prefactor
        self._time_factor = complex(config.time_factor)
        # no potential → never evaluate or multiply by it
        self._V = None if is_zero_potential(potential) else evaluate_potential(potential, x)

    def apply(self, psi):
        psi = np.asarray(psi, dtype=complex)
        deriv = stencil_derivative(self._prefactor * psi)
        if self._V is not None:
            deriv = deriv + self._V * psi
        return self._time_factor * deriv


class MatrixHamiltonian(HamiltonianOperator):

    def __init__(self, config, x, potential=None, U=None):
        self.config = config
        self.U = propagator_matrix(config, x, potential) if U is None else U
        logger.debug("propagator matrix built: %s", self.U.shape)

    def apply(self, psi):
        return self.U @ np.asarray(psi, dtype=complex)


_METHODS = {
    "stencil": StencilHamiltonian,
    "matrix": MatrixHamiltonian,
}


def make_hamiltonian(config, x, potential=None):
    """Pick the implementation named by config.method."""
    return _METHODS[config.method](config, x, potential)
