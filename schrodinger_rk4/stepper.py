"""
Fixed-step RK4 for  iℏ ∂ψ/∂t = (T + V) ψ.

With F(ψ) = Δt/(iℏ)·(T + V)ψ already holding one Euler step:

    k1 = F(ψ)
    k2 = F(ψ + k1/2)
    k3 = F(ψ + k2/2)
    k4 = F(ψ + k3)
    ψ' = ψ + (k1 + 2k2 + 2k3 + k4) / 6

There is no "integrate to T": the caller decides how many steps to take.
"""

import numpy as np

from .operators import MatrixHamiltonian, StencilHamiltonian, make_hamiltonian
from .wave import build_initial_wave

SPEED_RANGE = (1, 200)


def rk4_step(psi, operator):
    """One step; psi is left untouched and a new array is returned."""
    psi = np.asarray(psi, dtype=complex)
    k1 = operator(psi)
    k2 = operator(psi + 0.5 * k1)
    k3 = operator(psi + 0.5 * k2)
    k4 = operator(psi + k3)
    return psi + (1.0 / 6.0) * (k1 + 2.0 * k2 + 2.0 * k3 + k4)


def step_n(psi, operator, n):
    if n < 0:
        raise ValueError(f"number of steps must be non-negative, got {n}")
    psi = np.array(psi, dtype=complex)
    for _ in range(n):
        psi = rk4_step(psi, operator)
    return psi


def stencil_step(psi, config, x, potential=None):
    return rk4_step(psi, StencilHamiltonian(config, x, potential))


def matrix_step(psi, U):
    """RK4 step with a precomputed propagator U = Δt/(iℏ)·(T + V)."""
    return rk4_step(psi, lambda f: U @ f)


class Stepper:
    """
    Holds the running state for a display loop.

    Each `advance()` takes `speed` RK4 steps, so the playback rate can be
    changed without touching Δt.
    """

    def __init__(self, config, potential=None, x=None, psi=None):
        self.config = config
        self.potential = potential
        if (x is None) != (psi is None):
            raise ValueError("x and psi must be given together")
        if x is None:
            x, psi = build_initial_wave(config)
        self.x = x
        self.psi = np.asarray(psi, dtype=complex)
        self.operator = make_hamiltonian(config, x, potential)
        self.speed = SPEED_RANGE[0]
        self.time = 0.0
        self.n_steps = 0

    def step(self, n=1):
        self.psi = step_n(self.psi, self.operator, n)
        self.n_steps += n
        self.time += self.config.dt * n
        return self.psi

    def advance(self):
        return self.step(self.speed)

    def speed_up(self):
        self.speed = min(self.speed + 1, SPEED_RANGE[1])

    def slow_down(self):
        self.speed = max(self.speed - 1, SPEED_RANGE[0])

    @property
    def method(self):
        return "matrix" if isinstance(self.operator, MatrixHamiltonian) else "stencil"
