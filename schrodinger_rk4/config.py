"""
Simulation parameters.

Units: h = 1, so ℏ = h / 2π, and m = 1.
The spatial domain is [-L/2, L/2] sampled every Δx, endpoints included.

    T-prefactor  = −ℏ² / (2 m Δx²)
    time factor  = Δt / (i ℏ)
"""

import math
from dataclasses import dataclass

from .complexnum import Complex

# ── Constantes físicas ───────────────────────────────────
H    = 1.0
MASS = 1.0

# ── Grade espacial / tempo ───────────────────────────────
LENGTH = 8.0                   # largura total do domínio
DX     = 0.01
DT     = 0.0005

# ── Pacote de onda (espaço de momento) ───────────────────
K0      = 10.0                 # centro de c(k)
K_RANGE = 10.0                 # corte: k ∈ [k0 − range, k0 + range]
K_STEP  = 1.0
K_WIDTH = 5.0                  # c(k) = exp(−((k − k0)/δk)²)

METHODS = ("stencil", "matrix")


def _positive(**values):
    for name, value in values.items():
        if not value > 0:
            raise ValueError(f"{name} must be positive, got {value!r}")


@dataclass(frozen=True)
class SimulationConfig:
    h: float = H
    mass: float = MASS
    length: float = LENGTH
    dx: float = DX
    dt: float = DT
    k0: float = K0
    k_range: float = K_RANGE
    k_step: float = K_STEP
    k_width: float = K_WIDTH
    method: str = "stencil"

    def __post_init__(self):
        _positive(h=self.h, mass=self.mass, length=self.length, dx=self.dx,
                  dt=self.dt, k_step=self.k_step, k_width=self.k_width)
        if self.k_range < 0:
            raise ValueError(f"k_range must be non-negative, got {self.k_range!r}")
        if self.method not in METHODS:
            raise ValueError(f"unknown method {self.method!r} (expected one of {METHODS})")

    @property
    def hbar(self):
        return self.h / (2 * math.pi)

    @property
    def x_min(self):
        return -self.length / 2

    @property
    def x_max(self):
        return self.length / 2

    @property
    def half_points(self):
        return int(round(self.length / (2 * self.dx)))

    @property
    def size(self):
        """N = L/Δx + 1 grid points."""
        return 2 * self.half_points + 1

    @property
    def kinetic_prefactor(self):
        return -(self.hbar**2 / (2 * self.mass)) / self.dx**2

    @property
    def time_factor(self):
        """Δt / (iℏ) as a Complex."""
        return self.dt / Complex(0.0, self.hbar)


@dataclass(frozen=True)
class Simulation2DConfig:
    """Initial 2D packet only; there is no 2D time stepping."""

    length: float = LENGTH
    dl: float = 0.1
    k0: float = K0
    k_range: float = 5.0
    k_step: float = 0.5
    k_width: float = K_WIDTH

    def __post_init__(self):
        _positive(length=self.length, dl=self.dl, k_step=self.k_step, k_width=self.k_width)
        if self.k_range < 0:
            raise ValueError(f"k_range must be non-negative, got {self.k_range!r}")

    @property
    def x_min(self):
        return -self.length / 2

    @property
    def x_max(self):
        return self.length / 2

    @property
    def half_points(self):
        return int(round(self.length / (2 * self.dl)))
