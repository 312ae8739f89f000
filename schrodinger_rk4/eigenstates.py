"""
Stationary states of the infinite square well by RK4 shooting.

    Eₙ = n² h² / (8 m L²)
    ψ'' = 2m (V(x) − Eₙ) ψ / ℏ²,     ψ(−L/2) = 0,  ψ'(−L/2) = 1 − i

The ODE is integrated on Complex scalars, then normalized like the
wave packets.
"""

import numpy as np

from .complexnum import Complex
from .potentials import InfiniteWell
from .wave import normalize


def infinite_well_energy(n, config):
    return n**2 * config.h**2 / (8 * config.mass * config.length**2)


def second_order_rk4(y0, dy0, x0, xe, h, f):
    """
    RK4 for y'' = f(y, y', x) sampled at x_j = j·h, j = x0/h … xe/h.

    The value recorded at x_j is the state before the step from x_j.
    Returns (xs, ys) as lists.
    """
    xs = [j * h for j in range(int(round(x0 / h)), int(round(xe / h)) + 1)]
    ys = []
    y, dy = y0, dy0

    for x in xs:
        ys.append(y)

        l1 = h * dy
        k1 = h * f(y, dy, x)

        l2 = h * (dy + 0.5 * k1)
        k2 = h * f(y + 0.5 * l1, dy + 0.5 * k1, x + 0.5 * h)

        l3 = h * (dy + 0.5 * k2)
        k3 = h * f(y + 0.5 * l2, dy + 0.5 * k2, x + 0.5 * h)

        l4 = h * (dy + k3)
        k4 = h * f(y + l3, dy + k3, x + h)

        y += (l1 + 2.0 * l2 + 2.0 * l3 + l4) / 6.0
        dy += (k1 + 2.0 * k2 + 2.0 * k3 + k4) / 6.0

    return xs, ys


def stationary_state(n, config, potential=None):
    """n-th state of the well [-L/2, L/2]. Returns (x, ψ) normalized."""
    if n < 1:
        raise ValueError(f"quantum number must be >= 1, got {n}")
    if potential is None:
        potential = InfiniteWell(config.length)
    energy = infinite_well_energy(n, config)
    scale = 2 * config.mass / config.hbar**2

    def rhs(y, _dy, x):
        return scale * (float(potential(x)) - energy) * y

    xs, ys = second_order_rk4(
        Complex(0.0, 0.0),
        Complex(1.0, -1.0),
        config.x_min,
        config.x_max,
        config.dx,
        rhs,
    )
    psi = np.array([complex(y) for y in ys])
    return np.array(xs), normalize(psi, config.x_min, config.x_max)
