"""
Initial wave packets and normalization.

The packet is a superposition of plane waves with a Gaussian weight in
momentum space:

    ψ(x) = Σₖ c(k) · e^{ikx},     c(k) = exp(−((k − k₀)/δk)²)

k runs over [k₀ − Δ, k₀ + Δ] (closed) and x over [-L/2, L/2] (closed).
Normalization uses the Simpson weighting of `quadrature.simpsons_rule`:

    ψ → ψ / √(∫|ψ|² dx)
"""

import logging

import numpy as np

from .quadrature import simpsons_rule

logger = logging.getLogger(__name__)


def make_grid(config):
    """x_j = j·Δx for j = −L/(2Δx) … L/(2Δx)."""
    n = config.half_points
    return np.arange(-n, n + 1) * config.dx


def momentum_samples(k0, k_range, k_step):
    # last sample never passes k0 + k_range
    n = int(np.floor(2 * k_range / k_step + 1e-9))
    return (k0 - k_range) + np.arange(n + 1) * k_step


def gaussian_weights(k, k0, k_width):
    return np.exp(-((np.asarray(k) - k0) / k_width)**2)


def plane_wave_sum(x, k, c):
    """Σₖ c(k) e^{ikx} for every x."""
    return np.exp(1j * np.outer(x, k)) @ c


def probability_density(psi):
    """|ψ|² = Re² + Im² per point."""
    psi = np.asarray(psi)
    return psi.real**2 + psi.imag**2


def total_probability(psi, lower, upper):
    return simpsons_rule(probability_density(psi), lower, upper)


def normalize(psi, lower, upper):
    psi = np.asarray(psi, dtype=complex)
    integral = total_probability(psi, lower, upper)
    # each amplitude is scaled by the root since |ψ|² is what integrates to 1
    return psi / np.sqrt(integral)


def build_initial_wave(config):
    """Returns (x, ψ₀) on the closed grid, normalized."""
    x = make_grid(config)
    k = momentum_samples(config.k0, config.k_range, config.k_step)
    c = gaussian_weights(k, config.k0, config.k_width)
    psi = plane_wave_sum(x, k, c)
    logger.debug("wave packet: %d points, %d momentum samples", len(x), len(k))
    return x, normalize(psi, config.x_min, config.x_max)


# ── 2D ───────────────────────────────────────────────────

def total_probability_2d(psi, lower, upper):
    """Nested Simpson integral: each row first, then the row integrals."""
    rows = [simpsons_rule(probability_density(row), lower, upper) for row in psi]
    return simpsons_rule(rows, lower, upper)


def normalize_2d(psi, lower, upper):
    psi = np.asarray(psi, dtype=complex)
    total = total_probability_2d(psi, lower, upper)
    logger.debug("2D normalization integral: %r", total)
    return psi * (1.0 / np.sqrt(total))


def build_initial_wave_2d(config):
    """
    ψ(x, z) = Σ_{kx,kz} c(kx) c(kz) e^{i kx x} e^{i kz z}

    The double sum factorizes, so it is built as the outer product of
    the two 1D sums. Returns (x, z, ψ) with ψ indexed [x, z].
    """
    n = config.half_points
    x = np.arange(-n, n + 1) * config.dl
    z = x.copy()
    k = momentum_samples(config.k0, config.k_range, config.k_step)
    c = gaussian_weights(k, config.k0, config.k_width)
    psi = np.outer(plane_wave_sum(x, k, c), plane_wave_sum(z, k, c))
    return x, z, normalize_2d(psi, config.x_min, config.x_max)
