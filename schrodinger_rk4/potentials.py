"""
Potential shapes V(x).

A closed set of shapes, each callable on a float or a numpy array (works
the same way as the potential(x) functions of the experiment scripts):

    ZeroPotential          V = 0
    RectangularBarrier     V = V₀  for left ≤ x ≤ right
    QuadraticWell          V = k (x − x₀)²
    InfiniteWell           V = 0 inside [-w/2, w/2], +inf outside
    SumPotential           V = Σ Vᵢ      (shape + shape)

Shapes flagged `is_zero` are never evaluated by the operators.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np


class Potential(ABC):

    is_zero = False

    @abstractmethod
    def __call__(self, x):
        ...

    def __add__(self, other):
        if not isinstance(other, Potential):
            return NotImplemented
        return SumPotential(_flatten(self) + _flatten(other))


@dataclass(frozen=True)
class ZeroPotential(Potential):

    is_zero = True

    def __call__(self, x):
        return np.zeros_like(np.asarray(x, dtype=float))


@dataclass(frozen=True)
class RectangularBarrier(Potential):
    height: float
    left: float
    right: float

    def __call__(self, x):
        x = np.asarray(x, dtype=float)
        return self.height * ((x >= self.left) & (x <= self.right)).astype(float)


@dataclass(frozen=True)
class QuadraticWell(Potential):
    strength: float
    center: float = 0.0

    def __call__(self, x):
        x = np.asarray(x, dtype=float)
        return self.strength * (x - self.center)**2


@dataclass(frozen=True)
class InfiniteWell(Potential):
    width: float

    def __call__(self, x):
        x = np.asarray(x, dtype=float)
        inside = (x >= -self.width / 2) & (x <= self.width / 2)
        return np.where(inside, 0.0, np.inf)


@dataclass(frozen=True)
class SumPotential(Potential):
    shapes: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "shapes", tuple(self.shapes))

    @property
    def is_zero(self):
        return all(s.is_zero for s in self.shapes)

    def __call__(self, x):
        total = np.zeros_like(np.asarray(x, dtype=float))
        for shape in self.shapes:
            total = total + shape(x)
        return total


def _flatten(p):
    return p.shapes if isinstance(p, SumPotential) else (p,)


def is_zero_potential(v):
    return v is None or getattr(v, "is_zero", False)


def evaluate_potential(v, x):
    """V(xᵢ) as a complex array; any callable is accepted (real or complex valued)."""
    x = np.asarray(x, dtype=float)
    if is_zero_potential(v):
        return np.zeros(x.shape, dtype=complex)
    if isinstance(v, Potential):
        return np.asarray(v(x), dtype=complex)
    # plain callables are treated as scalar functions (may return Complex)
    values = [complex(v(float(xi))) for xi in x.ravel()]
    return np.asarray(values, dtype=complex).reshape(x.shape)
