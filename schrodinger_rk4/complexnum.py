"""
Complex value type used by the RK4 engine.

    (a+bi) ± (c+di) = (a±c) + (b±d)i
    (a+bi) · (c+di) = (ac − bd) + (ad + bc)i
    (a+bi) / (c+di) = (a+bi)(c−di) / (c² + d²)
    exp(a+bi)       = eᵃ · (cos b + i sin b)

Values are immutable: every operator returns a new Complex, the in-place
operators rebind their target. Equality is exact pair equality.
"""

import math

import numpy as np


def _div(num, den):
    # x / 0.0 yields ±inf / nan instead of ZeroDivisionError
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(num) / den)


def _exp(value):
    # overflow gives inf instead of OverflowError
    with np.errstate(over="ignore"):
        return float(np.exp(np.float64(value)))


def _fmt(value):
    if value.is_integer():
        return "%d" % value
    return repr(value)


class Complex:

    __slots__ = ("_re", "_im")

    # numpy scalars defer to the reflected operators below
    __array_ufunc__ = None

    def __init__(self, re, im=0.0):
        object.__setattr__(self, "_re", float(re))
        object.__setattr__(self, "_im", float(im))

    def __setattr__(self, name, value):
        raise AttributeError("Complex is immutable")

    # ── constructors ─────────────────────────────────────
    @classmethod
    def from_real(cls, value):
        return cls(value, 0.0)

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0)

    @classmethod
    def one(cls):
        return cls(1.0, 0.0)

    @staticmethod
    def exp(z):
        """Euler's formula: e^re · (cos(im) + i·sin(im))."""
        z = _as_complex(z)
        return _exp(z._re) * Complex(math.cos(z._im), math.sin(z._im))

    # ── accessors ────────────────────────────────────────
    @property
    def re(self):
        return self._re

    @property
    def im(self):
        return self._im

    def real(self):
        return self._re

    def imag(self):
        return self._im

    def abs_squared(self):
        """|z|² = re² + im²  (no square root)."""
        return self._re * self._re + self._im * self._im

    def conjugate(self):
        return Complex(self._re, -self._im)

    def is_zero(self):
        return self._re == 0.0 and self._im == 0.0

    # ── arithmetic ───────────────────────────────────────
    def __add__(self, other):
        if isinstance(other, Complex):
            return Complex(self._re + other._re, self._im + other._im)
        if _is_real(other):
            return Complex(self._re + other, self._im)
        return NotImplemented

    def __radd__(self, other):
        if _is_real(other):
            return Complex(self._re + other, self._im)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Complex):
            return Complex(self._re - other._re, self._im - other._im)
        if _is_real(other):
            return Complex(self._re - other, self._im)
        return NotImplemented

    def __rsub__(self, other):
        if _is_real(other):
            return Complex(other - self._re, -self._im)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Complex):
            return Complex(
                self._re * other._re - self._im * other._im,
                self._re * other._im + self._im * other._re,
            )
        if _is_real(other):
            return Complex(self._re * other, self._im * other)
        return NotImplemented

    def __rmul__(self, other):
        if _is_real(other):
            return Complex(self._re * other, self._im * other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Complex):
            num = self * other.conjugate()
            den = other._re * other._re + other._im * other._im
            return Complex(_div(num._re, den), _div(num._im, den))
        if _is_real(other):
            return Complex(_div(self._re, other), _div(self._im, other))
        return NotImplemented

    def __rtruediv__(self, other):
        if _is_real(other):
            return Complex(other, 0.0) / self
        return NotImplemented

    def __neg__(self):
        return Complex(-self._re, -self._im)

    def __pos__(self):
        return self

    # ── comparison / conversion ──────────────────────────
    def __eq__(self, other):
        if isinstance(other, Complex):
            return self._re == other._re and self._im == other._im
        if _is_real(other):
            return self._re == other and self._im == 0.0
        return NotImplemented

    def __hash__(self):
        if self._im == 0.0:
            return hash(self._re)
        return hash((self._re, self._im))

    def __complex__(self):
        return complex(self._re, self._im)

    def __reduce__(self):
        return (Complex, (self._re, self._im))

    def __repr__(self):
        return f"Complex({self._re!r}, {self._im!r})"

    def __str__(self):
        if self._im < 0:
            return f"{_fmt(self._re)}{_fmt(self._im)}i"
        return f"{_fmt(self._re)}+{_fmt(self._im)}i"

    def __format__(self, spec):
        if not spec:
            return str(self)
        sign = "" if self._im < 0 else "+"
        return f"{format(self._re, spec)}{sign}{format(self._im, spec)}i"


def i():
    """The imaginary unit."""
    return Complex(0.0, 1.0)


def _is_real(value):
    return isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool)


def _as_complex(value):
    if isinstance(value, Complex):
        return value
    if _is_real(value):
        return Complex(value, 0.0)
    value = complex(value)
    return Complex(value.real, value.imag)
