import math
import random

import numpy as np
import pytest

from schrodinger_rk4.complexnum import Complex, i


def test_basic_arithmetic():
    a = 2. - 5. * i()
    b = -4. + 9. * i()
    assert a + b == -2. + 4. * i()
    assert a - b == 6. - 14. * i()
    assert a * b == 37. + 38. * i()
    assert a / b == -53. / 97. + 2. / 97. * i()
    assert i() * i() == Complex(-1., 0.)


def test_real_complex_arithmetic():
    assert 2. - 5. * i() == Complex(2., -5.)
    assert -4. + 9. * i() == Complex(-4., 9.)
    assert 3. * (1. - 2. * i()) == Complex(3., -6.)
    assert 1. / (4. + 6. * i()) == Complex(1. / 13., -3. / 26.)


def test_mirrored_real_operands():
    c = Complex(1.5, -2.0)
    assert 4. + c == c + 4.
    assert 4. * c == c * 4.
    assert 4. - c == Complex(2.5, 2.0)
    assert c - 4. == Complex(-2.5, -2.0)
    assert c / 2. == Complex(0.75, -1.0)


def test_numpy_scalars_use_complex_operators():
    c = Complex(1.0, 2.0)
    assert np.float64(2.0) * c == Complex(2.0, 4.0)
    assert np.float64(1.0) - c == Complex(0.0, -2.0)


def test_in_place_operators():
    a = 2. - 5. * i()
    a += -4. + 9. * i()
    assert a == -2. + 4. * i()

    s = 2. - 5. * i()
    s -= -4. + 9. * i()
    assert s == 6. - 14. * i()

    m = 2. - 5. * i()
    m *= -4. + 9. * i()
    assert m == 37. + 38. * i()

    d = 2. - 5. * i()
    d /= -4. + 9. * i()
    assert d == -53. / 97. + 2. / 97. * i()

    r = Complex(1., 1.)
    r *= 2.
    assert r == Complex(2., 2.)


def test_operands_are_not_mutated():
    a = Complex(1., 2.)
    b = Complex(3., 4.)
    a + b
    a * b
    assert a == Complex(1., 2.)
    assert b == Complex(3., 4.)
    with pytest.raises(AttributeError):
        a.re = 5.


def test_exponential():
    assert (Complex.exp(0. - i() * math.pi) - Complex(-1., 0.)).abs_squared() < 1e-30
    assert Complex.exp(Complex(1., 0.)).real() == pytest.approx(math.e)
    assert Complex.exp(Complex(1., 0.)).imag() == 0.


def test_conjugate_and_accessors():
    c = Complex(3., -4.)
    assert c.conjugate() == Complex(3., 4.)
    assert c.real() == 3.
    assert c.imag() == -4.
    assert c.abs_squared() == 25.
    assert complex(c) == 3 - 4j


def test_display():
    assert f"{5. + 2. * i()}" == "5+2i"
    assert f"{5. - 2. * i()}" == "5-2i"
    assert str(Complex(0.5, 0.25)) == "0.5+0.25i"


def test_division_by_zero_is_not_finite():
    z = Complex(1., 1.) / Complex.zero()
    assert not math.isfinite(z.re)
    assert not math.isfinite(z.im)
    assert not math.isfinite((Complex(1., 0.) / 0.).re)


def test_identities():
    rng = random.Random(7)
    for _ in range(200):
        a = Complex(rng.uniform(-10, 10), rng.uniform(-10, 10))
        b = Complex(rng.uniform(-10, 10), rng.uniform(-10, 10))
        assert ((a + b) - b - a).abs_squared() < 1e-24
        assert ((a * b) / b - a).abs_squared() < 1e-24


def test_hash_matches_equality():
    assert hash(Complex(2., 0.)) == hash(2.)
    assert len({Complex(1., 2.), Complex(1., 2.)}) == 1


def test_exponential_overflow_is_infinite():
    z = Complex.exp(Complex(1000., 0.))
    assert math.isinf(z.re)
