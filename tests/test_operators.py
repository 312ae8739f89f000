import numpy as np
import pytest

from schrodinger_rk4.config import SimulationConfig
from schrodinger_rk4.operators import (
    MatrixHamiltonian,
    StencilHamiltonian,
    derivative_matrix,
    kinetic_matrix,
    make_hamiltonian,
    potential_matrix,
    propagator_matrix,
    stencil_derivative,
)
from schrodinger_rk4.potentials import (
    QuadraticWell,
    RectangularBarrier,
    ZeroPotential,
)


def test_derivative_matrix_layout():
    m = derivative_matrix(5)
    expected = np.array([
        [-2, 1, 0, 0, 0],
        [1, -2, 1, 0, 0],
        [0, 1, -2, 1, 0],
        [0, 0, 1, -2, 1],
        [0, 0, 0, 1, -2],
    ])
    assert np.array_equal(m, expected)


def test_derivative_matrix_end_rows_have_one_neighbor():
    m = derivative_matrix(801)
    assert np.count_nonzero(m[0]) == 2
    assert np.count_nonzero(m[-1]) == 2
    assert np.count_nonzero(m[400]) == 3
    assert np.count_nonzero(m) == 3 * 801 - 2


def test_single_point_matrix():
    assert np.array_equal(derivative_matrix(1), np.array([[-2]]))


def test_kinetic_matrix_scaling(config):
    T = kinetic_matrix(config, 4)
    assert T[1, 1] == pytest.approx(-2 * config.kinetic_prefactor)
    assert T[1, 1] == pytest.approx(config.hbar**2 / (config.mass * config.dx**2))


def test_stencil_one_sided_ends():
    f = np.array([1.0, 2.0, 4.0, 8.0])
    out = stencil_derivative(f)
    assert out[0] == -2 * 1.0 + 2.0
    assert out[1] == 1.0 - 4.0 + 4.0
    assert out[2] == 2.0 - 8.0 + 8.0
    assert out[-1] == 4.0 - 16.0
    # input untouched
    assert f.tolist() == [1.0, 2.0, 4.0, 8.0]


def test_stencil_matches_matrix():
    rng = np.random.default_rng(3)
    f = rng.normal(size=50) + 1j * rng.normal(size=50)
    assert np.allclose(stencil_derivative(f), derivative_matrix(50) @ f, atol=1e-14)


def test_potential_matrix_is_diagonal():
    x = np.linspace(-1, 1, 9)
    m = potential_matrix(QuadraticWell(2.0), x)
    assert np.array_equal(np.diag(m).real, 2.0 * x**2)
    assert np.count_nonzero(m - np.diag(np.diag(m))) == 0


def test_zero_potential_matrix():
    x = np.linspace(-1, 1, 9)
    assert not potential_matrix(ZeroPotential(), x).any()
    assert not potential_matrix(None, x).any()


def test_plain_callable_potential():
    x = np.array([0.0, 1.0, 3.0])
    m = potential_matrix(lambda xi: 1.0 if xi > 2 else 0.0, x)
    assert np.diag(m).tolist() == [0, 0, 1]


def test_propagator_prefactor(config):
    x = np.arange(-2, 3) * config.dx
    U = propagator_matrix(config, x)
    tf = config.dt / (1j * config.hbar)
    assert U[2, 2] == pytest.approx(tf * -2 * config.kinetic_prefactor)
    assert U[2, 3] == pytest.approx(tf * config.kinetic_prefactor)


@pytest.mark.parametrize("potential", [
    None,
    RectangularBarrier(60.0, 2.0, 2.5),
    QuadraticWell(20.0) + RectangularBarrier(5.0, -1.0, 1.0),
])
def test_stencil_and_matrix_hamiltonians_agree(config, wave0, potential):
    x, psi = wave0
    stencil = StencilHamiltonian(config, x, potential).apply(psi)
    matrix = MatrixHamiltonian(config, x, potential).apply(psi)
    assert np.max(np.abs(stencil - matrix)) < 1e-12


def test_zero_potential_skips_evaluation(config):
    class Exploding(ZeroPotential):
        def __call__(self, x):
            raise AssertionError("zero potential should not be evaluated")

    x = np.arange(-2, 3) * config.dx
    h = StencilHamiltonian(config, x, Exploding())
    h.apply(np.ones(5, dtype=complex))


def test_make_hamiltonian_selects_method(config):
    x = np.arange(-2, 3) * config.dx
    assert isinstance(make_hamiltonian(config, x), StencilHamiltonian)
    matrix_cfg = SimulationConfig(method="matrix")
    assert isinstance(make_hamiltonian(matrix_cfg, x), MatrixHamiltonian)
