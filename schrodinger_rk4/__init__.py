"""Time-dependent Schrödinger equation on a finite-difference grid, fixed-step RK4."""

from .complexnum import Complex, i
from .config import Simulation2DConfig, SimulationConfig
from .operators import MatrixHamiltonian, StencilHamiltonian, make_hamiltonian
from .quadrature import simpsons_rule
from .stepper import Stepper, rk4_step, step_n
from .wave import build_initial_wave, build_initial_wave_2d, normalize

__version__ = "0.1.0"
