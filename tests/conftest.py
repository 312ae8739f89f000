import matplotlib

matplotlib.use("Agg")

import pytest

from schrodinger_rk4.config import SimulationConfig
from schrodinger_rk4.wave import build_initial_wave


@pytest.fixture(scope="session")
def config():
    return SimulationConfig()


@pytest.fixture(scope="session")
def wave0(config):
    return build_initial_wave(config)
