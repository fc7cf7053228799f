import numpy as np
import pandas as pd
import pytest

from survsim.core import COVARIATE_NAMES


@pytest.fixture
def flat_covar():
    """All-zero covariates over [0, 1e6]"""
    data = {name: [0.0, 0.0] for name in COVARIATE_NAMES}
    data["time"] = [0.0, 1e6]
    return pd.DataFrame(data)


@pytest.fixture
def recovery_only_params():
    """Infectious individuals recover and nothing else happens"""
    return {
        "gamma": 1.0,
        "mu": 0.0,
        "d": 0.0,
        "eta": 0.0,
        "beta_par": 0.0,
        "rho": 0.5,
        "S_0": 0.0,
        "I_0": 1.0,
        "R_0": 0.0,
        "N_0": 200,
        "p": 0.0,
    }


@pytest.fixture
def rng():
    return np.random.default_rng(20240101)
