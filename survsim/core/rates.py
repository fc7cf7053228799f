"""
Rate Evaluator
==============
Propensities of every event type given the state, base parameters and
interpolated covariates
"""

from typing import NamedTuple, Sequence

import numpy as np

from .model_params import ModelParameters
from .templates import ModelTemplate


class EffectiveParameters(NamedTuple):
    """Base parameters with their time-varying components added"""
    gamma: float
    mu: float
    d: float
    eta: float
    beta_par: float
    p: float
    N_0: float


def effective_parameters(params: ModelParameters,
                         covariate_values: Sequence[float]) -> EffectiveParameters:
    """
    Add covariates to their base parameters

    Args:
        params: Base parameters
        covariate_values: gamma_t, mu_t, d_t, eta_t, beta_par_t, p_t (COVARIATE_NAMES order)
    """
    gamma_t, mu_t, d_t, eta_t, beta_par_t, p_t = covariate_values
    return EffectiveParameters(
        gamma=params.gamma + gamma_t,
        mu=params.mu + mu_t,
        d=params.d + d_t,
        eta=params.eta + eta_t,
        beta_par=params.beta_par + beta_par_t,
        p=params.p + p_t,
        N_0=params.N_0,
    )


def compute_rates(template: ModelTemplate,
                  state: np.ndarray,
                  params: ModelParameters,
                  covariate_values: Sequence[float]) -> np.ndarray:
    """
    Rate of each event type of ``template``, in template order

    The caller must guarantee N > 0 whenever I > 0 under frequency-dependent
    transmission. Division by zero is not trapped here: it yields inf/NaN
    which the engine rejects. Negative results are likewise returned as-is.
    """
    state = np.asarray(state, dtype=np.int64)
    k = effective_parameters(params, covariate_values)
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.array([event.rate(state, k) for event in template.events], dtype=float)
