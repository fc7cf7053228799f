"""
Observation Model
=================
Reported cases as a binomial thinning of true cases
"""

from typing import Union

import numpy as np

ArrayLike = Union[int, np.ndarray]


def observe(cases: ArrayLike, rho: float, rng: np.random.Generator) -> ArrayLike:
    """
    Draw reports ~ Binomial(cases, rho)

    Args:
        cases: Cases accumulated since the previous sample (scalar or array)
        rho: Reporting probability, already validated to lie in [0, 1]
        rng: Random generator the draw is taken from

    Returns:
        Report count(s), same shape as ``cases``
    """
    return rng.binomial(cases, rho)
