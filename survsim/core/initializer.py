"""
State Initializer
=================
Turns initial-condition fractions and population size into the integer
state vector at t0
"""

import numpy as np

from .compartments import Compartment, empty_state
from .errors import ValidationError
from .model_params import ModelParameters
from .templates import ModelTemplate, ProcessModel


def initialize_state(params: ModelParameters, template: ModelTemplate) -> np.ndarray:
    """
    Allocate N_0 across compartments in proportion to the initial fractions

    SIR uses S_0:I_0:R_0; SIS uses S_0:I_0 and leaves R empty. Each
    compartment is rounded to the nearest integer (ties to even), so the
    compartment sum can differ from N_0 by up to one per compartment. This
    is accepted: N is set from N_0, not from the rounded sum.

    Raises:
        ValidationError: rho outside [0, 1], a negative fraction or N_0,
            or no positive fraction to allocate by
    """
    params.validate()

    comps = [Compartment.S, Compartment.I]
    fracs = [params.S_0, params.I_0]
    if template.process_model is ProcessModel.SIR:
        comps.append(Compartment.R)
        fracs.append(params.R_0)

    fracs = np.array(fracs, dtype=float)
    total = fracs.sum()
    if total <= 0:
        raise ValidationError("At least one initial fraction must be positive")

    x0 = empty_state()
    x0[comps] = np.round(params.N_0 * fracs / total).astype(np.int64)
    x0[Compartment.N] = int(np.round(params.N_0))
    x0[Compartment.CASES] = 0
    return x0
