"""
Model Templates
===============
The four process-model x transmission combinations, each a fixed ordered
list of event types (rate expression, state-delta vector)
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Tuple, Union

import numpy as np

from .compartments import Compartment, COLUMN_NAMES, make_delta
from .errors import ValidationError

S, I, R, N = Compartment.S, Compartment.I, Compartment.R, Compartment.N


class ProcessModel(str, Enum):
    SIR = 'SIR'
    SIS = 'SIS'


class Transmission(str, Enum):
    DENSITY = 'density-dependent'
    FREQUENCY = 'frequency-dependent'


# rate(state, effective_params) -> float; effective_params is rates.EffectiveParameters
RateFunction = Callable[[np.ndarray, object], float]


@dataclass(frozen=True)
class EventType:
    """A single transition of the Markov jump process"""
    name: str
    rate: RateFunction
    delta: Tuple[int, ...]


@dataclass(frozen=True)
class ModelTemplate:
    """Immutable set of event types for one model variant"""
    process_model: ProcessModel
    transmission: Transmission
    events: Tuple[EventType, ...]

    @property
    def event_names(self) -> Tuple[str, ...]:
        return tuple(event.name for event in self.events)

    @property
    def deltas(self) -> np.ndarray:
        """(n_events, state_size) matrix of state changes"""
        return np.array([event.delta for event in self.events], dtype=np.int64)

    @property
    def compartments(self) -> Tuple[Compartment, ...]:
        """Compartments reported in trajectories"""
        if self.process_model is ProcessModel.SIR:
            return (S, I, R, N, Compartment.CASES)
        return (S, I, N, Compartment.CASES)

    @property
    def output_columns(self) -> Tuple[str, ...]:
        return tuple(COLUMN_NAMES[c] for c in self.compartments)


# Rate expressions ---------------------------------------------------------

def _birth_rate(x, k):
    return k.N_0 * k.mu * (1 - k.p)


def _density_infection_rate(x, k):
    return (k.beta_par * x[I] + k.eta) * x[S]


def _frequency_infection_rate(x, k):
    return (k.beta_par * x[I] / x[N] + k.eta) * x[S]


def _recovery_rate(x, k):
    return k.gamma * x[I]


def _death_rate_S(x, k):
    return k.d * x[S]


def _death_rate_I(x, k):
    return k.d * x[I]


def _death_rate_R(x, k):
    return k.d * x[R]


def _vaccination_rate(x, k):
    return k.N_0 * k.mu * k.p


# Deltas -------------------------------------------------------------------

_RECOVERY_DELTA = {
    ProcessModel.SIR: make_delta(I=-1, R=1, cases=1),
    ProcessModel.SIS: make_delta(S=1, I=-1, cases=1),
}

_INFECTION_RATE = {
    Transmission.DENSITY: _density_infection_rate,
    Transmission.FREQUENCY: _frequency_infection_rate,
}


def _build_template(process_model: ProcessModel, transmission: Transmission) -> ModelTemplate:
    events = (
        EventType('birthS', _birth_rate, make_delta(S=1, N=1)),
        EventType('infectS', _INFECTION_RATE[transmission], make_delta(S=-1, I=1)),
        EventType('recoverI', _recovery_rate, _RECOVERY_DELTA[process_model]),
        EventType('deathS', _death_rate_S, make_delta(S=-1, N=-1)),
        EventType('deathI', _death_rate_I, make_delta(I=-1, N=-1)),
        EventType('deathR', _death_rate_R, make_delta(R=-1, N=-1)),
        EventType('vaccinate', _vaccination_rate, make_delta(R=1, N=1)),
    )
    return ModelTemplate(process_model, transmission, events)


TEMPLATES: Mapping[Tuple[ProcessModel, Transmission], ModelTemplate] = MappingProxyType({
    (pm, tr): _build_template(pm, tr)
    for pm in ProcessModel
    for tr in Transmission
})


def get_template(process_model: Union[str, ProcessModel] = ProcessModel.SIR,
                 transmission: Union[str, Transmission] = Transmission.DENSITY) -> ModelTemplate:
    """
    Look up the template for a (process model, transmission) pair

    Args:
        process_model: 'SIR' or 'SIS'
        transmission: 'density-dependent' or 'frequency-dependent'
    """
    try:
        pm = ProcessModel(process_model)
    except ValueError:
        raise ValidationError(
            f"process_model must be one of {[m.value for m in ProcessModel]}, got {process_model!r}"
        ) from None
    try:
        tr = Transmission(transmission)
    except ValueError:
        raise ValidationError(
            f"transmission must be one of {[t.value for t in Transmission]}, got {transmission!r}"
        ) from None
    return TEMPLATES[(pm, tr)]
