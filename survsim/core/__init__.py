"""Core simulation components"""

from .errors import SimulationError, ValidationError, ModelError, ResourceExceeded
from .model_params import ModelParameters, DEFAULT_PARAMS
from .compartments import Compartment
from .covariates import CovariateTable, COVARIATE_NAMES
from .templates import EventType, ModelTemplate, ProcessModel, Transmission, TEMPLATES, get_template
from .rates import EffectiveParameters, effective_parameters, compute_rates
from .initializer import initialize_state
from .observation import observe
from .gillespie import GillespieEngine, SimulationConfig
from .simulator import SurveillanceSimulator, create_simulator, spawn_seeds

__all__ = [
    'SimulationError',
    'ValidationError',
    'ModelError',
    'ResourceExceeded',
    'ModelParameters',
    'DEFAULT_PARAMS',
    'Compartment',
    'CovariateTable',
    'COVARIATE_NAMES',
    'EventType',
    'ModelTemplate',
    'ProcessModel',
    'Transmission',
    'TEMPLATES',
    'get_template',
    'EffectiveParameters',
    'effective_parameters',
    'compute_rates',
    'initialize_state',
    'observe',
    'GillespieEngine',
    'SimulationConfig',
    'SurveillanceSimulator',
    'create_simulator',
    'spawn_seeds',
]
