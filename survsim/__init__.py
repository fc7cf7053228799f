"""Stochastic SIR/SIS surveillance data simulation"""

from . import core
from .core import (
    create_simulator,
    SurveillanceSimulator,
    ModelParameters,
    CovariateTable,
    SimulationConfig,
    SimulationError,
    ValidationError,
    ModelError,
    ResourceExceeded,
)
from .log import logger, use_logging

__version__ = "0.1.0"

__all__ = [
    'core',
    'create_simulator',
    'SurveillanceSimulator',
    'ModelParameters',
    'CovariateTable',
    'SimulationConfig',
    'SimulationError',
    'ValidationError',
    'ModelError',
    'ResourceExceeded',
    'logger',
    'use_logging',
]
