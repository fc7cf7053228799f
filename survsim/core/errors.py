"""
Simulation Errors
=================
Exception taxonomy shared by every simulator component
"""

from typing import Optional

import pandas as pd


class SimulationError(Exception):
    """Base class for all simulator errors"""


class ValidationError(SimulationError, ValueError):
    """Invalid construction or run parameters"""


class _AbortedRun(SimulationError):
    """
    Error raised while the event loop is running

    Carries the samples recorded before the abort so callers can inspect
    how far the run got. The partial frame holds latent state only; no
    reports are drawn for an aborted run.
    """

    def __init__(self, message: str,
                 partial: Optional[pd.DataFrame] = None,
                 time: Optional[float] = None):
        super().__init__(message)
        self.partial = partial
        self.time = time


class ModelError(_AbortedRun, ArithmeticError):
    """A rate evaluated to a negative or undefined (NaN) value"""


class ResourceExceeded(_AbortedRun, RuntimeError):
    """Event-count or wall-clock budget exhausted"""
