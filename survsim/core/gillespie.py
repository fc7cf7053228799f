"""
Gillespie Simulation Engine
===========================
Exact stochastic simulation (direct method) of the compartmental jump
process, sampled at fixed output times
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from .compartments import Compartment, STATE_SIZE
from .covariates import CovariateTable
from .errors import ModelError, ResourceExceeded, ValidationError
from .model_params import ModelParameters
from .rates import compute_rates
from .templates import ModelTemplate

logger = logging.getLogger("survsim")


@dataclass
class SimulationConfig:
    """Safeguards against runaway event loops"""
    max_events: Optional[int] = None      # Abort after this many events
    max_seconds: Optional[float] = None   # Abort after this much wall-clock time
    check_interval: int = 1000            # Events between wall-clock checks

    def __post_init__(self):
        if self.max_events is not None and self.max_events <= 0:
            raise ValidationError(f"max_events must be > 0, got {self.max_events}")
        if self.max_seconds is not None and self.max_seconds <= 0:
            raise ValidationError(f"max_seconds must be > 0, got {self.max_seconds}")
        if self.check_interval < 1:
            raise ValidationError(f"check_interval must be >= 1, got {self.check_interval}")


def samples_to_frame(template: ModelTemplate,
                     times: Sequence[float],
                     samples: np.ndarray) -> pd.DataFrame:
    """Sampled state vectors as a DataFrame with the template's columns"""
    frame = pd.DataFrame({'time': np.asarray(times, dtype=float)})
    for comp, name in zip(template.compartments, template.output_columns):
        frame[name] = samples[:, comp].astype(np.int64)
    return frame


class GillespieEngine:
    """
    Direct-method simulator for one model template

    Rates are re-evaluated after every event and at every sample time, with
    covariates interpolated at the current time and held fixed until the
    next event. While every rate is zero, time jumps straight to the next
    sample or covariate row.
    """

    def __init__(self,
                 template: ModelTemplate,
                 covariates: CovariateTable,
                 params: ModelParameters,
                 rng: np.random.Generator,
                 config: Optional[SimulationConfig] = None):
        self.template = template
        self.covariates = covariates
        self.params = params
        self.rng = rng
        self.config = config if config is not None else SimulationConfig()

        self._deltas = template.deltas
        self.n_events = 0

    def rates(self, state: np.ndarray, t: float) -> np.ndarray:
        return compute_rates(self.template, state, self.params, self.covariates.interpolate(t))

    def _check_rates(self, rates: np.ndarray, t: float, times, samples):
        bad = ~np.isfinite(rates) | (rates < 0)
        if bad.any():
            detail = ', '.join(
                f"{name}={rate}" for name, rate, flag
                in zip(self.template.event_names, rates, bad) if flag
            )
            logger.warning("Aborting run at t=%s: invalid rate(s) %s", t, detail)
            raise ModelError(
                f"Invalid rate(s) at t={t}: {detail}",
                partial=samples_to_frame(self.template, times, samples),
                time=t,
            )

    def _check_budget(self, t: float, started: float, times, samples):
        cfg = self.config
        if cfg.max_events is not None and self.n_events >= cfg.max_events:
            logger.warning("Aborting run at t=%s: event budget of %d exhausted", t, cfg.max_events)
            raise ResourceExceeded(
                f"Event budget of {cfg.max_events} exhausted at t={t}",
                partial=samples_to_frame(self.template, times, samples),
                time=t,
            )
        if cfg.max_seconds is not None and self.n_events % cfg.check_interval == 0:
            elapsed = time.monotonic() - started
            if elapsed > cfg.max_seconds:
                logger.warning("Aborting run at t=%s after %.2fs", t, elapsed)
                raise ResourceExceeded(
                    f"Wall-clock budget of {cfg.max_seconds}s exhausted at t={t}",
                    partial=samples_to_frame(self.template, times, samples),
                    time=t,
                )

    def _choose_event(self, rates: np.ndarray, total: float) -> int:
        """Index of the firing event, with probability proportional to its rate"""
        threshold = self.rng.random() * total
        idx = int(np.searchsorted(np.cumsum(rates), threshold, side='right'))
        if idx >= len(rates):
            # rounding in the cumulative sum; fall back to the last live event
            idx = int(np.flatnonzero(rates > 0)[-1])
        return idx

    @staticmethod
    def _record(state: np.ndarray, samples: np.ndarray, k: int) -> int:
        """Store the state as sample k and zero the case accumulator"""
        samples[k] = state
        state[Compartment.CASES] = 0
        return k + 1

    def simulate(self, x0: np.ndarray, t0: float, times: Sequence[float]) -> np.ndarray:
        """
        Run the jump process from (t0, x0) until the last sample time

        Args:
            x0: Initial state vector (not modified)
            t0: Start time, <= times[0]
            times: Strictly increasing sample times

        Returns:
            Array of shape (len(times), STATE_SIZE) with the state at each
            sample time; the cases entry counts recoveries since the
            previous sample

        Raises:
            ModelError: a rate is negative or undefined
            ResourceExceeded: the event or wall-clock budget ran out
        """
        times = np.asarray(times, dtype=float)
        n = len(times)
        state = np.array(x0, dtype=np.int64)
        samples = np.zeros((n, STATE_SIZE), dtype=np.int64)

        t = float(t0)
        k = 0
        self.n_events = 0
        started = time.monotonic()

        while k < n:
            rates = self.rates(state, t)
            self._check_rates(rates, t, times[:k], samples[:k])
            total = rates.sum()

            if total <= 0:
                # Nothing can fire until the covariates change
                t_change = self.covariates.next_time(t)
                if t_change < times[k]:
                    t = t_change
                else:
                    k = self._record(state, samples, k)
                    t = times[k - 1]
                continue

            # 1 - u lies in (0, 1], so the log is finite
            dt = -np.log(1.0 - self.rng.random()) / total
            t_next = t + dt

            if t_next > times[k]:
                k = self._record(state, samples, k)
                t = times[k - 1]
                continue
            if t_next == times[k]:
                # sample first, then the event
                k = self._record(state, samples, k)
                if k == n:
                    break

            self._check_budget(t_next, started, times[:k], samples[:k])
            t = t_next
            state += self._deltas[self._choose_event(rates, total)]
            self.n_events += 1

        logger.debug("Simulated %d events over [%s, %s]", self.n_events, t0, times[-1])
        return samples
