"""
Surveillance Data Simulator
===========================
SIR/SIS jump-process simulation with binomially thinned case reports
"""

import logging
from typing import List, Mapping, Optional, Sequence, Union

import numpy as np
import pandas as pd

from .compartments import Compartment
from .covariates import CovariateTable
from .errors import ValidationError
from .gillespie import GillespieEngine, SimulationConfig, samples_to_frame
from .initializer import initialize_state
from .model_params import ModelParameters
from .observation import observe
from .templates import get_template

logger = logging.getLogger("survsim")

SeedLike = Union[None, int, np.random.SeedSequence]


def _check_times(times: Sequence[float]) -> np.ndarray:
    times = np.asarray(times, dtype=float).ravel()
    if times.size == 0:
        raise ValidationError("At least one sample time is required")
    if not np.all(np.isfinite(times)):
        raise ValidationError("Sample times must be finite")
    if np.any(np.diff(times) <= 0):
        raise ValidationError("Sample times must be strictly increasing")
    return times


def spawn_seeds(nsim: int, seed: SeedLike = None) -> List[np.random.SeedSequence]:
    """Independent seed sequences, one per replicate"""
    if nsim < 1:
        raise ValidationError(f"nsim must be >= 1, got {nsim}")
    if not isinstance(seed, np.random.SeedSequence):
        seed = np.random.SeedSequence(seed)
    return seed.spawn(nsim)


class SurveillanceSimulator:
    """
    Stochastic SIR/SIS simulator producing latent state and case reports

    The parameters and sample times given here are defaults; ``run`` can
    override either for a single simulation without changing them.
    """

    def __init__(self,
                 times: Sequence[float] = tuple(range(10)),
                 t0: Optional[float] = None,
                 process_model: str = 'SIR',
                 transmission: str = 'density-dependent',
                 params: Optional[Mapping[str, float]] = None,
                 covar: Union[None, pd.DataFrame, CovariateTable] = None,
                 seed: SeedLike = None,
                 interpolation: str = 'linear',
                 config: Optional[SimulationConfig] = None):
        """
        Initialize simulator

        Args:
            times: Increasing times at which the state is sampled
            t0: Start time with the state set from the initial conditions
                (defaults to the first sample time)
            process_model: 'SIR' or 'SIS'
            transmission: 'density-dependent' or 'frequency-dependent'
            params: Parameter values and initial conditions; missing names
                take their defaults
            covar: Time-varying parameter components, columns
                gamma_t, mu_t, d_t, eta_t, beta_par_t, p_t and time
                (all zero over [0, 1e6] if None)
            seed: Random seed for reproducibility
            interpolation: 'linear' or 'previous' interpolation of ``covar``
            config: Event-count and wall-clock safeguards
        """
        self.template = get_template(process_model, transmission)
        self.times = _check_times(times)
        self.t0 = float(self.times[0]) if t0 is None else float(t0)
        if not self.t0 <= self.times[0]:
            raise ValidationError(f"t0 ({self.t0}) must not be after the first sample time ({self.times[0]})")

        self.params = ModelParameters.from_mapping(params).validate()

        if covar is None:
            self.covariates = CovariateTable.constant()
        elif isinstance(covar, CovariateTable):
            self.covariates = covar
        else:
            self.covariates = CovariateTable(covar, kind=interpolation)
        self.covariates.check_covers(self.t0, self.times[-1])

        self.config = config if config is not None else SimulationConfig()
        self.rng = np.random.default_rng(seed)

    @property
    def process_model(self) -> str:
        return self.template.process_model.value

    @property
    def transmission(self) -> str:
        return self.template.transmission.value

    def _resolve(self, params, times):
        run_params = self.params.with_overrides(params).validate()
        run_times = self.times if times is None else _check_times(times)
        if not self.t0 <= run_times[0]:
            raise ValidationError(f"Sample times must start at or after t0 ({self.t0})")
        self.covariates.check_covers(self.t0, run_times[-1])
        return run_params, run_times

    def run(self,
            params: Optional[Mapping[str, float]] = None,
            times: Optional[Sequence[float]] = None,
            seed: SeedLike = None,
            verbose: bool = False) -> pd.DataFrame:
        """
        Run one simulation

        Args:
            params: Parameter overrides for this run only
            times: Sample times for this run only
            seed: Fresh seed for this run; the simulator's own generator
                is used (and advanced) if None
            verbose: Log a summary of the run at INFO level

        Returns:
            DataFrame with columns time, S, I, [R,] N, cases, reports
        """
        run_params, run_times = self._resolve(params, times)
        rng = self.rng if seed is None else np.random.default_rng(seed)

        x0 = initialize_state(run_params, self.template)
        engine = GillespieEngine(self.template, self.covariates, run_params, rng, self.config)

        if verbose:
            logger.info("Starting %s %s simulation over [%s, %s]",
                        self.process_model, self.transmission, self.t0, run_times[-1])
            logger.info("Population: %d, initial infectious: %d, R0 estimate: %.2f",
                        x0[Compartment.N], x0[Compartment.I], run_params.R0_estimate)

        samples = engine.simulate(x0, self.t0, run_times)
        out = samples_to_frame(self.template, run_times, samples)
        out['reports'] = np.asarray(observe(out['cases'].to_numpy(), run_params.rho, rng), dtype=np.int64)

        if verbose:
            logger.info("Simulation complete: %d events, %d cases, %d reports",
                        engine.n_events, out['cases'].sum(), out['reports'].sum())
        return out

    def run_replicates(self,
                       nsim: int,
                       seed: SeedLike = None,
                       params: Optional[Mapping[str, float]] = None,
                       times: Optional[Sequence[float]] = None) -> pd.DataFrame:
        """
        Run independent replicates, each with its own spawned generator

        Args:
            nsim: Number of replicates
            seed: Root seed; drawn from the simulator's generator if None
            params: Parameter overrides shared by every replicate
            times: Sample times shared by every replicate

        Returns:
            Replicates stacked with a leading 'sim' column numbered from 1
        """
        if seed is None:
            seed = int(self.rng.integers(2**63))
        frames = []
        for i, child in enumerate(spawn_seeds(nsim, seed), start=1):
            frame = self.run(params=params, times=times, seed=child)
            frame.insert(0, 'sim', i)
            frames.append(frame)
        return pd.concat(frames, ignore_index=True)


def create_simulator(times: Sequence[float] = tuple(range(10)),
                     t0: Optional[float] = None,
                     process_model: str = 'SIR',
                     transmission: str = 'density-dependent',
                     params: Optional[Mapping[str, float]] = None,
                     covar: Union[None, pd.DataFrame, CovariateTable] = None,
                     **kwargs) -> SurveillanceSimulator:
    """Create a surveillance data simulator; see SurveillanceSimulator"""
    return SurveillanceSimulator(times=times, t0=t0, process_model=process_model,
                                 transmission=transmission, params=params,
                                 covar=covar, **kwargs)


if __name__ == "__main__":
    # Example simulation
    print("SIR Surveillance Simulation")
    print("=" * 60)

    from ..log import use_logging
    use_logging("info")
    sim = create_simulator(params={'I_0': 1e-3, 'N_0': 1e4}, seed=42)
    results = sim.run(times=np.arange(0, 2, 1 / 52), verbose=True)
    print(results.head(20))
