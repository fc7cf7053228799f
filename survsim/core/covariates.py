"""
Covariate Table
===============
Time-stamped covariates that are added to the base parameters, and their
interpolation at arbitrary simulation times
"""

from typing import Dict, Mapping, Optional, Union

import numpy as np
import pandas as pd
from scipy.interpolate import interp1d

from .errors import ValidationError

# Time-varying components, in the order used by the rate evaluator
COVARIATE_NAMES = ('gamma_t', 'mu_t', 'd_t', 'eta_t', 'beta_par_t', 'p_t')
TIME_COLUMN = 'time'

INTERPOLATION_KINDS = ('linear', 'previous')


class CovariateTable:
    """
    Piecewise interpolation of covariates over time

    Queries outside the table's time range are clamped to the first or last
    row; nothing is extrapolated. Each query is a binary search over the
    sorted times.
    """

    def __init__(self,
                 table: Union[pd.DataFrame, Mapping[str, object]],
                 kind: str = 'linear'):
        """
        Args:
            table: Columns gamma_t, mu_t, d_t, eta_t, beta_par_t, p_t and time
            kind: 'linear' or 'previous' (step function, value held until next row)
        """
        if kind not in INTERPOLATION_KINDS:
            raise ValidationError(
                f"Interpolation kind must be one of {INTERPOLATION_KINDS}, got {kind!r}"
            )
        frame = pd.DataFrame(table)

        missing = [c for c in COVARIATE_NAMES + (TIME_COLUMN,) if c not in frame.columns]
        if missing:
            raise ValidationError(f"Covariate table is missing column(s): {', '.join(missing)}")

        times = frame[TIME_COLUMN].to_numpy(dtype=float)
        values = frame[list(COVARIATE_NAMES)].to_numpy(dtype=float)

        if len(times) == 0:
            raise ValidationError("Covariate table has no rows")
        if not np.all(np.isfinite(times)):
            raise ValidationError("Covariate times must be finite")
        if np.any(np.diff(times) <= 0):
            raise ValidationError("Covariate times must be strictly increasing")
        if np.any(np.isnan(values)):
            raise ValidationError("Covariate values must not be NaN")

        self.kind = kind
        self.times = times
        self.values = values

        if len(times) == 1:
            # A single row is a constant covariate
            self._interp = None
        else:
            self._interp = interp1d(
                times, values,
                kind=kind,
                axis=0,
                bounds_error=False,
                fill_value=(values[0], values[-1]),
                assume_sorted=True,
            )

    @classmethod
    def constant(cls, start: float = 0.0, end: float = 1e6,
                 values: Optional[Mapping[str, float]] = None) -> "CovariateTable":
        """Flat table over [start, end]; covariates default to zero"""
        values = values or {}
        unknown = sorted(set(values) - set(COVARIATE_NAMES))
        if unknown:
            raise ValidationError(f"Unknown covariate(s): {', '.join(unknown)}")
        data = {name: [values.get(name, 0.0)] * 2 for name in COVARIATE_NAMES}
        data[TIME_COLUMN] = [start, end]
        return cls(pd.DataFrame(data))

    @property
    def start(self) -> float:
        return float(self.times[0])

    @property
    def end(self) -> float:
        return float(self.times[-1])

    def covers(self, t_start: float, t_end: float) -> bool:
        return self.start <= t_start and t_end <= self.end

    def check_covers(self, t_start: float, t_end: float):
        """Raise ValidationError unless the table spans [t_start, t_end]"""
        if not self.covers(t_start, t_end):
            raise ValidationError(
                f"Covariate table spans [{self.start}, {self.end}] "
                f"but the simulation needs [{t_start}, {t_end}]"
            )

    def next_time(self, t: float) -> float:
        """First row time strictly after t, or inf past the last row"""
        idx = np.searchsorted(self.times, t, side='right')
        if idx >= len(self.times):
            return np.inf
        return float(self.times[idx])

    def interpolate(self, t: float) -> np.ndarray:
        """Covariate values at time t, ordered as COVARIATE_NAMES"""
        if self._interp is None:
            return self.values[0].copy()
        return np.asarray(self._interp(t), dtype=float)

    def values_at(self, t: float) -> Dict[str, float]:
        return dict(zip(COVARIATE_NAMES, self.interpolate(t).tolist()))

    def to_frame(self) -> pd.DataFrame:
        frame = pd.DataFrame(self.values, columns=list(COVARIATE_NAMES))
        frame[TIME_COLUMN] = self.times
        return frame

    def __len__(self) -> int:
        return len(self.times)

    def __repr__(self) -> str:
        return f"CovariateTable(rows={len(self)}, span=[{self.start}, {self.end}], kind={self.kind!r})"
