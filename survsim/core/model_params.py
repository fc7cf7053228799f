"""
Model Parameters
================
Rate constants, reporting probability and initial conditions for the
SIR/SIS surveillance model
"""

import math
from dataclasses import dataclass, fields, replace, asdict
from typing import Dict, Mapping, Optional

from .errors import ValidationError


@dataclass(frozen=True)
class ModelParameters:
    """Base (time-invariant) parameters of the process and observation model"""

    # Rates (per unit time)
    gamma: float = 24.0        # Recovery rate
    mu: float = 1 / 70         # Per-capita birth rate, scaled by N_0
    d: float = 1 / 70          # Per-capita death rate
    eta: float = 1e-5          # External force of infection per susceptible
    beta_par: float = 1e-4     # Transmission coefficient

    # Observation
    rho: float = 0.1           # Reporting probability per case

    # Initial conditions (fractions are normalised by their sum)
    S_0: float = 1.0
    I_0: float = 0.0
    R_0: float = 0.0
    N_0: float = 1e5

    # Fraction of births vaccinated straight into R
    p: float = 0.0

    @classmethod
    def names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, float]] = None,
                     base: Optional["ModelParameters"] = None) -> "ModelParameters":
        """
        Build parameters from a name -> value mapping

        Args:
            values: Parameter values; names not given keep their value in ``base``
            base: Parameters to start from (defaults if None)

        Returns:
            New ModelParameters instance
        """
        base = base if base is not None else cls()
        if values is None:
            return base
        if isinstance(values, ModelParameters):
            return values
        values = dict(values)

        unknown = sorted(set(values) - set(cls.names()))
        if unknown:
            raise ValidationError(f"Unknown parameter name(s): {', '.join(unknown)}")

        converted = {}
        for name, value in values.items():
            try:
                converted[name] = float(value)
            except (TypeError, ValueError) as err:
                raise ValidationError(f"Parameter {name} must be numeric, got {value!r}") from err
            if math.isnan(converted[name]):
                raise ValidationError(f"Parameter {name} is NaN")
        return replace(base, **converted)

    def with_overrides(self, overrides: Optional[Mapping[str, float]] = None) -> "ModelParameters":
        """Return a copy with ``overrides`` applied; self is left untouched"""
        return ModelParameters.from_mapping(overrides, base=self)

    def validate(self):
        """Check bounds on the observation probability and initial conditions"""
        if not 0.0 <= self.rho <= 1.0:
            raise ValidationError(f"rho must be in [0, 1], got {self.rho}")

        negative = [name for name in ('S_0', 'I_0', 'R_0', 'N_0')
                    if getattr(self, name) < 0]
        if negative:
            raise ValidationError(
                f"All of S_0 I_0 R_0 N_0 should be >= 0 (negative: {', '.join(negative)})"
            )
        if not math.isfinite(self.N_0):
            raise ValidationError(f"N_0 must be finite, got {self.N_0}")
        return self

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)

    @property
    def R0_estimate(self) -> float:
        """Basic reproduction number of the density-dependent model at N_0"""
        removal = self.gamma + self.d
        if removal <= 0:
            return math.inf
        return self.beta_par * self.N_0 / removal


# Default parameters instance
DEFAULT_PARAMS = ModelParameters()
