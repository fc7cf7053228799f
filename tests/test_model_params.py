import pandas as pd
import pytest

from survsim.core import DEFAULT_PARAMS, ModelParameters, ValidationError


def test_defaults_match_reference_values():
    assert DEFAULT_PARAMS.gamma == 24
    assert DEFAULT_PARAMS.mu == pytest.approx(1 / 70)
    assert DEFAULT_PARAMS.d == pytest.approx(1 / 70)
    assert DEFAULT_PARAMS.eta == 1e-5
    assert DEFAULT_PARAMS.beta_par == 1e-4
    assert DEFAULT_PARAMS.rho == 0.1
    assert (DEFAULT_PARAMS.S_0, DEFAULT_PARAMS.I_0, DEFAULT_PARAMS.R_0) == (1, 0, 0)
    assert DEFAULT_PARAMS.N_0 == 1e5
    assert DEFAULT_PARAMS.p == 0


def test_from_mapping_fills_missing_names_with_defaults():
    params = ModelParameters.from_mapping({"gamma": 2, "I_0": 0.5})
    assert params.gamma == 2.0
    assert params.I_0 == 0.5
    assert params.rho == DEFAULT_PARAMS.rho


def test_from_mapping_rejects_unknown_names():
    with pytest.raises(ValidationError, match="beta"):
        ModelParameters.from_mapping({"beta": 1.0})


@pytest.mark.parametrize("value", ["abc", None, float("nan")])
def test_from_mapping_rejects_non_numeric(value):
    with pytest.raises(ValidationError):
        ModelParameters.from_mapping({"gamma": value})


def test_with_overrides_leaves_original_untouched():
    base = ModelParameters(rho=0.3)
    changed = base.with_overrides({"rho": 0.9})
    assert changed.rho == 0.9
    assert base.rho == 0.3
    assert base.with_overrides(None) is base


@pytest.mark.parametrize(
    "overrides",
    [{"rho": 1.5}, {"rho": -0.1}, {"S_0": -1}, {"I_0": -0.5}, {"R_0": -2}, {"N_0": -10}],
)
def test_validate_rejects_out_of_bounds(overrides):
    with pytest.raises(ValidationError):
        ModelParameters.from_mapping(overrides).validate()


def test_validate_accepts_boundaries():
    params = ModelParameters(rho=0.0, S_0=0.0, I_0=1.0, R_0=0.0, N_0=0.0)
    assert params.validate() is params
    ModelParameters(rho=1.0).validate()


def test_as_dict_round_trips_names():
    values = DEFAULT_PARAMS.as_dict()
    assert tuple(values) == ModelParameters.names()
    assert ModelParameters.from_mapping(values) == DEFAULT_PARAMS


def test_r0_estimate():
    params = ModelParameters(beta_par=1e-4, N_0=1e5, gamma=9.0, d=1.0)
    assert params.R0_estimate == pytest.approx(1.0)


def test_from_mapping_accepts_named_series():
    params = ModelParameters.from_mapping(pd.Series({"gamma": 3.0, "rho": 0.7}))
    assert params.gamma == 3.0
    assert params.rho == 0.7
