import pytest

from survsim.core import (
    TEMPLATES,
    Compartment,
    ProcessModel,
    Transmission,
    ValidationError,
    get_template,
)

EVENT_NAMES = ("birthS", "infectS", "recoverI", "deathS", "deathI", "deathR", "vaccinate")


def test_four_templates_with_seven_events():
    assert len(TEMPLATES) == 4
    for (pm, tr), template in TEMPLATES.items():
        assert template.process_model is pm
        assert template.transmission is tr
        assert template.event_names == EVENT_NAMES


@pytest.mark.parametrize("key", list(TEMPLATES))
def test_every_event_conserves_population(key):
    deltas = TEMPLATES[key].deltas
    living = (
        deltas[:, Compartment.S] + deltas[:, Compartment.I] + deltas[:, Compartment.R]
    )
    assert (living == deltas[:, Compartment.N]).all()


def test_recovery_destination_depends_on_process_model():
    sir = get_template("SIR", "density-dependent").deltas[2]
    sis = get_template("SIS", "density-dependent").deltas[2]
    assert list(sir) == [0, -1, 1, 0, 1]
    assert list(sis) == [1, -1, 0, 0, 1]


def test_sis_and_sir_share_all_other_events():
    sir = get_template(ProcessModel.SIR, Transmission.FREQUENCY).deltas
    sis = get_template(ProcessModel.SIS, Transmission.FREQUENCY).deltas
    for idx in (0, 1, 3, 4, 5, 6):
        assert list(sir[idx]) == list(sis[idx])


def test_output_columns():
    assert get_template("SIR").output_columns == ("S", "I", "R", "N", "cases")
    assert get_template("SIS").output_columns == ("S", "I", "N", "cases")


def test_get_template_accepts_strings_and_enums():
    assert get_template("SIS", "frequency-dependent") is TEMPLATES[
        (ProcessModel.SIS, Transmission.FREQUENCY)
    ]
    assert get_template(ProcessModel.SIR, Transmission.DENSITY) is get_template()


@pytest.mark.parametrize(
    "process_model,transmission",
    [("SEIR", "density-dependent"), ("SIR", "mass-action"), ("sir", "density-dependent")],
)
def test_get_template_rejects_unknown_choices(process_model, transmission):
    with pytest.raises(ValidationError):
        get_template(process_model, transmission)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        TEMPLATES[("SIR", "x")] = None
    with pytest.raises(AttributeError):
        get_template().events = ()
