import pytest

from thermalcolumn.engine import simulate
from thermalcolumn.params import SimulationParams
from thermalcolumn.presets import (
    DEFAULT_PRESET,
    PRESETS,
    build_profile,
    get_preset,
    list_presets,
)
from thermalcolumn.profile import AtmosphericProfile


def test_default_preset_is_registered():
    assert DEFAULT_PRESET in list_presets()
    assert get_preset(DEFAULT_PRESET) is PRESETS[DEFAULT_PRESET]


def test_unknown_preset_lists_available():
    with pytest.raises(KeyError, match="standard"):
        get_preset("monsoon")


@pytest.mark.parametrize("key", list(PRESETS))
def test_presets_build_sorted_profiles_up_to_ceiling(key):
    params = SimulationParams()
    profile = build_profile(key, params)
    assert profile.bottom == 0.0
    assert profile.top >= params.calculations_max_height
    assert profile.altitudes == sorted(set(profile.altitudes))


@pytest.mark.parametrize("key", list(PRESETS))
def test_presets_run_through_simulator(key):
    result = simulate(build_profile(key))
    assert 0 < result.thermal_top <= result.ceiling
    assert result.strength


def test_standard_preset_matches_standard_profile():
    a = build_profile("standard")
    b = AtmosphericProfile.standard()
    assert [(s.altitude, s.temperature, s.humidity) for s in a] == [
        (s.altitude, s.temperature, s.humidity) for s in b
    ]


def test_inversion_preset_caps_thermal_below_standard():
    standard = simulate(build_profile("standard"))
    capped = simulate(build_profile("inversion"))
    assert capped.thermal_top < standard.thermal_top


def test_build_profile_respects_higher_ceiling():
    params = SimulationParams(calculations_max_height=11000.0)
    profile = build_profile("humid", params)
    assert profile.top == 11000.0
    assert profile.temperature_at(11000.0) == params.ceiling_temperature
