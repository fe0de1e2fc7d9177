import pytest

from thermalcolumn.params import SimulationParams
from thermalcolumn.profile import AtmosphericProfile, Sample


@pytest.fixture
def params():
    return SimulationParams()


@pytest.fixture
def standard_profile(params):
    """25 °C ground, 0.7 K/100m to 9500 m, -20 °C at 10 000 m."""
    return AtmosphericProfile.standard(params)


@pytest.fixture
def stable_profile(params):
    """Temperature increasing with height through the whole column."""
    return AtmosphericProfile(
        [
            Sample(0.0, 5.0, 0.0, 4.0),
            Sample(10000.0, 45.0, 0.0, 4.0),
        ],
        params,
    )


@pytest.fixture
def three_level_profile(params):
    return AtmosphericProfile(
        [
            Sample(0.0, 20.0, 2.0, 8.0),
            Sample(1000.0, 14.0, -4.0, 6.0),
            Sample(3000.0, 0.0, 10.0, 2.0),
        ],
        params,
    )
