"""
Thermal Column
==============

An empirical model of a convective thermal rising through an
atmospheric column.

The column is a sparse, altitude-ordered set of samples (temperature,
wind, absolute humidity), linearly interpolated in between.  A thermal
starts at the ground with an impulse proportional to solar strength and
is stepped upward:

  - Lapse rates steeper than a stagnant reference gradient feed impulse
  - Inversions drain it, amplified by a compensation multiplier
  - Above cloud base (relative humidity of the ground air reaching 100 %)
    condensation drains a fixed amount per metre
  - The thermal top is the first step where impulse turns negative
"""

__version__ = "1.0.0"
__author__ = "Thermal Column"

from .engine import StrengthPoint, ThermalRunResult, ThermalSimulator, simulate
from .params import SimulationParams
from .profile import (
    AtmosphericProfile,
    EmptyProfileError,
    Field,
    OutOfRangeError,
    ProfileError,
    Sample,
)

__all__ = [
    "AtmosphericProfile",
    "EmptyProfileError",
    "Field",
    "OutOfRangeError",
    "ProfileError",
    "Sample",
    "SimulationParams",
    "StrengthPoint",
    "ThermalRunResult",
    "ThermalSimulator",
    "simulate",
]
