"""
Built-in soundings.

Each preset is a short list of levels:
  - altitude:    m above ground
  - temperature: °C
  - wind:        m/s, sign gives direction
  - humidity:    absolute humidity in g/m³

``build_profile`` turns a preset into an ``AtmosphericProfile`` topped up
to the integration ceiling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .params import SimulationParams
from .profile import AtmosphericProfile

Level = Tuple[float, float, float, float]  # altitude, temperature, wind, humidity


@dataclass(frozen=True)
class Sounding:
    """Immutable named sounding."""
    name: str
    description: str
    levels: Tuple[Level, ...]

    @property
    def top(self) -> float:
        return max(level[0] for level in self.levels)


# ── Built-in soundings ────────────────────────────────────────────────────

PRESETS: Dict[str, Sounding] = {
    "standard": Sounding(
        name="Standard Summer Day",
        description="25 °C at ground, 0.7 K/100m lapse rate",
        levels=(
            (0.0, 25.0, 0.0, 10.0),
            (9500.0, 25.0 - 95 * 0.7, 0.0, 1.0),
            (10000.0, -20.0, 0.0, 0.5),
        ),
    ),
    "inversion": Sounding(
        name="Morning Inversion",
        description="Warm layer at 800–1100 m caps the convection",
        levels=(
            (0.0, 18.0, 1.0, 8.0),
            (800.0, 12.0, 3.0, 7.0),
            (1100.0, 15.0, 4.0, 4.0),
            (5000.0, -12.0, 8.0, 1.5),
            (10000.0, -45.0, 15.0, 0.3),
        ),
    ),
    "humid": Sounding(
        name="Humid Unstable",
        description="Moist, steep lapse rate, low cloud base",
        levels=(
            (0.0, 22.0, 2.0, 14.0),
            (1500.0, 10.5, 4.0, 9.0),
            (6000.0, -24.0, 10.0, 1.5),
            (10000.0, -50.0, 18.0, 0.3),
        ),
    ),
    "stable": Sounding(
        name="Stable Winter High",
        description="Isothermal lower layer, weak convection",
        levels=(
            (0.0, 2.0, 0.0, 4.0),
            (1500.0, 2.5, -2.0, 3.5),
            (4000.0, -14.0, -6.0, 1.0),
            (10000.0, -52.0, -20.0, 0.2),
        ),
    ),
}

DEFAULT_PRESET = "standard"


def list_presets() -> List[str]:
    return list(PRESETS.keys())


def get_preset(key: str) -> Sounding:
    try:
        return PRESETS[key]
    except KeyError:
        avail = ", ".join(list_presets())
        raise KeyError(f"Unknown preset '{key}'. Available: {avail}") from None


def build_profile(key: str = DEFAULT_PRESET,
                  params: Optional[SimulationParams] = None) -> AtmosphericProfile:
    """Profile for preset *key*, extended to the integration ceiling."""
    params = params or SimulationParams()
    sounding = get_preset(key)
    profile = AtmosphericProfile(params=params)
    for altitude, temperature, wind, humidity in sounding.levels:
        profile.add_level(altitude, temperature, wind, humidity)
    profile.ensure_ceiling(params.calculations_max_height)
    return profile
