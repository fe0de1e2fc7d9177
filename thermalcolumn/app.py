"""
Application entry point: CLI parsing, profile setup, thermal run, report.
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import List, Optional

from . import __version__


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="thermalcolumn",
        description="Thermal Column, empirical thermal ascent through a sounding.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  %(prog)s                              # standard summer day\n"
            "  %(prog)s --preset inversion --solar 1  # strong sun under an inversion\n"
            "  %(prog)s --vario 500                   # impulse readout every 500 m\n"
            "  %(prog)s --table 1000                  # column table every 1000 m\n"
            "  %(prog)s --list-presets                # show built-in soundings\n"
            "  %(prog)s -v                            # verbose logging\n"
        ),
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--preset", type=str, default="standard", help="Built-in sounding")
    p.add_argument("--solar", type=float, default=None, help="Solar strength (0–1, default 0.8)")
    p.add_argument("--humidity", type=float, default=None,
                   help="Ground absolute humidity in g/m³ (default 10)")
    p.add_argument("--pressure", type=float, default=None,
                   help="Ground pressure in Pa (default 101325)")
    p.add_argument("--resolution", type=float, default=None,
                   help="Integration step in m (default 100)")
    p.add_argument("--max-altitude", type=float, default=6000.0,
                   help="Highest altitude shown in the table (default 6000)")
    p.add_argument("--vario", type=float, default=None, metavar="INTERVAL",
                   help="Print impulse readouts every INTERVAL m below cloud base")
    p.add_argument("--table", type=float, default=None, metavar="STEP",
                   help="Print the sampled column every STEP m")
    p.add_argument("--list-presets", action="store_true", help="List soundings and exit")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args(argv)


def _fail(message: str) -> None:
    print(f"ERROR: {message}", file=sys.stderr)
    sys.exit(1)


def _fmt(value: float, unit: str) -> str:
    if not math.isfinite(value):
        return "n/a"
    return f"{value:8.1f} {unit}"


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    logger = logging.getLogger("thermalcolumn")

    from .presets import PRESETS, build_profile, list_presets

    # List presets
    if args.list_presets:
        print("Available soundings:")
        for key in list_presets():
            s = PRESETS[key]
            print(f"  {key:10s}  {s.name:22s}  {s.description}")
        sys.exit(0)

    # Validate
    if args.preset not in PRESETS:
        avail = ", ".join(list_presets())
        _fail(f"Unknown preset '{args.preset}'. Available: {avail}")

    if args.solar is not None and not (0.0 <= args.solar <= 1.0):
        _fail("--solar must be 0–1.")

    if args.humidity is not None and args.humidity < 0:
        _fail("--humidity must be non-negative.")

    if args.resolution is not None and args.resolution <= 0:
        _fail("--resolution must be positive.")

    for flag, value in (("--vario", args.vario), ("--table", args.table)):
        if value is not None and value <= 0:
            _fail(f"{flag} must be positive.")

    from .engine import ThermalSimulator
    from .params import SimulationParams
    from .series import sample_column, vario_readings

    changes = {}
    if args.solar is not None:
        changes["solar_strength"] = args.solar
    if args.humidity is not None:
        changes["ground_absolute_humidity"] = args.humidity
    if args.pressure is not None:
        changes["ground_pressure"] = args.pressure
    if args.resolution is not None:
        changes["calculation_resolution"] = args.resolution
    params = SimulationParams().with_changes(**changes)

    logger.info("Starting Thermal Column v%s", __version__)
    logger.info("Preset: %s, Solar: %.2f, Humidity: %.1f g/m³",
                args.preset, params.solar_strength, params.ground_absolute_humidity)

    profile = build_profile(args.preset, params)
    result = ThermalSimulator(params).simulate(profile)

    print(f"Sounding:     {PRESETS[args.preset].name}")
    if result.has_cloud:
        print(f"Cloud base:   {_fmt(result.cloud_base, 'm')}")
    else:
        print("Cloud base:   none (blue thermal)")
    print(f"Thermal top:  {_fmt(result.thermal_top, 'm')}")
    print(f"Steps:        {len(result.strength):8d}")

    if args.vario is not None:
        print("\nVario:")
        for point in vario_readings(result, args.vario):
            print(f"  {point.altitude:8.0f} m  {point.impulse:6.2f}")

    if args.table is not None:
        top = min(args.max_altitude, profile.top)
        series = sample_column(profile, max_altitude=top, step=args.table)
        print(f"\n{'alt m':>8s} {'T °C':>7s} {'Td °C':>7s} {'wind':>6s} {'g/m³':>6s}")
        for i in range(len(series)):
            print(f"{series.altitude[i]:8.0f} {series.temperature[i]:7.1f} "
                  f"{series.dew_point[i]:7.1f} {series.wind[i]:6.1f} {series.humidity[i]:6.2f}")
