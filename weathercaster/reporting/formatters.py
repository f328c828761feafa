"""Unit conversion and rendering of the one-line forecast."""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from weathercaster.models.conditions import Conditions
from weathercaster.models.units import UnitSystem, parse_unit_system

KELVIN_CELSIUS_OFFSET = 273.15
# Rounded offset, not the 273.15 used for Celsius.
KELVIN_FAHRENHEIT_OFFSET = 273.0
MPS_TO_MPH = 2.236936

_TENTH = Decimal("0.1")


def convert_temperature(kelvin: float, units: UnitSystem) -> float:
    """Convert a temperature from Kelvin to the given unit system."""
    if units is UnitSystem.METRIC:
        return kelvin - KELVIN_CELSIUS_OFFSET
    if units is UnitSystem.IMPERIAL:
        return 1.8 * (kelvin - KELVIN_FAHRENHEIT_OFFSET) + 32
    return kelvin


def convert_speed(meters_per_second: float, units: UnitSystem) -> float:
    """Convert a speed from m/s to the given unit system."""
    if units is UnitSystem.IMPERIAL:
        return meters_per_second * MPS_TO_MPH
    return meters_per_second


def format_one_decimal(value: float) -> str:
    """Render with one decimal place, rounding half away from zero.

    Rounds the shortest repr of the float, so 301.15 gives "301.2" rather
    than the "301.1" its binary expansion would round to.
    """
    if not math.isfinite(value):
        return f"{value:.1f}"
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + 3)
        return format(exact.quantize(_TENTH, rounding=ROUND_HALF_UP), "f")


def format_forecast(conditions: Conditions, units: UnitSystem | str) -> str:
    """One-line forecast; clauses for absent fields are left out entirely."""
    units = parse_unit_system(units)
    temp_unit = units.temperature_label
    parts = [conditions.description]

    if conditions.temperature is not None:
        temp = format_one_decimal(convert_temperature(conditions.temperature, units))
        parts.append(f"temp {temp} {temp_unit}")
    if conditions.feels_like is not None:
        feels = format_one_decimal(convert_temperature(conditions.feels_like, units))
        parts.append(f"feels like {feels} {temp_unit}")
    if conditions.humidity is not None:
        parts.append(f"humidity {format_one_decimal(conditions.humidity)}%")
    if conditions.wind_speed is not None:
        wind = format_one_decimal(convert_speed(conditions.wind_speed, units))
        parts.append(f"wind {wind} {units.speed_label}")

    return ", ".join(parts)
