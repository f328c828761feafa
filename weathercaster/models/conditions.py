"""Normalized weather conditions for one forecast timestamp."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Conditions:
    """Provider-agnostic conditions, in the API's base units.

    Numeric fields are None when the API omitted them; 0.0 is a real reading.
    """

    description: str
    temperature: float | None = None  # Kelvin
    feels_like: float | None = None  # Kelvin
    humidity: float | None = None  # percent, 0-100
    wind_speed: float | None = None  # m/s
