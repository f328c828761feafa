"""Unit systems understood by the OpenWeatherMap API."""

from enum import StrEnum

from weathercaster.errors import InvalidUnitSystem


class UnitSystem(StrEnum):
    STANDARD = "standard"  # Kelvin, m/s
    METRIC = "metric"  # Celsius, m/s
    IMPERIAL = "imperial"  # Fahrenheit, MPH

    @property
    def temperature_label(self) -> str:
        return _TEMPERATURE_LABELS[self]

    @property
    def speed_label(self) -> str:
        return _SPEED_LABELS[self]


DEFAULT_UNIT_SYSTEM = UnitSystem.IMPERIAL

_TEMPERATURE_LABELS = {
    UnitSystem.STANDARD: "ºK",
    UnitSystem.METRIC: "ºC",
    UnitSystem.IMPERIAL: "ºF",
}

_SPEED_LABELS = {
    UnitSystem.STANDARD: "m/s",
    UnitSystem.METRIC: "m/s",
    UnitSystem.IMPERIAL: "MPH",
}

# Temperature letters and names are accepted alongside the API's own names.
_ALIASES = {
    "standard": UnitSystem.STANDARD,
    "k": UnitSystem.STANDARD,
    "kelvin": UnitSystem.STANDARD,
    "metric": UnitSystem.METRIC,
    "c": UnitSystem.METRIC,
    "celsius": UnitSystem.METRIC,
    "imperial": UnitSystem.IMPERIAL,
    "f": UnitSystem.IMPERIAL,
    "fahrenheit": UnitSystem.IMPERIAL,
}


def parse_unit_system(value: "UnitSystem | str") -> UnitSystem:
    """Resolve a unit system name or alias, case-insensitively.

    Raises InvalidUnitSystem for anything that is not one of the three
    systems or their aliases.
    """
    if isinstance(value, UnitSystem):
        return value
    if not isinstance(value, str):
        raise InvalidUnitSystem(value)
    try:
        return _ALIASES[value.strip().lower()]
    except KeyError:
        raise InvalidUnitSystem(value) from None
