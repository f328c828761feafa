"""Builds OpenWeatherMap forecast request URLs."""

from urllib.parse import urlencode

from weathercaster.config.defaults import RESULT_COUNT
from weathercaster.models.units import UnitSystem, parse_unit_system


def build_forecast_url(
    host: str,
    path: str,
    api_key: str,
    location: str,
    units: UnitSystem | str,
) -> str:
    """Return the forecast URL for a location.

    Query parameters are always emitted as q, appid, units, cnt. The units
    parameter is left out for the standard system, which is the API default
    and not a value the API accepts.
    """
    units = parse_unit_system(units)
    params: list[tuple[str, str | int]] = [("q", location), ("appid", api_key)]
    if units is not UnitSystem.STANDARD:
        params.append(("units", units.value))
    params.append(("cnt", RESULT_COUNT))
    return f"{host}{path}/?{urlencode(params)}"
