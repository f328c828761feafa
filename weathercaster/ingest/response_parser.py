"""Normalizes OpenWeatherMap `/data/2.5/forecast` responses into Conditions.

Only the fields the forecast line needs are modelled; everything else in
the payload is ignored. Numeric fields stay None when the API leaves them
out, so a missing temperature is never mistaken for a reading of zero.
"""

import logging
from http import HTTPStatus

from pydantic import BaseModel, Field, ValidationError, field_validator

from weathercaster.errors import DecodeError, MalformedResponse, UpstreamStatusError
from weathercaster.models.conditions import Conditions

logger = logging.getLogger(__name__)


class _WireModel(BaseModel):
    model_config = {"extra": "ignore"}


class WeatherEntry(_WireModel):
    description: str | None = None


class MainEntry(_WireModel):
    temp: float | None = None
    feels_like: float | None = None
    humidity: float | None = None


class WindEntry(_WireModel):
    speed: float | None = None


class ForecastEntry(_WireModel):
    weather: list[WeatherEntry] = Field(default_factory=list)
    main: MainEntry = Field(default_factory=MainEntry)
    wind: WindEntry = Field(default_factory=WindEntry)

    @field_validator("weather", mode="before")
    @classmethod
    def _null_weather(cls, value: object) -> object:
        return [] if value is None else value

    @field_validator("main", "wind", mode="before")
    @classmethod
    def _null_object(cls, value: object) -> object:
        return {} if value is None else value


class ForecastResponse(_WireModel):
    entries: list[ForecastEntry] = Field(default_factory=list, alias="list")

    @field_validator("entries", mode="before")
    @classmethod
    def _null_list(cls, value: object) -> object:
        return [] if value is None else value


def parse_forecast_response(
    raw: bytes | str, status_code: int = HTTPStatus.OK
) -> Conditions:
    """Parse a forecast response body into Conditions.

    Raises:
        UpstreamStatusError: status_code is not 2xx; the body is not parsed.
        DecodeError: the body is not JSON, or not shaped like a forecast.
        MalformedResponse: there is no forecast entry, no weather entry, or
            no description to lead the forecast line with.
    """
    if not 200 <= status_code < 300:
        body = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
        raise UpstreamStatusError(status_code, body)

    try:
        response = ForecastResponse.model_validate_json(raw)
    except ValidationError as e:
        logger.debug("Undecodable weather API response: %s", e)
        raise DecodeError(f"Unable to decode weather API response: {e}") from e

    if not response.entries:
        raise MalformedResponse("unexpected empty `list` from weather API")
    entry = response.entries[0]
    if not entry.weather:
        raise MalformedResponse("unexpected empty `list[0].weather` from weather API")
    description = entry.weather[0].description
    if description is None:
        raise MalformedResponse("missing `list[0].weather[0].description` from weather API")

    return Conditions(
        description=description,
        temperature=entry.main.temp,
        feels_like=entry.main.feels_like,
        humidity=entry.main.humidity,
        wind_speed=entry.wind.speed,
    )
