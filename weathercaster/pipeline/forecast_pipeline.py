"""Forecast pipeline: build request, fetch, normalize, format."""

import logging

from weathercaster.config.schema import WeathercasterConfig
from weathercaster.errors import MissingApiKey, MissingLocation, WeathercasterError
from weathercaster.ingest.owm_client import OwmClient
from weathercaster.ingest.response_parser import parse_forecast_response
from weathercaster.ingest.url_builder import build_forecast_url
from weathercaster.models.request import RequestSpec
from weathercaster.models.units import UnitSystem, parse_unit_system
from weathercaster.reporting.formatters import format_forecast

logger = logging.getLogger(__name__)


class ForecastPipeline:
    def __init__(self, config: WeathercasterConfig, client: OwmClient | None = None):
        self.config = config
        self.client = client or OwmClient(
            timeout=config.api.timeout_seconds,
            user_agent=config.api.user_agent,
        )

    def request_spec(
        self, location: str | None = None, units: UnitSystem | str | None = None
    ) -> RequestSpec:
        """Combine call arguments with config into a RequestSpec.

        Arguments win over config; an empty location or API key is an error.
        """
        location = location or self.config.location
        if not location:
            raise MissingLocation(
                "Please specify a location using either the -l command-line flag, "
                "or by setting the WEATHERCASTER_LOCATION environment variable."
            )
        api_key = self.config.api_key.get_secret_value()
        if not api_key:
            raise MissingApiKey(
                "Please set the OPENWEATHERMAP_API_KEY environment variable to an "
                "OpenWeatherMap API key. To obtain an API key, see "
                "https://home.openweathermap.org/api_keys"
            )
        return RequestSpec(
            host=self.config.api.host,
            path=self.config.api.path,
            api_key=api_key,
            location=location,
            units=parse_unit_system(units or self.config.units),
        )

    def forecast(
        self, location: str | None = None, units: UnitSystem | str | None = None
    ) -> str:
        """Return the one-line forecast for a location.

        Errors keep their type; the requested location is attached to them.
        """
        location = location or self.config.location
        try:
            spec = self.request_spec(location, units)
            logger.info("Fetching forecast for %r in %s units", spec.location, spec.units)
            raw = self.client.fetch(self._fetch_url(spec))
            conditions = parse_forecast_response(raw.body, raw.status_code)
            return format_forecast(conditions, spec.units)
        except WeathercasterError as e:
            e.location = location
            logger.error("Forecast for %r failed: %s", location, e)
            raise

    @staticmethod
    def _fetch_url(spec: RequestSpec) -> str:
        # Readings are always fetched in Kelvin and m/s; format_forecast converts.
        return build_forecast_url(
            spec.host, spec.path, spec.api_key, spec.location, UnitSystem.STANDARD
        )
