"""Forecast request parameters."""

from dataclasses import dataclass, field

from weathercaster.config.defaults import RESULT_COUNT
from weathercaster.ingest.url_builder import build_forecast_url
from weathercaster.models.units import DEFAULT_UNIT_SYSTEM, UnitSystem


@dataclass(frozen=True)
class RequestSpec:
    """Everything needed to form one forecast request URL."""

    host: str
    path: str
    api_key: str = field(repr=False)
    location: str
    units: UnitSystem = DEFAULT_UNIT_SYSTEM
    count: int = field(default=RESULT_COUNT, init=False)

    def url(self) -> str:
        return build_forecast_url(
            self.host, self.path, self.api_key, self.location, self.units
        )
