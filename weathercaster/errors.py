"""Error taxonomy for forecast requests."""


class WeathercasterError(Exception):
    """Base class for every error raised while producing a forecast.

    ``location`` is filled in by the forecast pipeline so callers can
    render the failing query without threading it through every layer.
    """

    def __init__(self, message: str, location: str | None = None):
        super().__init__(message)
        self.location = location


class ConfigError(WeathercasterError):
    """Raised when the effective configuration cannot serve a request."""


class MissingApiKey(ConfigError):
    """Raised when no OpenWeatherMap API key is configured."""


class MissingLocation(ConfigError):
    """Raised when no location was given on the command line or in config."""


class InvalidUnitSystem(WeathercasterError, ValueError):
    """Raised for a unit system outside standard, metric and imperial."""

    def __init__(self, value: object):
        super().__init__(
            f"unit system {value!r} is invalid, please use one of "
            "standard (k), metric (c) or imperial (f)"
        )
        self.value = value


class TransportError(WeathercasterError):
    """Raised when the weather API host could not be reached."""


class UpstreamStatusError(WeathercasterError):
    """Raised when the weather API answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"HTTP {status_code} returned from weather API: {body}")
        self.status_code = status_code
        self.body = body


class DecodeError(WeathercasterError):
    """Raised when the response is not JSON of the expected shape."""


class MalformedResponse(WeathercasterError):
    """Raised when a decoded response lacks the forecast entry or description."""
