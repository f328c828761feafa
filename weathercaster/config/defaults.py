"""Default OpenWeatherMap endpoint settings."""

DEFAULT_API_HOST = "https://api.openweathermap.org"
DEFAULT_API_PATH = "/data/2.5/forecast"
DEFAULT_TIMEOUT_SECONDS = 3.0
DEFAULT_USER_AGENT = "weathercaster/0.1.0"

# The `cnt` query parameter limits how many timestamps are returned.
# ref: https://openweathermap.org/forecast5#limit
RESULT_COUNT = 1

# Environment variables read by the config loader.
ENV_API_KEY = "OPENWEATHERMAP_API_KEY"
ENV_LOCATION = "WEATHERCASTER_LOCATION"
ENV_UNITS = "WEATHERCASTER_UNITS"
ENV_API_HOST = "WEATHERCASTER_API_HOST"
