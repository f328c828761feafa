"""CLI entry point for the weather forecast client."""

import argparse
import logging
import sys

import yaml
from pydantic import ValidationError

from weathercaster.config.loader import load_config
from weathercaster.errors import ConfigError, InvalidUnitSystem, WeathercasterError
from weathercaster.pipeline.forecast_pipeline import ForecastPipeline

LOCATION_HELP = """The location for which you want a weather forecast. Also
specified via the WEATHERCASTER_LOCATION environment variable. A location can
be "LocationName" (for well-known locations, such as London) or
"CityName,StateName,CountryCode", for example "Great Neck Plaza,NY,US"."""

UNITS_HELP = """Unit system for temperature and wind speed: standard (k),
metric (c) or imperial (f). Also specified via the WEATHERCASTER_UNITS
environment variable. The default is imperial."""


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weathercaster",
        description="Brief weather forecast from OpenWeatherMap",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # forecast
    forecast_p = sub.add_parser("forecast", help="Print a one-line forecast")
    forecast_p.add_argument("-l", "--location", default=None, help=LOCATION_HELP)
    forecast_p.add_argument("-u", "--units", default=None, help=UNITS_HELP)

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display effective config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError, ValidationError, ConfigError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_forecast(config, args) -> int:
    pipeline = ForecastPipeline(config)
    try:
        forecast = pipeline.forecast(args.location, args.units)
    except (ConfigError, InvalidUnitSystem) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except WeathercasterError as e:
        print(
            f"Error querying weather API for location {e.location!r}: {e}",
            file=sys.stderr,
        )
        return 1
    print(forecast)
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    else:
        print("Use: config show")
        return 1
