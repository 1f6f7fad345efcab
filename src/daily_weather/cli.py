"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from daily_weather import __version__
from daily_weather.config import get_settings, resolve_api_key
from daily_weather.datasources.forecast import classify, fetch_forecast
from daily_weather.datasources.search import is_location_valid
from daily_weather.errors import ConfigurationError, WeatherError
from daily_weather.schemas import Scale

logger = logging.getLogger("daily_weather")

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(debug: bool = False) -> None:
    """Log to stderr; DEBUG level in debug mode, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="daily-weather",
        description="Today's forecast as a display icon, and location validation",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    forecast_parser = subparsers.add_parser("forecast", help="Fetch today's forecast")
    forecast_parser.add_argument("location", help="Coordinates as 'lat,lon'")
    forecast_parser.add_argument(
        "--address",
        default="",
        help="Address label to include in the result",
    )
    forecast_parser.add_argument(
        "--scale",
        default=Scale.CELSIUS.value,
        help="celsius or fahrenheit (default: celsius)",
    )
    forecast_parser.add_argument(
        "--test",
        action="store_true",
        help="Return the built-in sample forecast without calling the API",
    )

    validate_parser = subparsers.add_parser("validate", help="Check a location is recognized")
    validate_parser.add_argument("location", help="Free-text location, e.g. 'London'")

    classify_parser = subparsers.add_parser(
        "classify", help="Map a provider icon to a display icon"
    )
    classify_parser.add_argument("icon", help="Provider icon code, e.g. 'rain'")
    classify_parser.add_argument(
        "intensity",
        nargs="?",
        type=float,
        default=0.0,
        help="Precipitation intensity in inches/hour (default: 0)",
    )

    subparsers.add_parser("info", help="Show application info")

    return parser


def cmd_forecast(args: argparse.Namespace) -> int:
    """Handle the 'forecast' command."""
    logger.debug(
        "Fetching forecast for %s (scale=%s, test=%s)", args.location, args.scale, args.test
    )
    result = fetch_forecast(args.location, args.address, args.scale, args.test)
    print(json.dumps(result.to_payload(), indent=2))
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle the 'validate' command: exit 0 if recognized, 1 if not."""
    if is_location_valid(args.location):
        print(f"Valid location: {args.location}")
        return 0
    print(f"Unknown location: {args.location}", file=sys.stderr)
    return 1


def cmd_classify(args: argparse.Namespace) -> int:
    """Handle the 'classify' command."""
    print(classify(args.icon, args.intensity).value)
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command. Never prints the key itself."""
    settings = get_settings()
    try:
        resolve_api_key(settings)
        key_status = "configured"
    except ConfigurationError as exc:
        key_status = f"missing ({exc})"

    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Config file: {settings.config_path}")
    print(f"API key: {key_status}")
    print(f"Forecast API: {settings.forecast_api_url}")
    print(f"Search API: {settings.search_api_url}")
    print(f"Timeout: {settings.http_timeout}s")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        debug = args.debug or get_settings().debug
    except ConfigurationError:
        debug = args.debug  # reported by the command that needs settings
    configure_logging(debug)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "forecast": cmd_forecast,
        "validate": cmd_validate,
        "classify": cmd_classify,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except WeatherError as exc:
        logger.debug("%s failed", args.command, exc_info=exc)
        if exc.__cause__ is not None:
            logger.warning("%s: caused by %r", type(exc).__name__, exc.__cause__)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
