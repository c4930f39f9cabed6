"""
Weather CLI — the user-facing interface.

Looks up a place, then prints the nearest upcoming forecast for it.

Usage:
  python weather.py "Stockholm, Stockholms kommun, Stockholm County, 111 29, Sweden"
"""

import argparse
import logging
import sys
from typing import Optional

from config import DEFAULT_ENV_FILE, load_settings
from errors import ConfigError, LookupFailed, MissingArgumentError
from orchestrator import Orchestrator

log = logging.getLogger("weather")

USAGE_HINT = (
    "Missing parameter. Try running the following: "
    'weather "Stockholm, Stockholms kommun, Stockholm County, 111 29, Sweden"'
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weather",
        description="Print the upcoming forecast for a place.",
    )
    parser.add_argument("location", nargs="?", help="free-text place query, quoted")
    parser.add_argument(
        "--env-file",
        default=DEFAULT_ENV_FILE,
        help=f"dotenv file with USERAGENT, GEOCODEAPIURL, FORECASTAPIURL (default: {DEFAULT_ENV_FILE})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def get_location_parameter(args: argparse.Namespace) -> str:
    location = (args.location or "").strip()
    if not location:
        raise MissingArgumentError("Missing parameter")
    return location


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
        level=logging.DEBUG if verbose else logging.INFO,
    )
    # Keep connection-pool chatter out of debug output
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        location = get_location_parameter(args)
    except MissingArgumentError:
        print(USAGE_HINT)
        return 0

    try:
        settings = load_settings(args.env_file)
    except ConfigError as e:
        log.critical(str(e))
        return 1
    if not args.verbose:
        logging.getLogger().setLevel(settings.log_level)

    orchestrator = Orchestrator(settings)
    try:
        resolution = orchestrator.resolve(location)
    except LookupFailed as e:
        log.critical(str(e))
        return 1

    print(orchestrator.get_resolution_text(resolution))
    return 0


if __name__ == "__main__":
    sys.exit(main())
