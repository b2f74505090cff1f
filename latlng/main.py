"""
latlng command line.

Geohash, decode, measure and travel between points from the shell.
Every command prints a single JSON document.
"""

import argparse
import logging
import sys

from pydantic import BaseModel

from latlng import __version__, geohash
from latlng.config import settings
from latlng.exceptions import LatLngError
from latlng.geo import distance, initial_bearing, travel
from latlng.models import (
    BearingResult,
    DistanceResult,
    ErrorResponse,
    GeohashResult,
    Point,
    TravelResult,
)
from latlng.point import LatLng
from latlng.units import LengthUnit

logger = logging.getLogger("latlng")


def _hash(args: argparse.Namespace) -> BaseModel:
    point = LatLng(args.lat, args.lng)
    return GeohashResult(geohash=geohash.hash(point), point=Point.from_latlng(point))


def _decode(args: argparse.Namespace) -> BaseModel:
    point = geohash.decode(args.geohash)
    return GeohashResult(geohash=args.geohash, point=Point.from_latlng(point))


def _distance(args: argparse.Namespace) -> BaseModel:
    start = LatLng(args.lat1, args.lng1)
    end = LatLng(args.lat2, args.lng2)
    return DistanceResult(
        start=Point.from_latlng(start),
        end=Point.from_latlng(end),
        distance=distance(start, end, args.unit),
        unit=args.unit,
    )


def _bearing(args: argparse.Namespace) -> BaseModel:
    start = LatLng(args.lat1, args.lng1)
    end = LatLng(args.lat2, args.lng2)
    return BearingResult(
        start=Point.from_latlng(start),
        end=Point.from_latlng(end),
        bearing=initial_bearing(start, end),
    )


def _travel(args: argparse.Namespace) -> BaseModel:
    start = LatLng(args.lat, args.lng)
    destination = travel(start, args.bearing, args.distance, args.unit)
    return TravelResult(
        start=Point.from_latlng(start),
        bearing=args.bearing,
        distance=args.distance,
        unit=args.unit,
        destination=Point.from_latlng(destination),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="latlng", description="Fixed-precision latitude/longitude toolkit"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    unit_help = f"Length unit (default: {settings.default_unit.value}, or LATLNG_DEFAULT_UNIT env var)"
    units = [unit.value for unit in LengthUnit]

    hash_cmd = commands.add_parser("hash", help="Geohash a point")
    hash_cmd.add_argument("lat", type=float)
    hash_cmd.add_argument("lng", type=float)
    hash_cmd.set_defaults(handler=_hash)

    decode_cmd = commands.add_parser("decode", help="Decode a geohash")
    decode_cmd.add_argument("geohash")
    decode_cmd.set_defaults(handler=_decode)

    for name, handler, help_text in (
        ("distance", _distance, "Great-circle distance between two points"),
        ("bearing", _bearing, "Initial bearing from one point to another"),
    ):
        cmd = commands.add_parser(name, help=help_text)
        for arg in ("lat1", "lng1", "lat2", "lng2"):
            cmd.add_argument(arg, type=float)
        if name == "distance":
            cmd.add_argument("-u", "--unit", type=LengthUnit, choices=units, default=None, help=unit_help)
        cmd.set_defaults(handler=handler)

    travel_cmd = commands.add_parser("travel", help="Follow a great circle from a point")
    travel_cmd.add_argument("lat", type=float)
    travel_cmd.add_argument("lng", type=float)
    travel_cmd.add_argument("bearing", type=float, help="Initial bearing in degrees")
    travel_cmd.add_argument("distance", type=float)
    travel_cmd.add_argument("-u", "--unit", type=LengthUnit, choices=units, default=None, help=unit_help)
    travel_cmd.set_defaults(handler=_travel)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one command and print its result. Returns the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Command line args override config/env vars
    if getattr(args, "unit", None) is None:
        args.unit = settings.default_unit

    try:
        result = args.handler(args)
    except LatLngError as e:
        logger.error(f"{args.command} failed: {e.message}")
        print(ErrorResponse(error=type(e).__name__, detail=e.message).model_dump_json())
        return 1

    print(result.model_dump_json())
    return 0


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
