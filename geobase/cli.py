#!/usr/bin/env python3

import argparse
import logging
import sys
from enum import Enum
from typing import List, Optional

from .config import GeoBaseConfig
from .geobase import GeoBase
from .models import Result
from .sources.optd import OptdLoader, OptdSource
from .utils.date_pattern import DEFAULT_DATE_PATTERN, DEFAULT_DATETIME_PATTERN

logger = logging.getLogger(__name__)

# sub command -> GeoBase method taking a single code
SINGLE_CODE_COMMANDS = {
    'city': ('city', 'Airport IATA code'),
    'cities': ('cities', 'Airport IATA code'),
    'country': ('country', 'Airport, city or country code'),
    'continent': ('continent', 'Airport, city or country code'),
    'iata-zone': ('iata_zone', 'Airport, city or country code'),
    'currency': ('currency', 'Airport, city or country code'),
    'airline-country': ('country_for_airline', 'Airline IATA code'),
    'airline-name': ('name_of_airline', 'Airline IATA code'),
    'timezone': ('time_zone', 'Airport or city IATA code'),
}


def _format_value(value) -> str:
    if isinstance(value, list):
        return '\n'.join(
            f"{item[0]} {item[1]}" if isinstance(item, tuple) else str(item)
            for item in value
        )
    if isinstance(value, Enum):
        return value.name
    return str(value)


def _report(result: Result) -> int:
    if result.is_failure:
        print(result.error, file=sys.stderr)
        return 1
    print(_format_value(result.value))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Travel and geography reference data lookups')
    parser.add_argument('-d', '--data-dir', help='Directory holding the reference files (default $GEOBASE_DATA_DIR or ./data)')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')
    commands = parser.add_subparsers(dest='command', required=True)

    update = commands.add_parser('update', help='Download the opentraveldata files')
    update.add_argument('--max-age-days', type=int, help='Refresh files older than this')
    update.add_argument('--force-refresh', help='Force refresh of cached data', action='store_true')
    update.add_argument('--never-refresh', help='Never refresh cached data if it exists', action='store_true')

    for name, (_, help_text) in SINGLE_CODE_COMMANDS.items():
        command = commands.add_parser(name, help=f'{name} of a code')
        command.add_argument('code', help=help_text)

    distance = commands.add_parser('distance', help='Distance in km between two locations')
    distance.add_argument('location_a')
    distance.add_argument('location_b')

    geotype = commands.add_parser('geotype', help='Domestic, continental or inter-continental trip')
    geotype.add_argument('locations', nargs='+')

    nearby = commands.add_parser('nearby', help='Airports within a radius, closest first')
    nearby.add_argument('location')
    nearby.add_argument('radius', type=float, help='Radius in km')
    nearby.add_argument('--details', help='Print the distance of each airport', action='store_true')

    for name, help_text in (('to-gmt', 'Local date to GMT'), ('to-local', 'GMT date to local')):
        command = commands.add_parser(name, help=help_text)
        command.add_argument('date')
        command.add_argument('location')
        command.add_argument('-f', '--format', default=DEFAULT_DATETIME_PATTERN)

    offset = commands.add_parser('offset', help='UTC offset in minutes at a local date')
    offset.add_argument('date')
    offset.add_argument('location')
    offset.add_argument('-f', '--format', default=DEFAULT_DATE_PATTERN)

    duration = commands.add_parser('duration', help='Trip duration between two local dates')
    duration.add_argument('departure_date')
    duration.add_argument('origin')
    duration.add_argument('arrival_date')
    duration.add_argument('destination')
    duration.add_argument('-u', '--unit', choices=['hours', 'minutes'], default='hours')
    duration.add_argument('-f', '--format', default=DEFAULT_DATETIME_PATTERN)

    return parser


def run(args: argparse.Namespace, geo_base: Optional[GeoBase] = None) -> int:
    config = GeoBaseConfig.from_env(data_dir=args.data_dir)

    if args.command == 'update':
        if args.max_age_days is not None:
            config.max_age_days = args.max_age_days
        source = OptdSource(config)
        source.set_force_refresh(args.force_refresh)
        source.set_never_refresh(args.never_refresh)
        for path in source.update():
            print(path)
        return 0

    geo_base = geo_base or GeoBase(OptdLoader(config))

    if args.command in SINGLE_CODE_COMMANDS:
        method_name, _ = SINGLE_CODE_COMMANDS[args.command]
        return _report(getattr(geo_base, method_name)(args.code))
    if args.command == 'distance':
        return _report(geo_base.distance_between(args.location_a, args.location_b))
    if args.command == 'geotype':
        return _report(geo_base.geo_type(args.locations))
    if args.command == 'nearby':
        if args.details:
            return _report(geo_base.nearby_airports_with_details(args.location, args.radius))
        return _report(geo_base.nearby_airports(args.location, args.radius))
    if args.command == 'to-gmt':
        return _report(geo_base.local_date_to_gmt(args.date, args.location, args.format))
    if args.command == 'to-local':
        return _report(geo_base.gmt_date_to_local(args.date, args.location, args.format))
    if args.command == 'offset':
        return _report(geo_base.offset_for_local_date(args.date, args.location, args.format))
    if args.command == 'duration':
        return _report(geo_base.trip_duration_from_local_dates(
            args.departure_date, args.origin, args.arrival_date, args.destination,
            args.unit, args.format
        ))
    raise ValueError(f"Unknown command {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        return run(args)
    except FileNotFoundError as e:
        logger.error(f"{e} (run 'geobase update' or set --data-dir)")
        return 2


if __name__ == '__main__':
    sys.exit(main())
