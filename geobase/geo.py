"""
Distance, trip geography and nearby airport computations.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .error import InvalidArgument, MissingAttribute, UnknownCountry, UnknownLocation
from .lookup import LookupEngine
from .models import CountryRecord, GeoType, LocationRecord, Result
from .utils.haversine import haversine_km, round_half_up

logger = logging.getLogger(__name__)


def _distinct(values: Sequence[str]) -> List[str]:
    """Distinct values, in first seen order."""
    return list(dict.fromkeys(values))


def check_geo_type_arguments(locations: Sequence[str]) -> Optional[InvalidArgument]:
    if len(locations) < 2:
        return InvalidArgument("at least 2 locations are needed to compute a geography type")
    return None


def check_radius(radius: float) -> Optional[InvalidArgument]:
    if radius <= 0:
        return InvalidArgument("radius must be strictly positive")
    return None


class GeoComputation:
    """Geographic computations built on top of a LookupEngine."""

    def __init__(self, lookup: LookupEngine):
        self._lookup = lookup

    def distance_between(self, location_a: str, location_b: str) -> Result[int]:
        """
        Great circle distance between two airports or cities.

        Args:
            location_a: IATA code of the first location
            location_b: IATA code of the second location

        Returns:
            Result with the distance in kilometers, rounded to the nearest km.
            An unknown location is reported before a location without
            coordinates, side A before side B.
        """
        record_a = self._lookup.location(location_a)
        if record_a.is_failure:
            return record_a
        record_b = self._lookup.location(location_b)
        if record_b.is_failure:
            return record_b
        return self._distance(record_a.value, record_b.value)

    def _distance(self, record_a: LocationRecord, record_b: LocationRecord) -> Result[int]:
        lat_a, lon_a = record_a.latitude(), record_a.longitude()
        if lat_a.is_failure or lon_a.is_failure:
            return Result.failure(MissingAttribute(record_a.code, 'coordinates'))
        lat_b, lon_b = record_b.latitude(), record_b.longitude()
        if lat_b.is_failure or lon_b.is_failure:
            return Result.failure(MissingAttribute(record_b.code, 'coordinates'))
        distance = haversine_km(lat_a.value, lon_a.value, lat_b.value, lon_b.value)
        return Result.success(round_half_up(distance))

    def geo_type(self, locations: Sequence[str]) -> Result[GeoType]:
        """
        Classify a trip as domestic, continental or inter-continental.

        Locations may be airports, cities or countries. The trip is domestic
        when every location is in the same country, continental when every
        country is in the same IATA zone, inter-continental otherwise.

        Args:
            locations: At least 2 location codes

        Returns:
            Result with a GeoType. Failures name every location (or country)
            that could not be resolved.
        """
        error = check_geo_type_arguments(locations)
        if error is not None:
            return Result.failure(error)

        countries = [self._lookup.country(location) for location in locations]
        unknown_locations = _distinct([
            location for location, country in zip(locations, countries)
            if country.is_failure
        ])
        if unknown_locations:
            return Result.failure(UnknownLocation(*unknown_locations))

        distinct_countries = _distinct([country.value for country in countries])
        if len(distinct_countries) == 1:
            return Result.success(GeoType.DOMESTIC)

        zones = [
            self._lookup.country_record(country).flat_map(CountryRecord.iata_zone)
            for country in distinct_countries
        ]
        unknown_countries = [
            country for country, zone in zip(distinct_countries, zones)
            if zone.is_failure
        ]
        if unknown_countries:
            return Result.failure(UnknownCountry(*unknown_countries))

        if len({zone.value for zone in zones}) == 1:
            return Result.success(GeoType.CONTINENTAL)
        return Result.success(GeoType.INTER_CONTINENTAL)

    def nearby_airports_with_details(self, location: str, radius: float) -> Result[List[Tuple[str, int]]]:
        """
        Airports within radius km of a location, closest first.

        The location itself is never part of the result (its distance is 0)
        and airports without coordinates are ignored. Airports at the same
        distance keep the order of the location table.

        Args:
            location: Airport or city code
            radius: Search radius in kilometers, strictly positive

        Returns:
            Result with a list of (airport code, distance in km) pairs
        """
        error = check_radius(radius)
        if error is not None:
            return Result.failure(error)
        origin = self._lookup.location(location)
        if origin.is_failure:
            return origin

        nearby = []
        for airport in self._lookup.data.location_collection().airports():
            distance = self._distance(origin.value, airport).get_or_else(-1)
            if 0 < distance <= radius:
                nearby.append((airport.code, distance))
        nearby.sort(key=lambda pair: pair[1])
        logger.debug(f"{len(nearby)} airports within {radius}km of {location}")
        return Result.success(nearby)

    def nearby_airports(self, location: str, radius: float) -> Result[List[str]]:
        """Codes of the airports within radius km of a location, closest first."""
        return self.nearby_airports_with_details(location, radius).map(
            lambda pairs: [code for code, _ in pairs]
        )
