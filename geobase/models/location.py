import math
from dataclasses import dataclass
from enum import Enum
from typing import List

from ..error import MissingAttribute
from .result import Result


class LocationKind(Enum):
    AIRPORT = 'A'
    CITY = 'C'

    @classmethod
    def from_location_type(cls, location_type: str) -> 'LocationKind':
        """Map an OPTD location_type to a kind; only 'A' is an airport."""
        return cls.AIRPORT if location_type == cls.AIRPORT.value else cls.CITY


@dataclass(frozen=True)
class LocationRecord:
    """
    An airport or a city, keyed by its 3-letter IATA code.

    Attributes are kept as the raw text found in the reference files, so
    that a missing or malformed value only fails when it is actually asked
    for. Empty strings stand for absent values.
    """

    code: str
    city_code: str = ''  # one or more city codes, comma joined
    country_code: str = ''
    raw_latitude: str = ''  # decimal degrees
    raw_longitude: str = ''  # decimal degrees
    raw_time_zone: str = ''  # IANA zone name
    kind: LocationKind = LocationKind.CITY

    @property
    def is_airport(self) -> bool:
        return self.kind is LocationKind.AIRPORT

    def cities(self) -> Result[List[str]]:
        """All city codes served by this location, in file order."""
        cities = [city.strip() for city in self.city_code.split(',') if city.strip()]
        if not cities:
            return Result.failure(MissingAttribute(self.code, 'city', 'airport'))
        return Result.success(cities)

    def city(self) -> Result[str]:
        """The primary (first listed) city code."""
        return self.cities().map(lambda cities: cities[0])

    def country(self) -> Result[str]:
        if not self.country_code:
            return Result.failure(MissingAttribute(self.code, 'country'))
        return Result.success(self.country_code)

    def time_zone(self) -> Result[str]:
        if not self.raw_time_zone:
            return Result.failure(MissingAttribute(self.code, 'time zone'))
        return Result.success(self.raw_time_zone)

    def latitude(self) -> Result[float]:
        """Latitude in radians."""
        return self._radians(self.raw_latitude, 'latitude')

    def longitude(self) -> Result[float]:
        """Longitude in radians."""
        return self._radians(self.raw_longitude, 'longitude')

    def _radians(self, raw: str, attribute: str) -> Result[float]:
        try:
            degrees = float(raw)
        except ValueError:
            return Result.failure(MissingAttribute(self.code, attribute))
        if not math.isfinite(degrees):
            return Result.failure(MissingAttribute(self.code, attribute))
        return Result.success(math.radians(degrees))
