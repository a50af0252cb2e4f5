"""
Code to attribute lookups over the reference tables.

Every method returns a Result. Unknown codes fail with UnknownLocation,
UnknownCountry or UnknownAirline; known codes with an empty or unparsable
field fail with MissingAttribute. Composed lookups (continent, currency,
IATA zone) surface the first failure of their inner steps unchanged.
"""

import logging
from typing import Callable, List

from .error import UnknownAirline, UnknownCountry, UnknownLocation
from .models import AirlineRecord, CountryRecord, LocationRecord, Result
from .reference import ReferenceData

logger = logging.getLogger(__name__)


class LookupEngine:
    """Resolves IATA codes to validated attributes."""

    def __init__(self, data: ReferenceData):
        self._data = data

    @property
    def data(self) -> ReferenceData:
        return self._data

    # Record lookups

    def location(self, code: str) -> Result[LocationRecord]:
        record = self._data.locations.get(code)
        if record is None:
            return Result.failure(UnknownLocation(code))
        return Result.success(record)

    def country_record(self, code: str) -> Result[CountryRecord]:
        record = self._data.countries.get(code)
        if record is None:
            return Result.failure(UnknownCountry(code))
        return Result.success(record)

    def airline(self, code: str) -> Result[AirlineRecord]:
        record = self._data.airlines.get(code)
        if record is None:
            return Result.failure(UnknownAirline(code))
        return Result.success(record)

    # Location attributes

    def city(self, airport: str) -> Result[str]:
        """Primary city of an airport (a city code maps to itself)."""
        return self.location(airport).flat_map(LocationRecord.city)

    def cities(self, airport: str) -> Result[List[str]]:
        """All cities served by an airport, e.g. AZA -> ['PHX', 'MSC']."""
        return self.location(airport).flat_map(LocationRecord.cities)

    def country(self, location: str) -> Result[str]:
        """
        Country of an airport or city.

        A 2-character input is taken to already be a country code and is
        returned as is, without checking the country table.
        """
        if len(location) == 2:
            return Result.success(location)
        if len(location) == 3:
            return self.location(location).flat_map(LocationRecord.country)
        return Result.failure(UnknownLocation(location))

    def time_zone(self, location: str) -> Result[str]:
        return self.location(location).flat_map(LocationRecord.time_zone)

    def latitude(self, location: str) -> Result[float]:
        """Latitude in radians."""
        return self.location(location).flat_map(LocationRecord.latitude)

    def longitude(self, location: str) -> Result[float]:
        """Longitude in radians."""
        return self.location(location).flat_map(LocationRecord.longitude)

    # Country attributes, from an airport, a city or a country

    def continent(self, location: str) -> Result[str]:
        return self._country_attribute(location, CountryRecord.continent)

    def iata_zone(self, location: str) -> Result[str]:
        return self._country_attribute(location, CountryRecord.iata_zone)

    def currency(self, location: str) -> Result[str]:
        return self._country_attribute(location, CountryRecord.currency)

    def _country_attribute(self, location: str,
                           attribute: Callable[[CountryRecord], Result[str]]) -> Result[str]:
        return (
            self.country(location)
            .flat_map(self.country_record)
            .flat_map(attribute)
        )

    # Airline attributes

    def country_for_airline(self, code: str) -> Result[str]:
        return self.airline(code).flat_map(AirlineRecord.country)

    def name_of_airline(self, code: str) -> Result[str]:
        return self.airline(code).flat_map(AirlineRecord.airline_name)
