"""
The GeoBase facade: every lookup and computation behind one object.
"""

import logging
from functools import partial
from typing import List, Optional, Sequence, Tuple, Union

from .config import GeoBaseConfig
from .geo import GeoComputation, check_geo_type_arguments, check_radius
from .lookup import LookupEngine
from .models import DurationUnit, GeoType, Result
from .reference import LazyReferenceData, ReferenceData, ReferenceDataLoader
from .sources.optd import OptdLoader
from .timeconv import TimeConversion, parse_unit
from .utils.date_pattern import DEFAULT_DATE_PATTERN, DEFAULT_DATETIME_PATTERN

logger = logging.getLogger(__name__)


class _Engines:
    """The engines wired on one ReferenceData handle."""

    def __init__(self, data: ReferenceData):
        self.lookup = LookupEngine(data)
        self.geo = GeoComputation(self.lookup)
        self.time = TimeConversion(self.lookup)


class GeoBase:
    """
    A facility to deal with travel and geographical reference data.

    Provides airport/city/country/airline mappings based on opentraveldata,
    great circle distances, trip geography and time zone aware date
    conversions. Every method returns a Result:

        geo_base = GeoBase()

        geo_base.city("CDG").get()                  # "PAR"
        geo_base.country("CDG").get()               # "FR"
        geo_base.currency("NYC").get()              # "USD"
        geo_base.country_for_airline("AF").get()    # "FR"
        geo_base.distance_between("PAR", "NCE").get()   # 686
        geo_base.trip_duration_from_local_dates(
            "20160606_1627", "CDG", "20160606_1757", "JFK").get()  # 7.5
        geo_base.nearby_airports("CDG", 50).get()   # ["LBG", "ORY", "VIY", "POX"]
        geo_base.city("?*#").get_or_else("")        # ""

    Call arguments (number of locations, radius, duration unit) are checked
    before the reference data is touched, so invalid calls fail even when
    the data cannot be loaded.

    Reference data is read on first use, once, and is shared read-only
    afterwards, so a GeoBase can be used from several threads. It can also
    be pickled and sent to worker processes; the loaded tables travel with
    it.
    """

    def __init__(self, loader: Optional[ReferenceDataLoader] = None,
                 config: Optional[GeoBaseConfig] = None):
        """
        Args:
            loader: Source of the reference tables (defaults to OptdLoader)
            config: Configuration used to build the default loader
        """
        if loader is None:
            loader = OptdLoader(config)
        self._reference = LazyReferenceData(partial(ReferenceData.from_loader, loader))
        self._engines: Optional[_Engines] = None

    @classmethod
    def from_reference_data(cls, data: ReferenceData) -> 'GeoBase':
        """Wrap reference data that has already been loaded."""
        geo_base = cls.__new__(cls)
        geo_base._reference = LazyReferenceData.preloaded(data)
        geo_base._engines = None
        return geo_base

    @property
    def engines(self) -> _Engines:
        engines = self._engines
        if engines is None:
            # Building the engines twice is harmless, the data is loaded once
            engines = _Engines(self._reference.get())
            self._engines = engines
        return engines

    @property
    def reference_data(self) -> ReferenceData:
        return self._reference.get()

    def __getstate__(self):
        return {'_reference': self._reference}

    def __setstate__(self, state):
        self._reference = state['_reference']
        self._engines = None

    # Lookups

    def city(self, airport: str) -> Result[str]:
        """City of an airport, e.g. CDG -> PAR."""
        return self.engines.lookup.city(airport)

    def cities(self, airport: str) -> Result[List[str]]:
        """Cities of an airport shared by several cities, e.g. AZA -> [PHX, MSC]."""
        return self.engines.lookup.cities(airport)

    def country(self, location: str) -> Result[str]:
        """Country of an airport or a city; a country code is returned as is."""
        return self.engines.lookup.country(location)

    def continent(self, location: str) -> Result[str]:
        """Continent (EU, NA, SA, AF, AS, AN, OC) of an airport, city or country."""
        return self.engines.lookup.continent(location)

    def iata_zone(self, location: str) -> Result[str]:
        """IATA zone (11, 12, 13, 21, 22, 23, 31, 32, 33) of an airport, city or country."""
        return self.engines.lookup.iata_zone(location)

    def currency(self, location: str) -> Result[str]:
        return self.engines.lookup.currency(location)

    def country_for_airline(self, airline: str) -> Result[str]:
        return self.engines.lookup.country_for_airline(airline)

    def name_of_airline(self, airline: str) -> Result[str]:
        return self.engines.lookup.name_of_airline(airline)

    def time_zone(self, location: str) -> Result[str]:
        return self.engines.lookup.time_zone(location)

    # Geography

    def distance_between(self, location_a: str, location_b: str) -> Result[int]:
        """Distance in km between two airports or cities."""
        return self.engines.geo.distance_between(location_a, location_b)

    def geo_type(self, locations: Sequence[str]) -> Result[GeoType]:
        """DOMESTIC, CONTINENTAL or INTER_CONTINENTAL for a list of locations."""
        error = check_geo_type_arguments(locations)
        if error is not None:
            return Result.failure(error)
        return self.engines.geo.geo_type(locations)

    def nearby_airports(self, location: str, radius: float) -> Result[List[str]]:
        """Airports within radius km, closest first."""
        error = check_radius(radius)
        if error is not None:
            return Result.failure(error)
        return self.engines.geo.nearby_airports(location, radius)

    def nearby_airports_with_details(self, location: str, radius: float) -> Result[List[Tuple[str, int]]]:
        """Airports within radius km with their distance, closest first."""
        error = check_radius(radius)
        if error is not None:
            return Result.failure(error)
        return self.engines.geo.nearby_airports_with_details(location, radius)

    # Dates

    def local_date_to_gmt(self, local_date: str, location: str,
                          pattern: str = DEFAULT_DATETIME_PATTERN) -> Result[str]:
        return self.engines.time.local_date_to_gmt(local_date, location, pattern)

    def gmt_date_to_local(self, gmt_date: str, location: str,
                          pattern: str = DEFAULT_DATETIME_PATTERN) -> Result[str]:
        return self.engines.time.gmt_date_to_local(gmt_date, location, pattern)

    def offset_for_local_date(self, local_date: str, location: str,
                              pattern: str = DEFAULT_DATE_PATTERN) -> Result[int]:
        return self.engines.time.offset_for_local_date(local_date, location, pattern)

    def trip_duration_from_local_dates(self,
                                       local_departure_date: str, origin: str,
                                       local_arrival_date: str, destination: str,
                                       unit: Union[DurationUnit, str] = DurationUnit.HOURS,
                                       pattern: str = DEFAULT_DATETIME_PATTERN) -> Result[Union[float, int]]:
        duration_unit = parse_unit(unit)
        if duration_unit.is_failure:
            return duration_unit
        return self.engines.time.trip_duration_from_local_dates(
            local_departure_date, origin, local_arrival_date, destination, duration_unit.value, pattern
        )
