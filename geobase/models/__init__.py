"""
Data models for the geobase library.

This package contains the reference records (locations, countries,
airlines), the Result type returned by every lookup, the trip enums and
the queryable collections used to scan the location table.
"""

from .result import Result
from .location import LocationRecord, LocationKind
from .country import CountryRecord
from .airline import AirlineRecord
from .enums import GeoType, DurationUnit
from .queryable_collection import QueryableCollection
from .location_collection import LocationCollection

__all__ = [
    # Core models
    'LocationRecord',
    'LocationKind',
    'CountryRecord',
    'AirlineRecord',
    'Result',
    'GeoType',
    'DurationUnit',
    # Queryable collections
    'QueryableCollection',
    'LocationCollection',
]
