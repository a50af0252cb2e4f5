"""
Travel and geography reference data library.

This package resolves IATA codes of airports, cities, countries and
airlines to their attributes, computes distances and trip geography, and
converts dates between local time and GMT.

The main public API includes:
- GeoBase: Facade exposing every lookup and computation
- Result: Success or failure value returned by every lookup
- GeoType, DurationUnit: Enumerations used by trip computations
- GeoBaseConfig: Data directory and download settings
- OptdLoader, OptdSource: Reading and downloading the reference files
"""

from .config import GeoBaseConfig
from .error import (
    GeoBaseError, UnknownLocation, UnknownCountry, UnknownAirline,
    MissingAttribute, NegativeDuration, InvalidArgument, ReferenceDataError,
)
from .models import Result, GeoType, DurationUnit
from .reference import ReferenceData
from .geobase import GeoBase
from .sources import OptdLoader, OptdSource

__version__ = '0.1.0'
__all__ = [
    'GeoBase',
    'GeoBaseConfig',
    'Result',
    'GeoType',
    'DurationUnit',
    'ReferenceData',
    'OptdLoader',
    'OptdSource',
    'GeoBaseError',
    'UnknownLocation',
    'UnknownCountry',
    'UnknownAirline',
    'MissingAttribute',
    'NegativeDuration',
    'InvalidArgument',
    'ReferenceDataError',
]
