from enum import Enum


class GeoType(Enum):
    """Geography of a trip, from the countries and IATA zones it touches."""

    DOMESTIC = 'domestic'
    CONTINENTAL = 'continental'
    INTER_CONTINENTAL = 'inter_continental'


class DurationUnit(Enum):
    """Unit in which trip durations are returned."""

    HOURS = 'hours'
    MINUTES = 'minutes'
