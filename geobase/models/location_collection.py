"""
Specialized queryable collection for LocationRecord objects.
"""

from typing import TYPE_CHECKING
from .queryable_collection import QueryableCollection

if TYPE_CHECKING:
    from .location import LocationRecord


class LocationCollection(QueryableCollection['LocationRecord']):
    """
    The location table as a collection.

    Examples:
        for airport in collection.airports():
            ...
    """

    def airports(self) -> 'LocationCollection':
        """Keep airport records only."""
        return self.filter(lambda location: location.is_airport)
