"""
Immutable reference data handle and its initialize-once guard.

The three reference tables are read once, wrapped in read-only mappings and
then shared by every engine. Loading happens on first use and at most once,
even when several threads ask for the data at the same time.
"""

import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Protocol

from .error import ReferenceDataError
from .models import AirlineRecord, CountryRecord, LocationCollection, LocationRecord

logger = logging.getLogger(__name__)


class ReferenceDataLoader(Protocol):
    """Anything able to produce the three reference tables."""

    def load_locations(self) -> Mapping[str, LocationRecord]:
        ...

    def load_countries(self) -> Mapping[str, CountryRecord]:
        ...

    def load_airlines(self) -> Mapping[str, AirlineRecord]:
        ...


@dataclass(frozen=True)
class ReferenceData:
    """
    The three reference tables, read-only for the process lifetime.

    Use ReferenceData.build() rather than the constructor so that the
    tables are checked and frozen.
    """

    locations: Mapping[str, LocationRecord]
    countries: Mapping[str, CountryRecord]
    airlines: Mapping[str, AirlineRecord]

    @classmethod
    def build(cls,
              locations: Mapping[str, LocationRecord],
              countries: Mapping[str, CountryRecord],
              airlines: Mapping[str, AirlineRecord]) -> 'ReferenceData':
        """
        Check key consistency and freeze the tables.

        Raises:
            ReferenceDataError: If a record is stored under a key other than its code
        """
        for name, table in (('location', locations), ('country', countries), ('airline', airlines)):
            for key, record in table.items():
                if key != record.code:
                    raise ReferenceDataError(
                        f"{name} record {record.code!r} stored under key {key!r}"
                    )
        return cls(
            locations=MappingProxyType(dict(locations)),
            countries=MappingProxyType(dict(countries)),
            airlines=MappingProxyType(dict(airlines)),
        )

    @classmethod
    def from_loader(cls, loader: ReferenceDataLoader) -> 'ReferenceData':
        data = cls.build(
            loader.load_locations(),
            loader.load_countries(),
            loader.load_airlines(),
        )
        logger.info(
            f"Reference data loaded: {len(data.locations)} locations, "
            f"{len(data.countries)} countries, {len(data.airlines)} airlines"
        )
        return data

    def location_collection(self) -> LocationCollection:
        """All location records, in table order, as a queryable collection."""
        return LocationCollection(list(self.locations.values()))

    def __getstate__(self):
        # mappingproxy cannot be pickled
        return {
            'locations': dict(self.locations),
            'countries': dict(self.countries),
            'airlines': dict(self.airlines),
        }

    def __setstate__(self, state):
        for name, table in state.items():
            object.__setattr__(self, name, MappingProxyType(table))


class LazyReferenceData:
    """
    Initialize-once accessor for ReferenceData.

    The factory runs on the first call to get() and never again; concurrent
    first callers block until the single load is done. A failed load is not
    cached, so the next call tries again.
    """

    def __init__(self, factory: Optional[Callable[[], ReferenceData]]):
        self._factory = factory
        self._data: Optional[ReferenceData] = None
        self._lock = threading.Lock()

    @classmethod
    def preloaded(cls, data: ReferenceData) -> 'LazyReferenceData':
        """Wrap data that is already loaded."""
        lazy = cls(None)
        lazy._data = data
        return lazy

    @property
    def is_loaded(self) -> bool:
        return self._data is not None

    def get(self) -> ReferenceData:
        data = self._data
        if data is not None:
            return data
        with self._lock:
            if self._data is None:
                logger.debug("Loading reference data")
                self._data = self._factory()
            return self._data

    def __getstate__(self):
        state = self.__dict__.copy()
        del state['_lock']
        return state

    def __setstate__(self, state):
        self.__dict__.update(state)
        self._lock = threading.Lock()
