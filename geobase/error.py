"""
Failure types for the geobase library.

Lookups return these inside a Result rather than raising them. They are
still real exceptions so that Result.get() can raise them for callers
who prefer exception flow.
"""

from typing import Iterable, Tuple


def _quote_all(codes: Iterable[str]) -> str:
    return ", ".join(f'"{code}"' for code in codes)


class GeoBaseError(Exception):
    """Base class for all geobase failures."""


class UnknownLocation(GeoBaseError):
    """One or more codes are absent from the location table (or malformed)."""

    def __init__(self, *codes: str):
        self.codes: Tuple[str, ...] = codes
        plural = "s" if len(codes) > 1 else ""
        super().__init__(f"Unknown location{plural} {_quote_all(codes)}")

    @property
    def code(self) -> str:
        return self.codes[0]


class UnknownCountry(GeoBaseError):
    """One or more codes are absent from the country table."""

    def __init__(self, *codes: str):
        self.codes: Tuple[str, ...] = codes
        suffix = "ies" if len(codes) > 1 else "y"
        super().__init__(f"Unknown countr{suffix} {_quote_all(codes)}")

    @property
    def code(self) -> str:
        return self.codes[0]


class UnknownAirline(GeoBaseError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f'Unknown airline "{code}"')


class MissingAttribute(GeoBaseError):
    """
    The code is known but the requested field is empty or cannot be parsed.

    Args:
        code: The location, country or airline code
        attribute: Human readable attribute name (e.g. "latitude")
        owner: What kind of record the code designates (e.g. "location")
    """

    def __init__(self, code: str, attribute: str, owner: str = "location"):
        self.code = code
        self.attribute = attribute
        self.owner = owner
        super().__init__(f'No {attribute} available for {owner} "{code}"')


class NegativeDuration(GeoBaseError):
    def __init__(self):
        super().__init__(
            "The trip duration computed is negative (maybe you've inverted "
            "departure/origin and arrival/destination)"
        )


class InvalidArgument(GeoBaseError):
    """A call precondition failed, independently of the reference data."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class ReferenceDataError(GeoBaseError):
    """Raised (not returned) when a reference table cannot be loaded."""
