from dataclasses import dataclass

from ..error import MissingAttribute
from .result import Result


@dataclass(frozen=True)
class AirlineRecord:
    """
    An airline, keyed by its 2-character IATA code.

    The country and the name come from two different tables and are merged
    by the loader, so either of them may be empty.
    """

    code: str
    country_code: str = ''
    name: str = ''

    def country(self) -> Result[str]:
        if not self.country_code:
            return Result.failure(MissingAttribute(self.code, 'country', 'airline'))
        return Result.success(self.country_code)

    def airline_name(self) -> Result[str]:
        if not self.name:
            return Result.failure(MissingAttribute(self.code, 'name', 'airline'))
        return Result.success(self.name)

    def merged_with(self, other: 'AirlineRecord') -> 'AirlineRecord':
        """Fill the empty fields of this record from another one for the same code."""
        return AirlineRecord(
            code=self.code,
            country_code=self.country_code or other.country_code,
            name=self.name or other.name,
        )
