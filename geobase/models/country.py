from dataclasses import dataclass

from ..error import MissingAttribute
from .result import Result


@dataclass(frozen=True)
class CountryRecord:
    """A country with its currency, continent and IATA zone."""

    code: str  # ISO 3166 alpha-2
    currency_code: str = ''
    continent_code: str = ''
    iata_zone_code: str = ''

    def currency(self) -> Result[str]:
        return self._extract(self.currency_code, 'currency')

    def continent(self) -> Result[str]:
        return self._extract(self.continent_code, 'continent')

    def iata_zone(self) -> Result[str]:
        return self._extract(self.iata_zone_code, 'iata zone')

    def _extract(self, value: str, attribute: str) -> Result[str]:
        if not value:
            return Result.failure(MissingAttribute(self.code, attribute, 'country'))
        return Result.success(value)
