"""
opentraveldata (OPTD) reference files: loading and download.

Four caret (^) delimited tables make up the reference data:

- optd_por_public.csv: points of reference (airports, cities, ...), from OPTD
- optd_airlines.csv: airline names, from OPTD
- countries.csv: country -> currency, continent, IATA zone (curated locally)
- airlines.csv: airline -> country (curated locally)
"""

import csv
import logging
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd
import requests

from ..config import GeoBaseConfig
from ..error import ReferenceDataError
from ..models import AirlineRecord, CountryRecord, LocationKind, LocationRecord
from .cached import CachedSource

logger = logging.getLogger(__name__)

POR_COLUMNS = [
    'iata_code', 'latitude', 'longitude', 'date_until', 'country_code',
    'timezone', 'city_code_list', 'location_type',
]
COUNTRY_COLUMNS = ['country', 'currency', 'continent', 'iata_zone']
AIRLINE_COUNTRY_COLUMNS = ['airline', 'country']
AIRLINE_NAME_COLUMNS = ['2char_code', 'name']


def read_caret_table(path: Path, names: Optional[List[str]] = None, comment_header: bool = False) -> pd.DataFrame:
    """
    Read a caret delimited file with every value as text ('' when absent).

    Args:
        path: File to read
        names: Column names to use when the file has no usable header
        comment_header: Whether the first line is a '#' prefixed header to skip

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Reference file {path} not found")
    if comment_header:
        return pd.read_csv(path, sep='^', dtype=str, keep_default_na=False,
                           header=None, names=names, skiprows=1,
                           quoting=csv.QUOTE_NONE, encoding='utf-8')
    return pd.read_csv(path, sep='^', dtype=str, keep_default_na=False,
                       quoting=csv.QUOTE_NONE, encoding='utf-8')


def _require_columns(df: pd.DataFrame, columns: List[str], path: Path) -> None:
    missing = [column for column in columns if column not in df.columns]
    if missing:
        raise ReferenceDataError(f"{path.name} is missing columns {missing}")


class OptdLoader:
    """
    Loads the reference tables from a data directory.

    Implements the reference data loader contract: load_locations(),
    load_countries() and load_airlines() each return a dict keyed by code.
    """

    def __init__(self, config: Optional[GeoBaseConfig] = None):
        self.config = config or GeoBaseConfig.from_env()

    def load_locations(self) -> Dict[str, LocationRecord]:
        """
        Airports and cities from optd_por_public.csv.

        Rows with a validity end date are outdated and ignored. When an
        airport and a city share a code (NCE for instance) the airport is
        kept.
        """
        path = self.config.por_path
        df = read_caret_table(path)
        _require_columns(df, POR_COLUMNS, path)
        df = df[df['date_until'] == '']

        locations: Dict[str, LocationRecord] = {}
        for row in df.itertuples(index=False):
            code = row.iata_code
            if not code:
                logger.warning(f"Skipping {path.name} row without IATA code")
                continue
            location = LocationRecord(
                code=code,
                city_code=row.city_code_list.split('|')[0],
                country_code=row.country_code,
                raw_latitude=row.latitude,
                raw_longitude=row.longitude,
                raw_time_zone=row.timezone,
                kind=LocationKind.from_location_type(row.location_type),
            )
            existing = locations.get(code)
            if existing is None or (location.is_airport and not existing.is_airport):
                locations[code] = location
        logger.info(f"Loaded {len(locations)} locations from {path.name}")
        return locations

    def load_countries(self) -> Dict[str, CountryRecord]:
        path = self.config.countries_path
        df = read_caret_table(path, names=COUNTRY_COLUMNS, comment_header=True)
        countries = {
            row.country: CountryRecord(
                code=row.country,
                currency_code=row.currency,
                continent_code=row.continent,
                iata_zone_code=row.iata_zone,
            )
            for row in df.itertuples(index=False)
            if row.country
        }
        logger.info(f"Loaded {len(countries)} countries from {path.name}")
        return countries

    def load_airlines(self) -> Dict[str, AirlineRecord]:
        """
        Airlines, merging the country table with the OPTD names table.

        An airline may appear in only one of the two tables. When the names
        table holds several names for a code, the first one is kept.
        """
        names_path = self.config.airline_names_path
        names_df = read_caret_table(names_path)
        _require_columns(names_df, AIRLINE_NAME_COLUMNS, names_path)

        airlines: Dict[str, AirlineRecord] = {}
        names_df = names_df.rename(columns={'2char_code': 'code'})
        for row in names_df.itertuples(index=False):
            if row.code and row.code not in airlines:
                airlines[row.code] = AirlineRecord(code=row.code, name=row.name)

        countries_path = self.config.airline_countries_path
        countries_df = read_caret_table(countries_path, names=AIRLINE_COUNTRY_COLUMNS, comment_header=True)
        for row in countries_df.itertuples(index=False):
            if not row.airline:
                continue
            with_country = AirlineRecord(code=row.airline, country_code=row.country)
            existing = airlines.get(row.airline)
            airlines[row.airline] = with_country.merged_with(existing) if existing else with_country

        logger.info(f"Loaded {len(airlines)} airlines from {names_path.name} and {countries_path.name}")
        return airlines


class OptdSource(CachedSource):
    """
    Downloads the OPTD files into the data directory.

    Only optd_por_public.csv and optd_airlines.csv are published by OPTD;
    countries.csv and airlines.csv are maintained alongside them by hand.
    """

    USER_AGENT = "geobase/0.1 (reference data updater)"

    def __init__(self, config: Optional[GeoBaseConfig] = None, session: Optional[requests.Session] = None):
        """
        Args:
            config: Data directory, URLs and cache settings
            session: Optional requests.Session for dependency injection (testing)
        """
        self.config = config or GeoBaseConfig.from_env()
        super().__init__(self.config.data_dir)
        self._session = session or requests.Session()

    def _download(self, url: str) -> bytes:
        logger.info(f"Downloading {url}")
        headers = {"User-Agent": self.USER_AGENT}
        response = self._session.get(url, headers=headers, timeout=self.config.request_timeout)
        response.raise_for_status()
        return response.content

    def fetch_por(self) -> bytes:
        return self._download(self.config.por_url)

    def fetch_airlines(self) -> bytes:
        return self._download(self.config.airline_names_url)

    def update(self) -> List[Path]:
        """
        Refresh the OPTD files that are missing or older than max_age_days.

        Returns:
            Paths of the up to date files
        """
        max_age_days = self.config.max_age_days
        return [
            self.get_file('por', self.config.por_file, max_age_days),
            self.get_file('airlines', self.config.airline_names_file, max_age_days),
        ]
