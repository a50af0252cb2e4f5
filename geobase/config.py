"""
Configuration for the geobase library.

Where the reference files live, where they are downloaded from and how
old a downloaded file may get before it is fetched again.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Environment variables
DATA_DIR_ENV = "GEOBASE_DATA_DIR"
MAX_AGE_DAYS_ENV = "GEOBASE_MAX_AGE_DAYS"

DEFAULT_DATA_DIR = "data"
DEFAULT_MAX_AGE_DAYS = 30

# opentraveldata public files
OPTD_BASE_URL = "https://raw.githubusercontent.com/opentraveldata/opentraveldata/master/opentraveldata"
OPTD_POR_URL = f"{OPTD_BASE_URL}/optd_por_public.csv"
OPTD_AIRLINES_URL = f"{OPTD_BASE_URL}/optd_airlines.csv"


@dataclass
class GeoBaseConfig:
    """Locations of the four reference tables and download settings."""

    data_dir: Path = Path(DEFAULT_DATA_DIR)
    por_file: str = "optd_por_public.csv"
    airline_names_file: str = "optd_airlines.csv"
    countries_file: str = "countries.csv"
    airline_countries_file: str = "airlines.csv"
    por_url: str = OPTD_POR_URL
    airline_names_url: str = OPTD_AIRLINES_URL
    max_age_days: Optional[int] = DEFAULT_MAX_AGE_DAYS
    request_timeout: int = 60

    def __post_init__(self):
        self.data_dir = Path(self.data_dir)

    @classmethod
    def from_env(cls, **overrides) -> 'GeoBaseConfig':
        """
        Build a configuration from GEOBASE_* environment variables.

        Explicit keyword overrides win over the environment; None values
        are ignored.
        """
        values = {
            'data_dir': Path(os.getenv(DATA_DIR_ENV, DEFAULT_DATA_DIR)),
            'max_age_days': int(os.getenv(MAX_AGE_DAYS_ENV, DEFAULT_MAX_AGE_DAYS)),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)

    @property
    def por_path(self) -> Path:
        return self.data_dir / self.por_file

    @property
    def airline_names_path(self) -> Path:
        return self.data_dir / self.airline_names_file

    @property
    def countries_path(self) -> Path:
        return self.data_dir / self.countries_file

    @property
    def airline_countries_path(self) -> Path:
        return self.data_dir / self.airline_countries_file
