import pytest
from pathlib import Path

from geobase import GeoBase, GeoBaseConfig, OptdLoader
from geobase.reference import ReferenceData


@pytest.fixture(scope='session')
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture(scope='session')
def test_config(test_assets_dir) -> GeoBaseConfig:
    """Configuration reading the small reference tables of the assets directory."""
    return GeoBaseConfig(data_dir=test_assets_dir)


@pytest.fixture(scope='session')
def reference_data(test_config) -> ReferenceData:
    """Reference data loaded once from the test assets."""
    return ReferenceData.from_loader(OptdLoader(test_config))


@pytest.fixture
def geo_base(reference_data) -> GeoBase:
    """A GeoBase over the test reference data."""
    return GeoBase.from_reference_data(reference_data)


@pytest.fixture
def test_cache_dir(tmp_path) -> Path:
    """Return a temporary directory for cache testing."""
    return tmp_path / 'cache'
