"""
Tests for reading the OPTD reference files.
"""

import pytest

from geobase.error import ReferenceDataError
from geobase.models import LocationKind
from geobase.sources.optd import OptdLoader, read_caret_table


@pytest.fixture
def loader(test_config) -> OptdLoader:
    return OptdLoader(test_config)


class TestReadCaretTable:
    """Test cases for read_caret_table."""

    def test_values_are_text(self, test_assets_dir):
        df = read_caret_table(test_assets_dir / 'countries.csv',
                              names=['country', 'currency', 'continent', 'iata_zone'],
                              comment_header=True)

        us = df[df['country'] == 'US'].iloc[0]
        # Neither NA (North America) nor 11 is converted
        assert us['continent'] == 'NA'
        assert us['iata_zone'] == '11'
        assert df[df['country'] == 'YY'].iloc[0]['currency'] == ''

    def test_header_row(self, test_assets_dir):
        df = read_caret_table(test_assets_dir / 'optd_airlines.csv')

        assert '2char_code' in df.columns
        assert len(df) == 5

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_caret_table(tmp_path / 'missing.csv')


class TestOptdLoader:
    """Test cases for the OptdLoader class."""

    def test_load_locations(self, loader):
        locations = loader.load_locations()

        cdg = locations['CDG']
        assert cdg.city_code == 'PAR'
        assert cdg.country_code == 'FR'
        assert cdg.raw_time_zone == 'Europe/Paris'
        assert cdg.raw_latitude == '49.012779'
        assert cdg.kind is LocationKind.AIRPORT
        assert locations['PAR'].kind is LocationKind.CITY
        assert len(locations) == 22

    def test_outdated_rows_are_ignored(self, loader):
        assert 'QQQ' not in loader.load_locations()

    def test_airport_wins_over_city(self, loader):
        nce = loader.load_locations()['NCE']

        assert nce.is_airport
        assert nce.raw_latitude == '43.6484'

    def test_multi_city_list_is_kept(self, loader):
        assert loader.load_locations()['AZA'].city_code == 'PHX,MSC'

    def test_empty_fields(self, loader):
        zza = loader.load_locations()['ZZA']

        assert zza.city_code == ''
        assert zza.country_code == ''
        assert zza.raw_latitude == ''

    def test_pipe_separated_city_list(self, tmp_path, test_config):
        header = 'iata_code^latitude^longitude^date_until^country_code^timezone^city_code_list^location_type\n'
        (tmp_path / 'optd_por_public.csv').write_text(
            header + 'EWR^40.69^-74.17^^US^America/New_York^NYC|EWR^A\n^1^1^^US^UTC^^A\n'
        )
        loader = OptdLoader(type(test_config)(data_dir=tmp_path))

        locations = loader.load_locations()

        assert list(locations) == ['EWR']
        assert locations['EWR'].city_code == 'NYC'

    def test_missing_columns(self, tmp_path, test_config):
        (tmp_path / 'optd_por_public.csv').write_text('iata_code^name\nCDG^Charles de Gaulle\n')
        loader = OptdLoader(type(test_config)(data_dir=tmp_path))

        with pytest.raises(ReferenceDataError, match='missing columns'):
            loader.load_locations()

    def test_load_countries(self, loader):
        countries = loader.load_countries()

        assert len(countries) == 12
        assert countries['GB'].currency_code == 'GBP'
        assert countries['US'].continent_code == 'NA'
        assert countries['MX'].iata_zone_code == '12'
        assert countries['YY'].currency_code == ''

    def test_load_airlines(self, loader):
        airlines = loader.load_airlines()

        assert sorted(airlines) == ['AA', 'AF', 'BA', 'LH', 'QZ', 'XQ']
        assert airlines['AF'].name == 'Air France'
        assert airlines['AF'].country_code == 'FR'
        assert airlines['AA'].name == ''
        assert airlines['XQ'].country_code == ''
