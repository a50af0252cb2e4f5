"""
Tests for local time / GMT conversions and trip durations.
"""

import pytest

from geobase.error import InvalidArgument, MissingAttribute, NegativeDuration, UnknownLocation
from geobase.lookup import LookupEngine
from geobase.models import DurationUnit
from geobase.timeconv import TimeConversion


@pytest.fixture
def time_conversion(reference_data) -> TimeConversion:
    return TimeConversion(LookupEngine(reference_data))


class TestLocalDateToGmt:
    """Test cases for local_date_to_gmt and gmt_date_to_local."""

    @pytest.mark.parametrize('local_date,location,gmt_date', [
        ('20160606_1627', 'NCE', '20160606_1427'),
        ('20160606_1527', 'LON', '20160606_1427'),
        ('20160606_1027', 'JFK', '20160606_1427'),
        ('20160606_2227', 'NYC', '20160607_0227'),
        ('20160212_1627', 'NCE', '20160212_1527'),
        ('20160606_1627', 'ZZC', '20160606_1627'),
    ])
    def test_to_gmt(self, time_conversion, local_date, location, gmt_date):
        assert time_conversion.local_date_to_gmt(local_date, location).get() == gmt_date

    @pytest.mark.parametrize('gmt_date,location,local_date', [
        ('20160606_1427', 'NCE', '20160606_1627'),
        ('20160607_0227', 'NYC', '20160606_2227'),
        ('20160212_1527', 'NCE', '20160212_1627'),
    ])
    def test_to_local(self, time_conversion, gmt_date, location, local_date):
        assert time_conversion.gmt_date_to_local(gmt_date, location).get() == local_date

    def test_custom_pattern(self, time_conversion):
        pattern = "yyyy-MM-dd'T'HH:mm"

        assert time_conversion.local_date_to_gmt('2016-06-06T22:27', 'NYC', pattern).get() == '2016-06-07T02:27'
        assert time_conversion.gmt_date_to_local('2016-06-07T02:27', 'NYC', pattern).get() == '2016-06-06T22:27'

    def test_unknown_location(self, time_conversion):
        result = time_conversion.local_date_to_gmt('20160606_1627', 'XXX')

        assert isinstance(result.error, UnknownLocation)

    def test_location_without_time_zone(self, time_conversion):
        result = time_conversion.local_date_to_gmt('20160606_1627', 'ZZA')

        assert isinstance(result.error, MissingAttribute)
        assert result.error.attribute == 'time zone'

    def test_time_zone_not_in_database(self, time_conversion, caplog):
        result = time_conversion.gmt_date_to_local('20160606_1627', 'ZZB')

        assert isinstance(result.error, MissingAttribute)
        assert str(result.error) == 'No time zone available for location "ZZB"'
        assert 'Nowhere/Unknown' in caplog.text

    @pytest.mark.parametrize('date', ['2016-06-06 16:27', '20160606', '20161306_1627', ''])
    def test_date_not_matching_pattern(self, time_conversion, date):
        result = time_conversion.local_date_to_gmt(date, 'NCE')

        assert isinstance(result.error, InvalidArgument)
        assert 'yyyyMMdd_HHmm' in str(result.error)

    def test_unsupported_pattern(self, time_conversion):
        result = time_conversion.local_date_to_gmt('20160606', 'NCE', 'yyyyQQ')

        assert isinstance(result.error, InvalidArgument)

    def test_zone_letter_is_not_supported(self, time_conversion):
        """The offset always comes from the location, never from the date text."""
        result = time_conversion.local_date_to_gmt('20160606_1627+0000', 'NCE', 'yyyyMMdd_HHmmZ')

        assert isinstance(result.error, InvalidArgument)

    def test_location_checked_before_date(self, time_conversion):
        assert isinstance(time_conversion.local_date_to_gmt('garbage', 'XXX').error, UnknownLocation)


class TestOffset:
    """Test cases for offset_for_local_date."""

    @pytest.mark.parametrize('local_date,location,offset', [
        ('20170712', 'NCE', 120),
        ('20171224', 'NCE', 60),
        ('20171224', 'NYC', -300),
        ('20170712', 'NYC', -240),
        ('20170712', 'AZA', -420),
        ('20170712', 'ZZC', 0),
    ])
    def test_offset(self, time_conversion, local_date, location, offset):
        assert time_conversion.offset_for_local_date(local_date, location).get() == offset

    def test_offset_with_time_pattern(self, time_conversion):
        result = time_conversion.offset_for_local_date('20170712_1200', 'LON', 'yyyyMMdd_HHmm')

        assert result.get() == 60

    def test_offset_failures(self, time_conversion):
        assert isinstance(time_conversion.offset_for_local_date('20170712', 'XXX').error, UnknownLocation)
        assert isinstance(time_conversion.offset_for_local_date('2017-07-12', 'NCE').error, InvalidArgument)


class TestTripDuration:
    """Test cases for trip_duration_from_local_dates."""

    def test_domestic_trip(self, time_conversion):
        result = time_conversion.trip_duration_from_local_dates(
            '20160606_1627', 'NCE', '20160606_1757', 'CDG')

        assert result.get() == 1.5

    def test_trip_across_time_zones(self, time_conversion):
        result = time_conversion.trip_duration_from_local_dates(
            '20160606_1627', 'CDG', '20160606_1757', 'JFK')

        assert result.get() == 7.5

    def test_trip_arriving_next_day(self, time_conversion):
        result = time_conversion.trip_duration_from_local_dates(
            '20160606_2327', 'CDG', '20160607_0057', 'JFK')

        assert result.get() == 7.5

    def test_minutes(self, time_conversion):
        result = time_conversion.trip_duration_from_local_dates(
            '20160606_1627', 'CDG', '20160606_1757', 'JFK', DurationUnit.MINUTES)

        assert result.get() == 450
        assert isinstance(result.get(), int)

    def test_unit_as_text(self, time_conversion):
        result = time_conversion.trip_duration_from_local_dates(
            '20160606_1627', 'NCE', '20160606_1757', 'CDG', 'minutes')

        assert result.get() == 90

    def test_invalid_unit(self, time_conversion):
        result = time_conversion.trip_duration_from_local_dates(
            '20160606_1627', 'NCE', '20160606_1757', 'CDG', 'days')

        assert isinstance(result.error, InvalidArgument)
        assert '"days"' in str(result.error)

    def test_zero_duration(self, time_conversion):
        result = time_conversion.trip_duration_from_local_dates(
            '20160606_1627', 'CDG', '20160606_1627', 'CDG')

        assert result.get() == 0

    def test_negative_duration(self, time_conversion):
        result = time_conversion.trip_duration_from_local_dates(
            '20160606_1757', 'JFK', '20160606_1627', 'CDG')

        assert isinstance(result.error, NegativeDuration)
        assert 'inverted' in str(result.error)

    def test_earlier_local_arrival_is_not_negative(self, time_conversion):
        """Arriving at an earlier local time than the departure is fine when flying west."""
        result = time_conversion.trip_duration_from_local_dates(
            '20160606_1757', 'CDG', '20160606_1627', 'JFK')

        assert result.get() == 4.5

    def test_custom_pattern(self, time_conversion):
        result = time_conversion.trip_duration_from_local_dates(
            '2016-06-06 16:27', 'CDG', '2016-06-06 17:57', 'JFK', pattern='yyyy-MM-dd HH:mm')

        assert result.get() == 7.5

    def test_origin_failure_first(self, time_conversion):
        result = time_conversion.trip_duration_from_local_dates(
            '20160606_1627', 'XXX', 'garbage', 'YYY')

        assert isinstance(result.error, UnknownLocation)
        assert result.error.code == 'XXX'

    def test_destination_failure(self, time_conversion):
        result = time_conversion.trip_duration_from_local_dates(
            '20160606_1627', 'CDG', '20160606_1757', 'ZZA')

        assert isinstance(result.error, MissingAttribute)
        assert result.error.code == 'ZZA'


class TestRoundTrip:
    """Converting a local date to GMT and back gives the same text."""

    @pytest.mark.parametrize('location', ['NCE', 'LON', 'NYC', 'AZA', 'BUE', 'ZZC'])
    @pytest.mark.parametrize('local_date,pattern', [
        ('20160606_1627', 'yyyyMMdd_HHmm'),
        ('20161224_0005', 'yyyyMMdd_HHmm'),
        ('2016-03-27T23:59', "yyyy-MM-dd'T'HH:mm"),
        ('01 Jan 17 12:30:45', 'dd MMM yy HH:mm:ss'),
    ])
    def test_local_to_gmt_and_back(self, time_conversion, location, local_date, pattern):
        gmt_date = time_conversion.local_date_to_gmt(local_date, location, pattern).get()

        assert time_conversion.gmt_date_to_local(gmt_date, location, pattern).get() == local_date

    @pytest.mark.parametrize('local_date,location,gmt_date', [
        # Hours repeated when daylight saving time ends: the first occurrence is used
        ('20161030_0230', 'NCE', '20161030_0030'),
        ('20161030_0130', 'LON', '20161030_0030'),
        ('20161106_0130', 'NYC', '20161106_0530'),
    ])
    def test_fall_back_hour(self, time_conversion, local_date, location, gmt_date):
        assert time_conversion.local_date_to_gmt(local_date, location).get() == gmt_date
        assert time_conversion.gmt_date_to_local(gmt_date, location).get() == local_date
