"""
Local time / GMT conversions using the time zone of an airport or city.

Time zone arithmetic is delegated to dateutil.tz, so offsets follow the
daylight saving rules in force at the converted date.
"""

import logging
from datetime import datetime, tzinfo
from typing import Union

from dateutil import tz

from .error import InvalidArgument, MissingAttribute, NegativeDuration
from .lookup import LookupEngine
from .models import DurationUnit, Result
from .utils.date_pattern import DEFAULT_DATE_PATTERN, DEFAULT_DATETIME_PATTERN, to_strftime

logger = logging.getLogger(__name__)

GMT = tz.UTC


def parse_unit(unit: Union[DurationUnit, str]) -> Result[DurationUnit]:
    """Accept a DurationUnit or its value, "hours" or "minutes"."""
    try:
        return Result.success(DurationUnit(unit))
    except ValueError:
        return Result.failure(InvalidArgument(
            f"option \"unit\" can only take value \"hours\" or \"minutes\" but not \"{unit}\""
        ))


class TimeConversion:
    """Converts dates between local time at a location and GMT."""

    def __init__(self, lookup: LookupEngine):
        self._lookup = lookup

    def _zone(self, location: str) -> Result[tzinfo]:
        zone_name = self._lookup.time_zone(location)
        if zone_name.is_failure:
            return zone_name
        zone = tz.gettz(zone_name.value)
        if zone is None:
            logger.warning(f"Time zone {zone_name.value!r} of {location} is not in the tz database")
            return Result.failure(MissingAttribute(location, 'time zone'))
        return Result.success(zone)

    @staticmethod
    def _parse(date: str, pattern: str, zone: tzinfo) -> Result[datetime]:
        try:
            directive = to_strftime(pattern)
            parsed = datetime.strptime(date, directive)
        except ValueError as e:
            return Result.failure(InvalidArgument(
                f"date \"{date}\" does not match format \"{pattern}\": {e}"
            ))
        return Result.success(parsed.replace(tzinfo=zone))

    @staticmethod
    def _format(moment: datetime, pattern: str) -> str:
        return moment.strftime(to_strftime(pattern))

    def local_date_to_gmt(self, local_date: str, location: str,
                          pattern: str = DEFAULT_DATETIME_PATTERN) -> Result[str]:
        """
        Convert a local date at a location to the GMT date of the same instant.

        Examples:
            local_date_to_gmt("20160606_1627", "NCE") -> Success("20160606_1427")
            local_date_to_gmt("2016-06-06T22:27", "NYC", "yyyy-MM-dd'T'HH:mm") -> Success("2016-06-07T02:27")
        """
        return self._zone(location).flat_map(
            lambda zone: self._parse(local_date, pattern, zone)
        ).map(
            lambda moment: self._format(moment.astimezone(GMT), pattern)
        )

    def gmt_date_to_local(self, gmt_date: str, location: str,
                          pattern: str = DEFAULT_DATETIME_PATTERN) -> Result[str]:
        """Convert a GMT date to the local date at a location."""
        return self._zone(location).flat_map(
            lambda zone: self._parse(gmt_date, pattern, GMT).map(
                lambda moment: self._format(moment.astimezone(zone), pattern)
            )
        )

    def offset_for_local_date(self, local_date: str, location: str,
                              pattern: str = DEFAULT_DATE_PATTERN) -> Result[int]:
        """
        UTC offset in minutes of a location at a given local date.

        West of Greenwich is negative: NYC in December gives -300, NCE in
        July gives 120.
        """
        return self._zone(location).flat_map(
            lambda zone: self._parse(local_date, pattern, zone)
        ).map(
            lambda moment: int(moment.utcoffset().total_seconds() // 60)
        )

    def trip_duration_from_local_dates(self,
                                       local_departure_date: str, origin: str,
                                       local_arrival_date: str, destination: str,
                                       unit: Union[DurationUnit, str] = DurationUnit.HOURS,
                                       pattern: str = DEFAULT_DATETIME_PATTERN) -> Result[Union[float, int]]:
        """
        Trip duration between a local departure and a local arrival date.

        Both dates are first normalized to GMT so that the duration is right
        across time zones. The origin is resolved before the destination and
        the first failure is returned.

        Args:
            local_departure_date: Departure date, local time at origin
            origin: Origin airport or city
            local_arrival_date: Arrival date, local time at destination
            destination: Destination airport or city
            unit: DurationUnit.HOURS (float, default) or DurationUnit.MINUTES (int)
            pattern: Date pattern of both dates

        Returns:
            Result with the duration; NegativeDuration when the arrival is
            before the departure.
        """
        duration_unit = parse_unit(unit)
        if duration_unit.is_failure:
            return duration_unit

        departure = self._gmt_moment(local_departure_date, origin, pattern)
        if departure.is_failure:
            return departure
        arrival = self._gmt_moment(local_arrival_date, destination, pattern)
        if arrival.is_failure:
            return arrival

        minutes = int((arrival.value - departure.value).total_seconds() // 60)
        if minutes < 0:
            return Result.failure(NegativeDuration())
        if duration_unit.value is DurationUnit.MINUTES:
            return Result.success(minutes)
        return Result.success(minutes / 60)

    def _gmt_moment(self, local_date: str, location: str, pattern: str) -> Result[datetime]:
        """
        Instant of a local date, truncated to what the pattern can express.

        The date goes through its GMT text form, as returned by
        local_date_to_gmt, and is parsed back as a GMT datetime.
        """
        return self.local_date_to_gmt(local_date, location, pattern).flat_map(
            lambda gmt_date: self._parse(gmt_date, pattern, GMT)
        )

