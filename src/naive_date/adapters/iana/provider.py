from __future__ import annotations

import logging
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from naive_date.domain.errors import InvalidInstantError, UnknownTimeZoneError
from naive_date.ports.timezone import TimeZoneProvider, WallClockFields

logger = logging.getLogger(__name__)


class ZoneInfoTimeZoneProvider(TimeZoneProvider):
    """IANA time zone database lookups through ``zoneinfo``.

    Zone data comes from the system database or, when that is missing, the
    ``tzdata`` package. ``ZoneInfo`` keeps its own cache of loaded zones.
    """

    def resolve(self, zone_id: str) -> ZoneInfo:
        try:
            return ZoneInfo(zone_id)
        except ZoneInfoNotFoundError as e:
            logger.error(f"Time zone {zone_id!r} not found in the IANA database: {e}")
            raise UnknownTimeZoneError(zone_id) from e
        except (ValueError, TypeError, IsADirectoryError) as e:
            # malformed keys: absolute paths, empty strings, zone directories like "America"
            logger.error(f"Invalid time zone key {zone_id!r}: {e}")
            raise UnknownTimeZoneError(zone_id) from e

    def wall_clock_fields(self, moment: datetime, zone_id: str) -> WallClockFields:
        zone = self.resolve(zone_id)
        try:
            local = moment.astimezone(zone)
        except OverflowError as e:
            logger.error(f"Wall clock in {zone_id!r} at {moment.isoformat()} is outside the supported range: {e}")
            raise InvalidInstantError(f"{moment.isoformat()} in {zone_id!r} falls outside years 1-9999") from e
        return WallClockFields(
            year=local.year,
            month=local.month,
            day=local.day,
            hour=local.hour,
            minute=local.minute,
            second=local.second,
            millisecond=local.microsecond // 1000,
        )
