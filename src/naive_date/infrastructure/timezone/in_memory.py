from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Dict, Mapping, Optional

from naive_date.domain.errors import InvalidInstantError, UnknownTimeZoneError
from naive_date.ports.timezone import TimeZoneProvider, WallClockFields


class FixedOffsetTimeZoneProvider(TimeZoneProvider):
    """In-memory provider where every registered zone has a constant UTC offset.

    Useful for tests and development where the IANA database should not be
    consulted. Offsets never change, so there are no seasonal transitions.
    """

    def __init__(self, offsets: Optional[Mapping[str, timedelta]] = None) -> None:
        self._zones: Dict[str, timezone] = {}
        for zone_id, offset in (offsets or {}).items():
            self.register(zone_id, offset)

    def register(self, zone_id: str, offset: timedelta) -> None:
        self._zones[zone_id] = timezone(offset, zone_id)

    def wall_clock_fields(self, moment: datetime, zone_id: str) -> WallClockFields:
        zone = self._zones.get(zone_id)
        if zone is None:
            raise UnknownTimeZoneError(zone_id)
        try:
            local = moment.astimezone(zone)
        except OverflowError as e:
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
