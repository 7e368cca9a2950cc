from __future__ import annotations

import logging
from datetime import datetime
from numbers import Integral
from typing import Optional, Union

from naive_date.adapters.iana.provider import ZoneInfoTimeZoneProvider
from naive_date.domain.errors import InvalidArgumentsError
from naive_date.domain.naive import NaiveDate
from naive_date.domain.time import Instant
from naive_date.ports.timezone import TimeZoneProvider

InstantLike = Union[Instant, datetime, int]


def _as_instant(value: InstantLike) -> Instant:
    if isinstance(value, Instant):
        return value
    if isinstance(value, datetime):
        return Instant(at=value)
    if isinstance(value, Integral) and not isinstance(value, bool):
        return Instant.from_epoch_millis(int(value))
    raise InvalidArgumentsError(f"Expected an Instant, datetime or epoch milliseconds, got {type(value).__name__}")


class ZoneConversionService:
    """Converts between naive wall-clock values and absolute instants in a zone."""

    def __init__(self, provider: TimeZoneProvider) -> None:
        self.provider = provider
        self.logger = logging.getLogger(__name__)

    def from_zoned(self, instant: InstantLike, zone_id: str) -> NaiveDate:
        """Return the wall-clock value an observer in ``zone_id`` reads at ``instant``."""
        moment = _as_instant(instant).to_datetime()
        fields = self.provider.wall_clock_fields(moment, zone_id)
        naive = NaiveDate.from_fields(
            fields.year,
            fields.month - 1,
            fields.day,
            fields.hour,
            fields.minute,
            fields.second,
            fields.millisecond,
        )
        self.logger.debug(f"Instant {moment.isoformat()} reads {naive} in {zone_id}")
        return naive

    def to_zoned(self, naive: NaiveDate, zone_id: str) -> Instant:
        """Return the instant at which a wall clock in ``zone_id`` shows ``naive``.

        The fields are first read as if they were UTC; the zone's offset at that
        guess is then applied. During a backward transition the wall-clock hour
        repeats and only one of the two matching instants is returned.
        """
        if not isinstance(naive, NaiveDate):
            raise InvalidArgumentsError(f"Expected a NaiveDate, got {type(naive).__name__}")
        utc_literal = naive.epoch_millis
        displayed = self.from_zoned(utc_literal, zone_id)
        offset = utc_literal - displayed.epoch_millis
        instant = Instant.from_epoch_millis(utc_literal + offset)
        self.logger.debug(f"{naive} in {zone_id} is {instant.to_datetime().isoformat()} (offset {-offset} ms)")
        return instant


_default_service: Optional[ZoneConversionService] = None


def get_default_service() -> ZoneConversionService:
    global _default_service
    if _default_service is None:
        _default_service = ZoneConversionService(ZoneInfoTimeZoneProvider())
    return _default_service


def set_default_provider(provider: Optional[TimeZoneProvider]) -> None:
    """Replace the provider behind the module-level helpers; ``None`` restores the IANA default."""
    global _default_service
    _default_service = ZoneConversionService(provider) if provider is not None else None


def from_zoned(instant: InstantLike, zone_id: str) -> NaiveDate:
    return get_default_service().from_zoned(instant, zone_id)


def to_zoned(naive: NaiveDate, zone_id: str) -> Instant:
    return get_default_service().to_zoned(naive, zone_id)
