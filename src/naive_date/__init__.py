from .adapters.iana.provider import ZoneInfoTimeZoneProvider
from .application.services import (
    ZoneConversionService,
    from_zoned,
    get_default_service,
    set_default_provider,
    to_zoned,
)
from .domain.errors import (
    InvalidArgumentsError,
    InvalidFormatError,
    InvalidInstantError,
    NaiveDateError,
    UnknownTimeZoneError,
)
from .domain.naive import NaiveDate
from .domain.time import Instant
from .infrastructure.timezone.in_memory import FixedOffsetTimeZoneProvider
from .ports.timezone import TimeZoneProvider, WallClockFields

__all__ = [
    "NaiveDate",
    "Instant",
    "ZoneConversionService",
    "from_zoned",
    "to_zoned",
    "get_default_service",
    "set_default_provider",
    "TimeZoneProvider",
    "WallClockFields",
    "ZoneInfoTimeZoneProvider",
    "FixedOffsetTimeZoneProvider",
    "NaiveDateError",
    "InvalidArgumentsError",
    "InvalidInstantError",
    "InvalidFormatError",
    "UnknownTimeZoneError",
]
