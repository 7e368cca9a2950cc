from __future__ import annotations


class NaiveDateError(Exception):
    """Base class for every error raised by naive_date."""


class InvalidArgumentsError(NaiveDateError, TypeError):
    pass


class InvalidInstantError(NaiveDateError, ValueError):
    pass


class InvalidFormatError(NaiveDateError, ValueError):
    pass


class UnknownTimeZoneError(NaiveDateError, LookupError):
    """Raised when a timezone provider cannot resolve a zone identifier."""

    def __init__(self, zone_id: str) -> None:
        super().__init__(f"Unknown time zone: {zone_id!r}")
        self.zone_id = zone_id
