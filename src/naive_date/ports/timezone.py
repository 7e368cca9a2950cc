from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class WallClockFields(BaseModel):
    """Calendar fields an observer in a zone reads at some instant. Month is 1-based.

    Time-of-day fields a provider cannot supply read as 0. Year, month and day
    are required.
    """

    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(..., ge=1, le=12)
    day: int = Field(..., ge=1, le=31)
    hour: int = Field(0, ge=0, le=23)
    minute: int = Field(0, ge=0, le=59)
    second: int = Field(0, ge=0, le=59)
    millisecond: int = Field(0, ge=0, le=999)


class TimeZoneProvider:
    """Resolves what a wall clock in a given IANA zone displays at an instant."""

    def wall_clock_fields(self, moment: datetime, zone_id: str) -> WallClockFields:
        """Return the fields displayed in ``zone_id`` at the aware datetime ``moment``.

        Raises UnknownTimeZoneError when ``zone_id`` cannot be resolved and
        InvalidInstantError when the displayed wall clock falls outside years 1-9999.
        """
        raise NotImplementedError
