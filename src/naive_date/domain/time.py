from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, Field, model_validator

from naive_date.domain.errors import InvalidInstantError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MILLISECOND = timedelta(milliseconds=1)


class Instant(BaseModel):
    """Represents a timezone-aware point in time (UTC-normalized)."""

    value: datetime = Field(alias="at")
    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def _normalize_timezone(self) -> "Instant":
        moment = self.value
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        else:
            moment = moment.astimezone(timezone.utc)
        object.__setattr__(self, "value", moment)
        return self

    @classmethod
    def from_epoch_millis(cls, millis: int) -> "Instant":
        try:
            moment = EPOCH + timedelta(milliseconds=millis)
        except OverflowError as exc:
            raise InvalidInstantError(f"{millis} ms since epoch is not a representable instant") from exc
        return cls(at=moment)

    def epoch_millis(self) -> int:
        return (self.value - EPOCH) // ONE_MILLISECOND

    def to_datetime(self) -> datetime:
        return self.value
