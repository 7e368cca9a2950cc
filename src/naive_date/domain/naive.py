from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from functools import total_ordering
from numbers import Integral
from typing import Any, Optional

from naive_date.domain.errors import InvalidArgumentsError, InvalidFormatError, InvalidInstantError
from naive_date.domain.time import EPOCH, ONE_MILLISECOND

_FIELD_NAMES = ("year", "month", "day", "hour", "minute", "second", "millisecond")
_FIELD_DEFAULTS = (1, 0, 0, 0, 0)
_CANONICAL = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}")


def _as_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgumentsError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


def _moment_of(millis: int) -> datetime:
    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError as exc:
        raise InvalidInstantError(f"{millis} ms since epoch is not a representable instant") from exc


def _compose(year: int, month: int, day: int, hour: int, minute: int, second: int, millisecond: int) -> int:
    """Return the UTC epoch offset of the given fields, rolling overflow into higher fields."""
    year += month // 12
    month %= 12
    try:
        moment = datetime(year, month + 1, 1, tzinfo=timezone.utc) + timedelta(
            days=day - 1,
            hours=hour,
            minutes=minute,
            seconds=second,
            milliseconds=millisecond,
        )
    except (ValueError, OverflowError) as exc:
        fields = (year, month, day, hour, minute, second, millisecond)
        raise InvalidInstantError(f"Fields {fields} do not denote a representable instant") from exc
    return (moment - EPOCH) // ONE_MILLISECOND


@total_ordering
class NaiveDate:
    """A calendar date and wall-clock time with no timezone attached.

    The value is held as milliseconds since the epoch and every field is read
    and written as if that instant were expressed in UTC, so month lengths,
    leap years and overflow come from ``datetime`` arithmetic. Months are
    0-based throughout.

    ``NaiveDate(millis)`` wraps an epoch offset, ``NaiveDate(other)`` copies
    another value and ``NaiveDate(year, month, day=1, hour=0, minute=0,
    second=0, millisecond=0)`` builds one from fields.
    """

    __slots__ = ("_epoch_millis",)

    def __init__(self, *args: Any) -> None:
        if not args:
            raise InvalidArgumentsError("NaiveDate expects at least one argument")
        if len(args) > len(_FIELD_NAMES):
            raise InvalidArgumentsError(f"NaiveDate expects at most {len(_FIELD_NAMES)} arguments, got {len(args)}")

        if len(args) == 1:
            value = args[0]
            if isinstance(value, NaiveDate):
                millis = value._epoch_millis
            elif isinstance(value, Integral) and not isinstance(value, bool):
                millis = int(value)
                _moment_of(millis)
            else:
                raise InvalidArgumentsError(
                    f"Single argument must be epoch milliseconds or a NaiveDate, got {type(value).__name__}"
                )
        else:
            fields = [_as_int(name, value) for name, value in zip(_FIELD_NAMES, args)]
            fields.extend(_FIELD_DEFAULTS[len(fields) - 2 :])
            millis = _compose(*fields)

        self._epoch_millis = millis

    @classmethod
    def from_epoch_millis(cls, millis: int) -> "NaiveDate":
        return cls(_as_int("millis", millis))

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> "NaiveDate":
        return cls(year, month, day, hour, minute, second, millisecond)

    @classmethod
    def from_datetime(cls, moment: datetime) -> "NaiveDate":
        """Build a value from the wall-clock fields of ``moment``; tzinfo is ignored."""
        return cls(
            moment.year,
            moment.month - 1,
            moment.day,
            moment.hour,
            moment.minute,
            moment.second,
            moment.microsecond // 1000,
        )

    @classmethod
    def parse(cls, text: str) -> "NaiveDate":
        """Parse the canonical ``YYYY-MM-DDTHH:mm:ss.sss`` form produced by ``str()``."""
        if not isinstance(text, str) or not _CANONICAL.fullmatch(text):
            raise InvalidFormatError(f"Expected YYYY-MM-DDTHH:mm:ss.sss, got {text!r}")
        try:
            moment = datetime.strptime(text, "%Y-%m-%dT%H:%M:%S.%f")
        except ValueError as exc:
            raise InvalidFormatError(f"Not a valid calendar date-time: {text!r}") from exc
        return cls.from_datetime(moment)

    def copy(self) -> "NaiveDate":
        return NaiveDate(self)

    def __copy__(self) -> "NaiveDate":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "NaiveDate":
        return self.copy()

    def _moment(self) -> datetime:
        return EPOCH + timedelta(milliseconds=self._epoch_millis)

    def _recompose(self, *fields: Any) -> int:
        values = [_as_int(name, value) for name, value in zip(_FIELD_NAMES, fields)]
        self._epoch_millis = _compose(*values)
        return self._epoch_millis

    @property
    def epoch_millis(self) -> int:
        return self._epoch_millis

    @property
    def year(self) -> int:
        return self._moment().year

    @property
    def month(self) -> int:
        return self._moment().month - 1

    @property
    def day(self) -> int:
        return self._moment().day

    @property
    def hour(self) -> int:
        return self._moment().hour

    @property
    def minute(self) -> int:
        return self._moment().minute

    @property
    def second(self) -> int:
        return self._moment().second

    @property
    def millisecond(self) -> int:
        return self._moment().microsecond // 1000

    @property
    def weekday(self) -> int:
        """Day of the week, 0 for Sunday through 6 for Saturday."""
        return self._moment().isoweekday() % 7

    # Omitted trailing arguments keep their current value instead of resetting to zero.

    def set_year(self, year: int, month: Optional[int] = None, day: Optional[int] = None) -> int:
        month = self.month if month is None else month
        day = self.day if day is None else day
        return self._recompose(year, month, day, self.hour, self.minute, self.second, self.millisecond)

    def set_month(self, month: int, day: Optional[int] = None) -> int:
        day = self.day if day is None else day
        return self._recompose(self.year, month, day, self.hour, self.minute, self.second, self.millisecond)

    def set_day(self, day: int) -> int:
        return self._recompose(self.year, self.month, day, self.hour, self.minute, self.second, self.millisecond)

    def set_hour(
        self,
        hour: int,
        minute: Optional[int] = None,
        second: Optional[int] = None,
        millisecond: Optional[int] = None,
    ) -> int:
        minute = self.minute if minute is None else minute
        second = self.second if second is None else second
        millisecond = self.millisecond if millisecond is None else millisecond
        return self._recompose(self.year, self.month, self.day, hour, minute, second, millisecond)

    def set_minute(self, minute: int, second: Optional[int] = None, millisecond: Optional[int] = None) -> int:
        second = self.second if second is None else second
        millisecond = self.millisecond if millisecond is None else millisecond
        return self._recompose(self.year, self.month, self.day, self.hour, minute, second, millisecond)

    def set_second(self, second: int, millisecond: Optional[int] = None) -> int:
        millisecond = self.millisecond if millisecond is None else millisecond
        return self._recompose(self.year, self.month, self.day, self.hour, self.minute, second, millisecond)

    def set_millisecond(self, millisecond: int) -> int:
        return self._recompose(self.year, self.month, self.day, self.hour, self.minute, self.second, millisecond)

    def to_datetime(self) -> datetime:
        """Return the equivalent naive ``datetime`` (no tzinfo)."""
        return self._moment().replace(tzinfo=None)

    def isoformat(self) -> str:
        # ISO-8601 without the trailing zone designator
        return self.to_datetime().isoformat(timespec="milliseconds")

    def __str__(self) -> str:
        return self.isoformat()

    def __repr__(self) -> str:
        return f"NaiveDate({self.isoformat()!r})"

    def __int__(self) -> int:
        return self._epoch_millis

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NaiveDate):
            return NotImplemented
        return self._epoch_millis == other._epoch_millis

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NaiveDate):
            return NotImplemented
        return self._epoch_millis < other._epoch_millis

    __hash__ = None  # mutable
