import copy
import random
from datetime import datetime, timezone

import pytest

from naive_date.domain.errors import InvalidArgumentsError, InvalidFormatError, InvalidInstantError
from naive_date.domain.naive import NaiveDate
from naive_date.domain.time import EPOCH, ONE_MILLISECOND

# 2022-03-01T10:20:30.400Z
SAMPLE_MILLIS = 1646130030400


def _utc_millis(*fields: int) -> int:
    year, month, day, hour, minute, second, millisecond = fields
    moment = datetime(year, month + 1, day, hour, minute, second, millisecond * 1000, tzinfo=timezone.utc)
    return (moment - EPOCH) // ONE_MILLISECOND


def _random_fields(rng: random.Random):
    return (
        rng.randint(1, 9999),
        rng.randint(0, 11),
        rng.randint(1, 28),
        rng.randint(0, 23),
        rng.randint(0, 59),
        rng.randint(0, 59),
        rng.randint(0, 999),
    )


def _fields_of(nd: NaiveDate):
    return (nd.year, nd.month, nd.day, nd.hour, nd.minute, nd.second, nd.millisecond)


def test_field_constructor_matches_utc_timestamp():
    nd = NaiveDate(2022, 2, 1, 10, 20, 30, 400)
    assert nd.epoch_millis == SAMPLE_MILLIS
    assert _fields_of(nd) == (2022, 2, 1, 10, 20, 30, 400)


def test_fields_round_trip_through_accessors():
    rng = random.Random(20220301)
    for _ in range(500):
        fields = _random_fields(rng)
        nd = NaiveDate(*fields)
        assert _fields_of(nd) == fields
        assert nd.epoch_millis == _utc_millis(*fields)


def test_trailing_fields_default_to_start_of_day():
    nd = NaiveDate(2021, 6)
    assert _fields_of(nd) == (2021, 6, 1, 0, 0, 0, 0)

    nd = NaiveDate(2021, 6, 15)
    assert _fields_of(nd) == (2021, 6, 15, 0, 0, 0, 0)

    nd = NaiveDate(2021, 6, 15, 8, 45)
    assert _fields_of(nd) == (2021, 6, 15, 8, 45, 0, 0)


def test_from_fields_matches_positional_constructor():
    assert NaiveDate.from_fields(2022, 2, 1, 10, 20, 30, 400) == NaiveDate(2022, 2, 1, 10, 20, 30, 400)
    assert NaiveDate.from_fields(2022, 2) == NaiveDate(2022, 2, 1)


def test_epoch_millis_constructor():
    nd = NaiveDate(SAMPLE_MILLIS)
    assert _fields_of(nd) == (2022, 2, 1, 10, 20, 30, 400)
    assert NaiveDate.from_epoch_millis(SAMPLE_MILLIS) == nd

    assert str(NaiveDate(0)) == "1970-01-01T00:00:00.000"
    assert str(NaiveDate(-1)) == "1969-12-31T23:59:59.999"


def test_duplicate_is_independent():
    original = NaiveDate(2022, 2, 1, 10, 20, 30, 400)
    for duplicate in (NaiveDate(original), original.copy(), copy.copy(original), copy.deepcopy(original)):
        assert duplicate == original
        assert duplicate is not original
        duplicate.set_year(1999)
        duplicate.set_millisecond(7)
        assert original.epoch_millis == SAMPLE_MILLIS


def test_field_overflow_normalizes():
    assert str(NaiveDate(2022, 0, 32)) == "2022-02-01T00:00:00.000"
    assert str(NaiveDate(2022, 12, 1)) == "2023-01-01T00:00:00.000"
    assert str(NaiveDate(2022, -1, 1)) == "2021-12-01T00:00:00.000"
    assert str(NaiveDate(2022, 2, 0)) == "2022-02-28T00:00:00.000"
    assert str(NaiveDate(2024, 1, 30)) == "2024-03-01T00:00:00.000"
    assert str(NaiveDate(2022, 0, 1, 24, 60, 60, 1000)) == "2022-01-02T01:01:01.000"
    assert str(NaiveDate(2022, 0, 1, 0, 0, 0, -1)) == "2021-12-31T23:59:59.999"


def test_weekday_starts_on_sunday():
    assert NaiveDate(0).weekday == 4  # Thursday
    assert NaiveDate(2022, 2, 1).weekday == 2  # Tuesday
    assert NaiveDate(2022, 2, 6).weekday == 0  # Sunday
    assert NaiveDate(2022, 2, 5).weekday == 6  # Saturday


@pytest.mark.parametrize(
    "args",
    [
        (),
        ("2022-03-01",),
        (1.5,),
        (True,),
        (None,),
        (2022, 1.5),
        (2022, "3"),
        (2022, 2, 1, 10, 20, 30, 400, 0),
    ],
)
def test_constructor_rejects_invalid_arguments(args):
    with pytest.raises(InvalidArgumentsError):
        NaiveDate(*args)


def test_invalid_arguments_is_a_type_error():
    with pytest.raises(TypeError):
        NaiveDate()


@pytest.mark.parametrize(
    "args",
    [
        (10**20,),
        (-(10**20),),
        (10000, 0),
        (0, 0),
        (9999, 11, 32),
        (1, 0, 0),
    ],
)
def test_constructor_rejects_unrepresentable_instants(args):
    with pytest.raises(InvalidInstantError):
        NaiveDate(*args)


def test_canonical_text_form():
    nd = NaiveDate(2022, 2, 1, 10, 20, 30, 400)
    assert str(nd) == "2022-03-01T10:20:30.400"
    assert nd.isoformat() == "2022-03-01T10:20:30.400"
    assert repr(nd) == "NaiveDate('2022-03-01T10:20:30.400')"
    assert str(NaiveDate(33, 0, 1)) == "0033-01-01T00:00:00.000"


def test_parse_canonical_text():
    nd = NaiveDate.parse("2022-03-01T10:20:30.400")
    assert nd == NaiveDate(2022, 2, 1, 10, 20, 30, 400)
    assert NaiveDate.parse(str(nd)) == nd


@pytest.mark.parametrize(
    "text",
    [
        "2022-03-01T10:20:30",
        "2022-03-01T10:20:30.400Z",
        "2022-03-01 10:20:30.400",
        "2022-03-01T10:20:30.400000",
        "2022-02-30T00:00:00.000",
        "2022-03-01T24:00:00.000",
        "",
    ],
)
def test_parse_rejects_other_formats(text):
    with pytest.raises(InvalidFormatError):
        NaiveDate.parse(text)


def test_to_datetime_has_no_tzinfo():
    moment = NaiveDate(2022, 2, 1, 10, 20, 30, 400).to_datetime()
    assert moment == datetime(2022, 3, 1, 10, 20, 30, 400000)
    assert moment.tzinfo is None


def test_from_datetime_reads_wall_clock_fields():
    nd = NaiveDate.from_datetime(datetime(2022, 3, 1, 10, 20, 30, 400999))
    assert _fields_of(nd) == (2022, 2, 1, 10, 20, 30, 400)

    aware = datetime(2022, 3, 1, 10, 20, tzinfo=timezone.utc)
    assert NaiveDate.from_datetime(aware) == NaiveDate(2022, 2, 1, 10, 20)


def test_equality_and_ordering_follow_epoch_millis():
    early = NaiveDate(2022, 2, 1)
    late = NaiveDate(2022, 2, 2)
    assert early == NaiveDate(early.epoch_millis)
    assert early != late
    assert early < late
    assert late >= early
    assert sorted([late, early]) == [early, late]
    assert int(late) == late.epoch_millis
    assert int(late) - int(early) == 86_400_000


def test_comparison_with_other_types():
    nd = NaiveDate(0)
    assert nd != 0
    with pytest.raises(TypeError):
        nd < 1  # noqa: B015
    with pytest.raises(TypeError):
        hash(nd)
