from datetime import date

import pytest

from domain.errors import ValidationError
from domain.intervals import (
    clipped_duration_days,
    duration_days,
    month_range,
    overlaps,
    parse_date_range,
)
from domain.models import DateRange


def r(start: str, end: str) -> DateRange:
    return DateRange(date.fromisoformat(start), date.fromisoformat(end))


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (r("2024-06-01", "2024-06-10"), r("2024-06-05", "2024-06-20"), True),
        (r("2024-06-01", "2024-06-10"), r("2024-06-10", "2024-06-20"), True),
        (r("2024-06-01", "2024-06-10"), r("2024-06-11", "2024-06-20"), False),
        (r("2024-06-05", "2024-06-05"), r("2024-06-01", "2024-06-30"), True),
        (r("2024-05-01", "2024-05-31"), r("2024-06-01", "2024-06-30"), False),
    ],
)
def test_overlaps_is_symmetric(a, b, expected):
    assert overlaps(a, b) is expected
    assert overlaps(b, a) is expected


def test_duration_is_inclusive():
    assert duration_days(r("2024-06-10", "2024-06-14")) == 5
    assert duration_days(r("2024-06-10", "2024-06-10")) == 1


def test_clipped_duration_partial_overlap():
    june = month_range(2024, 6)
    assert clipped_duration_days(r("2024-05-28", "2024-06-03"), june) == 3
    assert clipped_duration_days(r("2024-06-28", "2024-07-05"), june) == 3


def test_clipped_duration_disjoint_is_zero():
    assert clipped_duration_days(r("2024-05-01", "2024-05-10"), month_range(2024, 6)) == 0


def test_clipped_duration_fully_contained_equals_duration():
    interval = r("2024-06-10", "2024-06-14")
    assert clipped_duration_days(interval, month_range(2024, 6)) == duration_days(interval)


def test_month_range_handles_leap_february():
    assert month_range(2024, 2) == r("2024-02-01", "2024-02-29")
    assert month_range(2023, 2).end == date(2023, 2, 28)


def test_month_range_rejects_bad_month():
    with pytest.raises(ValidationError):
        month_range(2024, 13)


@pytest.mark.parametrize("year", [0, 10000])
def test_month_range_rejects_out_of_range_year(year):
    with pytest.raises(ValidationError) as excinfo:
        month_range(year, 1)
    assert excinfo.value.field == "year"


def test_parse_date_range_rejects_inverted_range():
    with pytest.raises(ValidationError) as excinfo:
        parse_date_range("2024-06-30", "2024-06-01")
    assert excinfo.value.field == "end"


def test_parse_date_range_rejects_garbage():
    with pytest.raises(ValidationError):
        parse_date_range("yesterday", "2024-06-01")
    with pytest.raises(ValidationError):
        parse_date_range(None, "2024-06-01")


def test_parse_date_range_accepts_single_day():
    assert parse_date_range("2024-06-01", "2024-06-01") == r("2024-06-01", "2024-06-01")
