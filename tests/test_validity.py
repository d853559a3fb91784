import datetime

import pytest

from certgen.core.validity import (
    format_generalized_time,
    normalize_generalized_time,
    to_generalized_time,
    to_utc,
)

UTC = datetime.timezone.utc


def test_format_drops_fraction():
    dt = datetime.datetime(2020, 1, 2, 3, 4, 5, 999999, tzinfo=UTC)
    assert format_generalized_time(dt) == "20200102030405Z"


@pytest.mark.parametrize("micros,expected", [
    (0, 0),
    (999, 0),
    (1000, 1000),
    (500000, 1000),
    (999999, 1000),
])
def test_normalize_subsecond(micros, expected):
    dt = datetime.datetime(2020, 1, 1, tzinfo=UTC).replace(microsecond=micros)
    assert normalize_generalized_time(dt).microsecond == expected


def test_naive_time_is_utc():
    naive = datetime.datetime(2021, 6, 1, 12, 0, 0)
    assert to_utc(naive) == datetime.datetime(2021, 6, 1, 12, 0, 0, tzinfo=UTC)


def test_aware_time_is_converted():
    tz = datetime.timezone(datetime.timedelta(hours=2))
    dt = datetime.datetime(2021, 6, 1, 1, 30, 0, tzinfo=tz)
    assert format_generalized_time(dt) == "20210531233000Z"


def test_far_future_year():
    dt = datetime.datetime(4096, 1, 1, tzinfo=UTC)
    assert str(to_generalized_time(dt)) == "40960101000000Z"
