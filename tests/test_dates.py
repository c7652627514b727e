from datetime import date, datetime

import pytest

from hoteldesk.dates import (
    date_range,
    format_date,
    format_timestamp,
    now,
    parse_date,
    parse_timestamp,
    today,
)


def test_data_na_str():
    assert format_date(date(2025, 5, 12)) == "12.05.2025"


def test_operatory_porownania():
    d1 = date(2025, 5, 12)
    d2 = date(2025, 6, 15)
    days = list(date_range(d1, d2))
    assert d1 < d2
    assert days[3] != d2
    assert days[34] == d2
    assert len(days) == 35
    assert format_date(days[5]) == "17.05.2025"


def test_operatory_przypisania():
    d1 = date(2025, 5, 12)
    d2 = date(2025, 6, 15)
    assert format_date(list(date_range(d1, parse_date("13.05.2025")))[-1]) == "13.05.2025"
    assert format_date(list(date_range(parse_date("14.06.2025"), d2))[0]) == "14.06.2025"


def test_poprawnosc_dat_valid():
    assert format_date(parse_date("31.05.2028")) == "31.05.2028"


@pytest.mark.parametrize("text", ["32.05.8", "10.-1.2025", "2.3.-4", "12.05", "aa.bb.cccc"])
def test_poprawnosc_dat_invalid(text):
    with pytest.raises(ValueError):
        parse_date(text)


def test_parse_date_drops_time_part():
    assert parse_date("12.05.2025 10:30:00") == date(2025, 5, 12)


def test_timestamp_round_trip():
    moment = datetime(2025, 5, 12, 9, 5, 7)
    text = format_timestamp(moment)
    assert text.startswith("12.05.2025")
    assert parse_timestamp(text) == moment


def test_timestamp_of_bare_date_is_midnight():
    assert parse_timestamp("12.05.2025") == datetime(2025, 5, 12)


def test_invalid_timestamp():
    with pytest.raises(ValueError):
        parse_timestamp("12.05.2025 25:00:00")


def test_date_range_empty_when_reversed():
    assert list(date_range(date(2025, 5, 12), date(2025, 5, 11))) == []


def test_today_and_now_agree():
    moment = now()
    assert moment.microsecond == 0
    assert abs((today() - moment.date()).days) <= 1