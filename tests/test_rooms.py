from datetime import date

import pytest

from hoteldesk.rooms import Room


def test_csv_line_format():
    assert Room(101, 2, 150, "basic").to_csv_line() == "101,2,150.000000,basic,wolny"


def test_description_format():
    assert Room(101, 2, 150, "basic").description() == (
        "Numer pokoju: 101, max liczba osob: 2, cena/noc: 150.000000, standard: basic"
    )


def test_round_trip_keeps_status():
    room = Room(120, 4, 320.5, "deluxe", "do sprzatania")
    loaded = Room.from_csv_line(room.to_csv_line())
    assert loaded == room
    assert loaded.status == "do sprzatania"


def test_missing_status_defaults_to_free():
    assert Room.from_csv_line("105,3,200,komfort").status == "wolny"


def test_too_few_fields():
    with pytest.raises(ValueError):
        Room.from_csv_line("105,3,200")


def test_bad_number():
    with pytest.raises(ValueError):
        Room.from_csv_line("x,3,200,basic,wolny")


def test_mark_unavailable_is_inclusive():
    room = Room(101, 2, 150, "basic")
    room.mark_unavailable(date(2025, 5, 12), date(2025, 5, 14))
    assert room.is_available(date(2025, 5, 11))
    assert not room.is_available(date(2025, 5, 12))
    assert not room.is_available(date(2025, 5, 13))
    assert not room.is_available(date(2025, 5, 14))
    assert room.is_available(date(2025, 5, 15))


def test_new_room_is_available():
    assert Room(101, 2, 150, "basic").is_available(date(2025, 5, 12))