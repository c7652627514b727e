from datetime import date, timedelta

import pytest

from hoteldesk.catalog import Catalog, intersect
from hoteldesk.reservations import ReservationStatus, load_reservations
from hoteldesk.rooms import Room
from hoteldesk.services import ExtraService
from hoteldesk.storage import ROOMS_FILE, SERVICES_FILE, DataStore

ARRIVAL = date(2025, 5, 12)
DEPARTURE = date(2025, 5, 14)


def _rooms():
    return [
        Room(103, 4, 500.0, "deluxe"),
        Room(101, 2, 150.0, "basic"),
        Room(102, 3, 300.0, "family"),
    ]


@pytest.fixture
def store(tmp_path):
    data = DataStore(tmp_path)
    data.write_lines(ROOMS_FILE, [room.to_csv_line() for room in _rooms()])
    data.write_lines(
        SERVICES_FILE,
        [ExtraService("Sauna", 40.0).to_csv_line(), ExtraService("Parking", 20.0).to_csv_line()],
    )
    return data


@pytest.fixture
def catalog(store):
    return Catalog(store)


def test_intersect_keeps_order_of_first():
    assert intersect([3, 1, 2], [2, 3]) == [3, 2]
    assert intersect([1, 2], []) == []


def test_loads_rooms_and_services(catalog):
    assert catalog.rooms == _rooms()
    assert [s.name for s in catalog.services] == ["Sauna", "Parking"]


def test_save_rooms_sorts_by_number(catalog, store):
    catalog.save_rooms()
    numbers = [Room.from_csv_line(line).number for line in store.read_lines(ROOMS_FILE)]
    assert numbers == sorted(numbers)


def test_filters(catalog):
    assert [catalog.rooms[i].number for i in catalog.filter_by_price(100, 300)] == [101, 102]
    assert [catalog.rooms[i].number for i in catalog.filter_by_capacity(3)] == [103, 102]
    assert [catalog.rooms[i].number for i in catalog.filter_by_standard("basic")] == [101]
    assert len(catalog.filter_by_standard("all")) == len(catalog.rooms)


def test_reserve_blocks_room_in_search(catalog, store):
    before = catalog.search(ARRIVAL, DEPARTURE, 0, 1000, 1, "all")
    index = catalog.filter_by_standard("basic")[0]
    reservation = catalog.reserve("anna", ARRIVAL, DEPARTURE, index, [0], 190.0)
    after = catalog.search(ARRIVAL, DEPARTURE, 0, 1000, 1, "all")
    assert after == [i for i in before if i != index]
    assert load_reservations(store, "anna") == [reservation]
    assert reservation.services == [catalog.services[0]]
    assert not catalog.rooms[index].is_available(DEPARTURE)


def test_new_catalog_sees_reservations(catalog, store):
    catalog.reserve("anna", ARRIVAL, DEPARTURE, 0, [], 500.0)
    fresh = Catalog(store)
    assert 0 not in fresh.filter_by_date(ARRIVAL)
    assert 0 in fresh.filter_by_date(DEPARTURE + timedelta(days=1))


def test_cancel_reservation_frees_days(catalog):
    reservation = catalog.reserve("anna", ARRIVAL, DEPARTURE, 1, [], 150.0)
    catalog.cancel_reservation(reservation)
    assert reservation.status is ReservationStatus.CANCELLED
    assert 1 in catalog.filter_by_date(ARRIVAL)


def test_quote_adds_services(catalog):
    expected = catalog.rooms[0].price + catalog.services[0].price + catalog.services[1].price
    assert catalog.quote(0, [0, 1]) == expected


def test_add_room_rejects_duplicate_and_persists(catalog, store):
    assert catalog.add_room(Room(101, 1, 90.0, "basic")) is False
    assert catalog.add_room(Room(104, 1, 90.0, "basic")) is True
    assert Catalog(store).room_by_number(104) == Room(104, 1, 90.0, "basic")


def test_edit_room_keeps_status(catalog, store):
    catalog.rooms[0].status = "zajety"
    catalog.edit_room(0, Room(103, 5, 550.0, "deluxe"))
    edited = Catalog(store).room_by_number(103)
    assert edited.status == "zajety"
    assert edited.capacity == 5


def test_remove_room(catalog, store):
    catalog.remove_room(0)
    assert Catalog(store).room_by_number(103) is None
    with pytest.raises(IndexError):
        catalog.remove_room(10)


def test_services_editing(catalog, store):
    assert catalog.add_service(ExtraService("Sauna", 10.0)) is False
    assert catalog.add_service(ExtraService("Spa", 60.0)) is True
    catalog.edit_service(1, ExtraService("Garaz", 30.0))
    catalog.remove_service(0)
    assert [s.name for s in Catalog(store).services] == ["Garaz", "Spa"]
    with pytest.raises(IndexError):
        catalog.edit_service(5, ExtraService("X", 1.0))


def test_room_by_number_missing(catalog):
    assert catalog.room_by_number(999) is None