from datetime import date, datetime, timedelta

import pytest

from hoteldesk.messages import load_messages
from hoteldesk.payments import INVOICE_SUBJECT
from hoteldesk.reservations import (
    Reservation,
    ReservationStatus,
    create_reservation,
    load_reservations,
    unavailable_dates,
    update_status,
)
from hoteldesk.services import ExtraService
from hoteldesk.storage import ID_FILE, RESERVATIONS_FILE, DataStore


@pytest.fixture
def store(tmp_path):
    return DataStore(tmp_path)


def _make(store, guest="anna", arrival=date(2025, 5, 12), departure=date(2025, 5, 14), room=101):
    return create_reservation(
        store, guest, arrival, departure, room, [ExtraService("Sauna", 40.0)], 350.0
    )


def test_ids_are_sequential_and_persisted(store):
    first = _make(store)
    second = _make(store)
    assert second.id == first.id + 1
    assert store.path(ID_FILE).read_text() == str(second.id)


def test_record_format(store):
    reservation = _make(store)
    record = store.read_json_list(RESERVATIONS_FILE)[0]
    assert record["data przyjazdu"] == "12.05.2025"
    assert record["status"] == "do oplacenia"
    assert record["dodatkowe uslugi"] == [["Sauna", 40.0]]
    assert record["id"] == reservation.id


def test_json_round_trip(store):
    reservation = _make(store)
    assert Reservation.from_json(reservation.to_json()) == reservation


def test_load_filters_by_user(store):
    mine = _make(store, guest="anna")
    _make(store, guest="piotr")
    assert load_reservations(store, "anna") == [mine]
    assert len(load_reservations(store)) == 2


def test_unavailable_dates_skip_cancelled(store):
    kept = _make(store, room=101)
    dropped = _make(store, arrival=date(2025, 6, 1), departure=date(2025, 6, 2), room=101)
    _make(store, room=102)
    dropped.cancel(store)
    days = unavailable_dates(store, 101)
    assert days == {kept.arrival, kept.arrival + timedelta(days=1), kept.departure}


def test_pay_updates_status_and_sends_invoice(store):
    reservation = _make(store)
    when = datetime(2025, 5, 1, 10, 0, 0)
    payment = reservation.pay(store, when)
    assert reservation.status is ReservationStatus.PAID
    assert payment.amount == reservation.price
    assert load_reservations(store, "anna")[0].status is ReservationStatus.PAID
    _, received = load_messages(store, "anna")
    assert [m.subject for m in received] == [INVOICE_SUBJECT]


def test_cancel_is_stored(store):
    reservation = _make(store)
    reservation.cancel(store)
    assert load_reservations(store)[0].status is ReservationStatus.CANCELLED


def test_can_cancel_rules(store):
    reservation = _make(store)
    assert reservation.can_cancel(reservation.arrival - timedelta(days=4))
    assert not reservation.can_cancel(reservation.arrival - timedelta(days=3))
    reservation.status = ReservationStatus.PAID
    assert not reservation.can_cancel(reservation.arrival - timedelta(days=10))


def test_details_lists_room_services_and_status(store):
    reservation = _make(store)
    text = reservation.details()
    assert "Pokoj nr: 101" in text
    assert "Sauna" in text
    assert "Status rezerwacji: do oplacenia" in text


def test_update_status_unknown_id(store):
    _make(store)
    assert update_status(store, 999, ReservationStatus.PAID) is False
    assert load_reservations(store)[0].status is ReservationStatus.TO_PAY


def test_unknown_status_rejected(store):
    with pytest.raises(ValueError):
        update_status(store, 1, "nieznany")