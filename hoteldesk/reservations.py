"""Room reservations and their lifecycle, kept in a JSON file."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Any

from hoteldesk.dates import date_range, format_date, parse_date
from hoteldesk.payments import Payment
from hoteldesk.services import ExtraService
from hoteldesk.storage import RESERVATIONS_FILE, DataStore

__all__ = [
    "ReservationStatus",
    "Reservation",
    "create_reservation",
    "load_reservations",
    "unavailable_dates",
    "update_status",
]

# Cancellation is allowed only while arrival is more than this many days away.
_CANCEL_NOTICE = timedelta(days=3)


class ReservationStatus(str, Enum):
    """The stages a reservation goes through."""

    TO_PAY = "do oplacenia"
    PAID = "oplacona"
    CANCELLED = "anulowana"
    IN_PROGRESS = "w trakcie"
    FINISHED = "zakonczona"

    def __str__(self) -> str:
        return self.value


@dataclass
class Reservation:
    """A guest's booking of one room for a span of days."""

    id: int
    guest: str
    arrival: date
    departure: date
    room_number: int
    services: list[ExtraService] = field(default_factory=list)
    status: ReservationStatus = ReservationStatus.TO_PAY
    price: float = 0.0

    def to_json(self) -> dict[str, Any]:
        """Return the record stored in the reservations file."""
        return {
            "nazwa uzytkownika": self.guest,
            "data przyjazdu": format_date(self.arrival),
            "data wymeldowania": format_date(self.departure),
            "pokoj": self.room_number,
            "dodatkowe uslugi": [[s.name, s.price] for s in self.services],
            "status": self.status.value,
            "cena": self.price,
            "id": self.id,
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Reservation":
        """Build a reservation from a stored record."""
        return cls(
            id=int(data["id"]),
            guest=data["nazwa uzytkownika"],
            arrival=parse_date(data["data przyjazdu"]),
            departure=parse_date(data["data wymeldowania"]),
            room_number=int(data["pokoj"]),
            services=[ExtraService(name, float(price)) for name, price in data["dodatkowe uslugi"]],
            status=ReservationStatus(data["status"]),
            price=float(data["cena"]),
        )

    def pay(self, store: DataStore, when: datetime) -> Payment:
        """Mark the reservation paid, store it and send the invoice."""
        self.status = ReservationStatus.PAID
        update_status(store, self.id, self.status)
        payment = Payment(self.price, self.guest, when, self.id)
        payment.issue_invoice(store)
        return payment

    def cancel(self, store: DataStore) -> None:
        """Mark the reservation cancelled and store the change."""
        self.status = ReservationStatus.CANCELLED
        update_status(store, self.id, self.status)

    def can_cancel(self, day: date) -> bool:
        """Tell whether an unpaid reservation may still be cancelled on ``day``."""
        return self.status is ReservationStatus.TO_PAY and day + _CANCEL_NOTICE < self.arrival

    def details(self) -> str:
        """Render the full description shown to the user."""
        lines = [
            "",
            f"Rezerwacja na termin: {format_date(self.arrival)} - {format_date(self.departure)}",
            f"Pokoj nr: {self.room_number}",
            "Dodatkowe uslugi:",
            f"Ilosc: {len(self.services)}",
        ]
        lines.extend(
            f"\t{position}. {service.description()}"
            for position, service in enumerate(self.services, start=1)
        )
        lines.extend(
            [
                f"Cena: {self.price:g}",
                f"Status rezerwacji: {self.status.value}",
                f"ID: {self.id}",
            ]
        )
        return "\n".join(lines) + "\n"


def create_reservation(
    store: DataStore,
    guest: str,
    arrival: date,
    departure: date,
    room_number: int,
    services: Iterable[ExtraService],
    price: float,
) -> Reservation:
    """Store a new unpaid reservation under a fresh id and return it."""
    reservation = Reservation(
        id=store.next_reservation_id(),
        guest=guest,
        arrival=arrival,
        departure=departure,
        room_number=room_number,
        services=list(services),
        status=ReservationStatus.TO_PAY,
        price=price,
    )
    store.append_json(RESERVATIONS_FILE, reservation.to_json())
    return reservation


def load_reservations(store: DataStore, username: str | None = None) -> list[Reservation]:
    """Return the reservations of one user, or all of them when no user is given."""
    return [
        Reservation.from_json(record)
        for record in store.read_json_list(RESERVATIONS_FILE)
        if username is None or record["nazwa uzytkownika"] == username
    ]


def unavailable_dates(store: DataStore, room_number: int) -> set[date]:
    """Return every day a room is held by a reservation that is not cancelled."""
    days: set[date] = set()
    for record in store.read_json_list(RESERVATIONS_FILE):
        if record["pokoj"] == room_number and record["status"] != ReservationStatus.CANCELLED.value:
            days.update(
                date_range(
                    parse_date(record["data przyjazdu"]),
                    parse_date(record["data wymeldowania"]),
                )
            )
    return days


def update_status(store: DataStore, reservation_id: int, status: ReservationStatus | str) -> bool:
    """Set the stored status of a reservation; tell whether it was found."""
    value = ReservationStatus(status).value
    records = store.read_json_list(RESERVATIONS_FILE)
    found = False
    for record in records:
        if record.get("id") == reservation_id:
            record["status"] = value
            found = True
    store.write_json_list(RESERVATIONS_FILE, records)
    return found