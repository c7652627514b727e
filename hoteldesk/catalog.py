"""The hotel's catalogue of rooms and extra services."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date

from hoteldesk.dates import date_range
from hoteldesk.reservations import Reservation, create_reservation, unavailable_dates
from hoteldesk.rooms import Room
from hoteldesk.services import ExtraService
from hoteldesk.storage import ROOMS_FILE, SERVICES_FILE, DataStore

__all__ = ["Catalog", "intersect", "ALL_STANDARDS"]

ALL_STANDARDS = "all"


def intersect(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Keep the items of ``first`` that also appear in ``second``, in order."""
    wanted = set(second)
    return [item for item in first if item in wanted]


class Catalog:
    """Rooms and services loaded from a data store, with search and editing."""

    def __init__(self, store: DataStore) -> None:
        self.store = store
        self.rooms: list[Room] = []
        for line in store.read_lines(ROOMS_FILE):
            if line.strip():
                room = Room.from_csv_line(line)
                room.unavailable = unavailable_dates(store, room.number)
                self.rooms.append(room)
        self.services: list[ExtraService] = [
            ExtraService.from_csv_line(line)
            for line in store.read_lines(SERVICES_FILE)
            if line.strip()
        ]

    def save_rooms(self) -> None:
        """Sort rooms by number and write them out."""
        self.rooms.sort(key=lambda room: room.number)
        self.store.write_lines(ROOMS_FILE, [room.to_csv_line() for room in self.rooms])

    def save_services(self) -> None:
        """Write the services out."""
        self.store.write_lines(SERVICES_FILE, [s.to_csv_line() for s in self.services])

    def filter_by_date(self, day: date) -> list[int]:
        """Indices of rooms free on ``day``."""
        return [i for i, room in enumerate(self.rooms) if room.is_available(day)]

    def filter_by_price(self, low: float, high: float) -> list[int]:
        """Indices of rooms whose nightly price lies within ``low``..``high``."""
        return [i for i, room in enumerate(self.rooms) if low <= room.price <= high]

    def filter_by_capacity(self, guests: int) -> list[int]:
        """Indices of rooms holding at least ``guests`` people."""
        return [i for i, room in enumerate(self.rooms) if room.capacity >= guests]

    def filter_by_standard(self, standard: str) -> list[int]:
        """Indices of rooms of a standard; ``all`` matches every room."""
        return [
            i
            for i, room in enumerate(self.rooms)
            if standard == ALL_STANDARDS or room.standard == standard
        ]

    def search(
        self,
        arrival: date,
        departure: date,
        min_price: float,
        max_price: float,
        min_guests: int,
        standard: str,
    ) -> list[int]:
        """Indices of rooms meeting every criterion and free for the whole stay."""
        results = intersect(
            self.filter_by_price(min_price, max_price), self.filter_by_capacity(min_guests)
        )
        results = intersect(results, self.filter_by_standard(standard))
        for day in date_range(arrival, departure):
            results = intersect(results, self.filter_by_date(day))
        return results

    def quote(self, room_index: int, service_indices: Iterable[int]) -> float:
        """Price of a room's night plus the chosen services."""
        return self.rooms[room_index].price + sum(
            self.services[i].price for i in service_indices
        )

    def reserve(
        self,
        guest: str,
        arrival: date,
        departure: date,
        room_index: int,
        service_indices: Sequence[int],
        price: float,
    ) -> Reservation:
        """Book a room for a guest and block its days."""
        room = self.rooms[room_index]
        services = [self.services[i] for i in service_indices]
        reservation = create_reservation(
            self.store, guest, arrival, departure, room.number, services, price
        )
        room.mark_unavailable(arrival, departure)
        return reservation

    def add_room(self, room: Room) -> bool:
        """Add a room unless its number is taken; tell whether it was added."""
        if self.room_by_number(room.number) is not None:
            return False
        room.unavailable = unavailable_dates(self.store, room.number)
        self.rooms.append(room)
        self.save_rooms()
        return True

    def edit_room(self, index: int, room: Room) -> None:
        """Replace the room at ``index``, keeping its current status."""
        old = self.rooms[index]
        room.status = old.status
        room.unavailable = unavailable_dates(self.store, room.number)
        self.rooms[index] = room
        self.save_rooms()

    def remove_room(self, index: int) -> None:
        """Remove the room at ``index``."""
        del self.rooms[index]
        self.save_rooms()

    def add_service(self, service: ExtraService) -> bool:
        """Add a service unless its name is taken; tell whether it was added."""
        if any(existing.name == service.name for existing in self.services):
            return False
        self.services.append(service)
        self.save_services()
        return True

    def edit_service(self, index: int, service: ExtraService) -> None:
        """Replace the service at ``index``."""
        self.services[index]  # raise IndexError before writing anything
        self.services[index] = service
        self.save_services()

    def remove_service(self, index: int) -> None:
        """Remove the service at ``index``."""
        del self.services[index]
        self.save_services()

    def room_by_number(self, number: int) -> Room | None:
        """Return the room with this number, or None."""
        return next((room for room in self.rooms if room.number == number), None)

    def reload_availability(self) -> None:
        """Recompute every room's blocked days from the reservations file."""
        for room in self.rooms:
            room.unavailable = unavailable_dates(self.store, room.number)

    def cancel_reservation(self, reservation: Reservation) -> None:
        """Cancel a reservation and free the days it held."""
        reservation.cancel(self.store)
        self.reload_availability()