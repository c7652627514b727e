"""The virtual front desk: check-in, check-out and room housekeeping."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from enum import Enum

from hoteldesk.catalog import Catalog
from hoteldesk.dates import format_date, today
from hoteldesk.reservations import (
    Reservation,
    ReservationStatus,
    load_reservations,
    update_status,
)
from hoteldesk.rooms import Room
from hoteldesk.storage import DataStore
from hoteldesk.terminal import Key, ListCursor, Terminal, highlight

__all__ = ["Reception", "ROOM_FREE", "ROOM_OCCUPIED", "ROOM_TO_CLEAN"]

ROOM_FREE = "wolny"
ROOM_OCCUPIED = "zajety"
ROOM_TO_CLEAN = "do sprzatania"


class _Mode(Enum):
    BROWSE = 0
    CHECK_IN = 1
    CHECK_OUT = 2


class Reception:
    """All reservations and rooms as seen from the front desk."""

    def __init__(self, store: DataStore, catalog: Catalog, terminal: Terminal) -> None:
        self.store = store
        self.catalog = catalog
        self.terminal = terminal
        self.reservations: list[Reservation] = []
        self.reload()

    @property
    def rooms(self) -> list[Room]:
        return self.catalog.rooms

    def reload(self) -> None:
        """Read every reservation from storage again."""
        self.reservations = load_reservations(self.store)

    def check_in_candidates(self, day: date | None = None) -> list[Reservation]:
        """Paid reservations whose arrival is on or after ``day``."""
        day = today() if day is None else day
        return [
            r
            for r in self.reservations
            if r.status is ReservationStatus.PAID and day <= r.arrival
        ]

    def check_out_candidates(self) -> list[Reservation]:
        """Reservations of guests currently staying."""
        return [r for r in self.reservations if r.status is ReservationStatus.IN_PROGRESS]

    def _set_state(self, reservation: Reservation, status: ReservationStatus, room_status: str) -> None:
        reservation.status = status
        update_status(self.store, reservation.id, status)
        room = self.catalog.room_by_number(reservation.room_number)
        if room is not None:
            room.status = room_status
            self.catalog.save_rooms()

    def check_in(self, reservation: Reservation) -> None:
        """Start the stay and mark the room occupied."""
        self._set_state(reservation, ReservationStatus.IN_PROGRESS, ROOM_OCCUPIED)

    def check_out(self, reservation: Reservation) -> None:
        """Finish the stay and mark the room for cleaning."""
        self._set_state(reservation, ReservationStatus.FINISHED, ROOM_TO_CLEAN)

    def mark_cleaned(self, room: Room) -> bool:
        """Free a room waiting for cleaning; tell whether it was changed."""
        if room.status != ROOM_TO_CLEAN:
            return False
        room.status = ROOM_FREE
        self.catalog.save_rooms()
        return True

    def browse_check_in(self) -> None:
        """List reservations ready for check-in."""
        self._browse(self.check_in_candidates(today()), _Mode.CHECK_IN)

    def browse_check_out(self) -> None:
        """List reservations ready for check-out."""
        self._browse(self.check_out_candidates(), _Mode.CHECK_OUT)

    def browse_reservations(self) -> None:
        """List every reservation."""
        self._browse(list(self.reservations), _Mode.BROWSE)

    @staticmethod
    def _row(reservation: Reservation) -> str:
        return (
            f"Rezerwacja: {format_date(reservation.arrival)} - "
            f"{format_date(reservation.departure)}    Status: {reservation.status.value}"
            f"    Gosc:{reservation.guest}"
        )

    def _browse(self, reservations: Sequence[Reservation], mode: _Mode) -> None:
        terminal = self.terminal
        cursor = ListCursor(len(reservations))
        terminal.clear()
        redraw = True
        while True:
            if redraw:
                terminal.home()
                terminal.write(
                    "ESC - powrot do menu\n"
                    "STRZALKI - przechodzenie po rezerwacjach\n"
                    "ENTER - zobacz szczegoly rezerwacji\n\n"
                )
                if not reservations:
                    terminal.write("Brak wynikow :(\n")
                for index in cursor.visible():
                    row = highlight(self._row(reservations[index]), index == cursor.selected)
                    terminal.write(f"{index}. {row}          \n")
                redraw = False
            key = terminal.read_key()
            if key is Key.UP:
                cursor.move_up()
                redraw = True
            elif key is Key.DOWN:
                cursor.move_down()
                redraw = True
            elif key in (Key.LEFT, Key.RIGHT):
                redraw = True
            elif key is Key.ESC:
                terminal.clear()
                return
            elif key is Key.ENTER and reservations:
                self._show(reservations[cursor.selected], mode)
                redraw = True

    def _show(self, reservation: Reservation, mode: _Mode) -> None:
        terminal = self.terminal
        redraw = True
        while True:
            can_check_in = mode is _Mode.CHECK_IN and reservation.status is not ReservationStatus.IN_PROGRESS
            can_check_out = mode is _Mode.CHECK_OUT and reservation.status is not ReservationStatus.FINISHED
            if redraw:
                terminal.clear()
                terminal.write("ESC - powrot do menu\n")
                if can_check_in:
                    terminal.write("ENTER - zamelduj\n")
                if can_check_out:
                    terminal.write("ENTER - wymelduj\n")
                terminal.write("\n\n")
                terminal.write(reservation.details())
                redraw = False
            key = terminal.read_key()
            if key is Key.ESC:
                terminal.clear()
                return
            if key is Key.ENTER:
                if can_check_in:
                    self.check_in(reservation)
                elif can_check_out:
                    self.check_out(reservation)
                redraw = True

    def browse_rooms(self) -> None:
        """List rooms with their status; ENTER frees a room that was cleaned."""
        terminal = self.terminal
        cursor = ListCursor(len(self.rooms))
        terminal.clear()
        redraw = True
        while True:
            if redraw:
                terminal.home()
                terminal.write(
                    "ESC - powrot do menu\n"
                    "STRZALKI - przechodzenie po pokojach\n"
                    "ENTER - oznacz pokoj jako posprzatany\n\n"
                )
                if not self.rooms:
                    terminal.write("Brak wynikow :(\n")
                for index in cursor.visible():
                    room = self.rooms[index]
                    row = highlight(
                        f"Pokoj: {room.number}    Status: {room.status}",
                        index == cursor.selected,
                    )
                    terminal.write(f"{index}. {row}          \n")
                redraw = False
            key = terminal.read_key()
            if key is Key.UP:
                cursor.move_up()
                redraw = True
            elif key is Key.DOWN:
                cursor.move_down()
                redraw = True
            elif key in (Key.LEFT, Key.RIGHT):
                redraw = True
            elif key is Key.ESC:
                terminal.clear()
                return
            elif key is Key.ENTER:
                redraw = True
                if self.rooms:
                    self.mark_cleaned(self.rooms[cursor.selected])