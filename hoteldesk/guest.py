"""The guest's console: searching rooms, booking them and managing bookings."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import IntEnum

from hoteldesk.accounts import Session
from hoteldesk.catalog import Catalog
from hoteldesk.dates import format_date, now, today
from hoteldesk.mailbox import browse_messages, compose_message
from hoteldesk.reservations import Reservation, ReservationStatus, load_reservations
from hoteldesk.terminal import Key, ListCursor, Terminal, highlight

__all__ = [
    "FilterField",
    "FilterSettings",
    "GuestConsole",
    "edit_filters",
    "STANDARDS",
]

STANDARDS = ("all", "family", "basic", "komfort", "apartament", "deluxe")

_ONE_DAY = timedelta(days=1)
_MAX_GUESTS = 6
_PRICE_STEP = 50
_PRICE_CEILING = 1000
_MAX_PRICE_FLOOR = 200
_DEFAULT_MIN_PRICE = 0
_DEFAULT_MAX_PRICE = 1000
_PADDING = "          "
_SERVICE_PADDING = " " * 30
_CHECKED = "\t[\033[32mX\033[0m]  "
_UNCHECKED = "\t[ ]  "


class FilterField(IntEnum):
    """The search criteria, in the order they appear on screen."""

    GUESTS = 0
    ARRIVAL = 1
    DEPARTURE = 2
    MIN_PRICE = 3
    MAX_PRICE = 4
    STANDARD = 5


_LABELS = {
    FilterField.GUESTS: "Minimalna liczba osob",
    FilterField.ARRIVAL: "Data przyjazdu",
    FilterField.DEPARTURE: "Data wymeldowania",
    FilterField.MIN_PRICE: "Minimalna cena za noc",
    FilterField.MAX_PRICE: "Maksymalna cena za noc",
    FilterField.STANDARD: "Standard",
}


@dataclass
class FilterSettings:
    """Search criteria for the room catalogue."""

    arrival: date = field(default_factory=lambda: today() + _ONE_DAY)
    departure: date = field(default_factory=lambda: today() + 2 * _ONE_DAY)
    min_guests: int = 1
    min_price: int = _DEFAULT_MIN_PRICE
    max_price: int = _DEFAULT_MAX_PRICE
    standard_index: int = 0

    @property
    def standard(self) -> str:
        return STANDARDS[self.standard_index]

    def reset(self, day: date) -> None:
        """Restore every criterion, planning a one-night stay from the day after ``day``."""
        self.arrival = day + _ONE_DAY
        self.departure = day + 2 * _ONE_DAY
        self.min_guests = 1
        self.min_price = _DEFAULT_MIN_PRICE
        self.max_price = _DEFAULT_MAX_PRICE
        self.standard_index = 0

    def adjust(self, field: FilterField | int, delta: int, day: date) -> None:
        """Step one criterion down (negative ``delta``) or up (positive), within its limits."""
        field = FilterField(field)
        if delta < 0:
            self._decrease(field, day)
        elif delta > 0:
            self._increase(field)

    def _decrease(self, field: FilterField, day: date) -> None:
        if field is FilterField.GUESTS:
            if self.min_guests > 1:
                self.min_guests -= 1
        elif field is FilterField.ARRIVAL:
            if self.arrival > day:
                self.arrival -= _ONE_DAY
        elif field is FilterField.DEPARTURE:
            if self.departure > self.arrival + _ONE_DAY:
                self.departure -= _ONE_DAY
        elif field is FilterField.MIN_PRICE:
            if self.min_price > _PRICE_STEP:
                self.min_price -= _PRICE_STEP
        elif field is FilterField.MAX_PRICE:
            if self.max_price > _MAX_PRICE_FLOOR and self.max_price > self.min_price + _PRICE_STEP:
                self.max_price -= _PRICE_STEP
        elif field is FilterField.STANDARD:
            if self.standard_index:
                self.standard_index -= 1

    def _increase(self, field: FilterField) -> None:
        if field is FilterField.GUESTS:
            if self.min_guests < _MAX_GUESTS:
                self.min_guests += 1
        elif field is FilterField.ARRIVAL:
            if self.arrival + _ONE_DAY < self.departure:
                self.arrival += _ONE_DAY
        elif field is FilterField.DEPARTURE:
            self.departure += _ONE_DAY
        elif field is FilterField.MIN_PRICE:
            if self.min_price < _PRICE_CEILING and self.min_price + _PRICE_STEP < self.max_price:
                self.min_price += _PRICE_STEP
        elif field is FilterField.MAX_PRICE:
            if self.max_price < _PRICE_CEILING:
                self.max_price += _PRICE_STEP
        elif field is FilterField.STANDARD:
            if self.standard_index < len(STANDARDS) - 1:
                self.standard_index += 1

    def apply(self, catalog: Catalog) -> list[int]:
        """Indices of the catalogue's rooms that meet these criteria."""
        return catalog.search(
            self.arrival,
            self.departure,
            self.min_price,
            self.max_price,
            self.min_guests,
            self.standard,
        )

    def value_text(self, field: FilterField) -> str:
        """The criterion's value as shown on screen."""
        values = {
            FilterField.GUESTS: str(self.min_guests),
            FilterField.ARRIVAL: format_date(self.arrival),
            FilterField.DEPARTURE: format_date(self.departure),
            FilterField.MIN_PRICE: str(self.min_price),
            FilterField.MAX_PRICE: str(self.max_price),
            FilterField.STANDARD: self.standard,
        }
        return values[field]


def edit_filters(
    terminal: Terminal, settings: FilterSettings, catalog: Catalog, day: date
) -> list[int]:
    """Let the user change the criteria; return the matching room indices.

    ENTER confirms the criteria, R resets them all.
    """
    fields = list(FilterField)
    selected = 0
    terminal.clear()
    redraw = True
    while True:
        if redraw:
            terminal.home()
            terminal.write(
                "R - resetuj wszystkie filtry\n"
                "STRZALKI - przechodzenie po filtrach i ich zmiana\n"
                "ENTER - zatwierdz filtry\n\n\n"
            )
            for item in fields:
                value = highlight(settings.value_text(item), item == selected)
                terminal.write(f"{_LABELS[item]}: {value}{_PADDING}\n")
            redraw = False
        key = terminal.read_key()
        if key is Key.UP:
            if selected:
                selected -= 1
            redraw = True
        elif key is Key.DOWN:
            if selected < len(fields) - 1:
                selected += 1
            redraw = True
        elif key is Key.LEFT:
            settings.adjust(fields[selected], -1, day)
            redraw = True
        elif key is Key.RIGHT:
            settings.adjust(fields[selected], 1, day)
            redraw = True
        elif key is Key.ENTER:
            terminal.clear()
            return settings.apply(catalog)
        elif key in ("r", "R"):
            settings.reset(day)
            return settings.apply(catalog)


class GuestConsole:
    """The menus a logged-in guest works with."""

    def __init__(self, session: Session, catalog: Catalog, terminal: Terminal) -> None:
        self.session = session
        self.catalog = catalog
        self.terminal = terminal
        self.store = session.store
        self.history: list[Reservation] = load_reservations(self.store, session.login)

    def browse_catalog(self) -> None:
        """Show rooms free for the planned stay; F filters, ENTER books, ESC leaves."""
        terminal = self.terminal
        day = today()
        settings = FilterSettings()
        settings.reset(day)
        results = settings.apply(self.catalog)
        cursor = ListCursor(len(results))
        terminal.clear()
        redraw = True
        while True:
            if redraw:
                terminal.home()
                terminal.write(
                    "ESC - wyjscie z katalogu\n"
                    "F - wybierz filtry\n"
                    "ENTER - wybierz pokoj do rezerwacji\n\n"
                    "Wyswietlam wyniki dla planowanej daty pobytu: "
                    f"{format_date(settings.arrival)} - {format_date(settings.departure)}\n\n"
                )
                if not results:
                    terminal.write("Brak wynikow :(\n")
                for index in cursor.visible():
                    text = self.catalog.rooms[results[index]].description()
                    terminal.write(
                        f"{index}. {highlight(text, index == cursor.selected)}{_PADDING}\n"
                    )
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
            elif key is Key.ENTER and results:
                self.make_reservation(
                    settings.arrival, settings.departure, results[cursor.selected]
                )
                terminal.clear()
                settings = FilterSettings(arrival=settings.arrival, departure=settings.departure)
                results = settings.apply(self.catalog)
                cursor.shrink(len(results))
                redraw = True
            elif key in ("f", "F"):
                filters = FilterSettings(arrival=settings.arrival, departure=settings.departure)
                results = edit_filters(terminal, filters, self.catalog, day)
                settings = filters
                cursor.reset(len(results))
                terminal.clear()
                redraw = True

    def make_reservation(
        self, arrival: date, departure: date, room_index: int
    ) -> Reservation | None:
        """Review and confirm a booking; return it, or None when cancelled."""
        terminal = self.terminal
        room = self.catalog.rooms[room_index]
        selected = [False] * len(self.catalog.services)
        terminal.clear()
        redraw = True
        while True:
            chosen = [index for index, on in enumerate(selected) if on]
            price = self.catalog.quote(room_index, chosen)
            if redraw:
                terminal.home()
                terminal.write(
                    "D - wybierz uslugi dodatkowe\n"
                    "ESC - anuluj rezerwacje\n"
                    "ENTER - potwierdz rezerwacje\n\n"
                    "TWOJA REZERWACJA:\n-----------------------------------\n"
                    f"{format_date(arrival)} - {format_date(departure)}\n"
                    f"Pokoj nr {room.number}\n"
                    f"Ilosc dodatkowych uslug: {len(chosen)}\n"
                    f"Cena laczna: {price:g}\n"
                )
                redraw = False
            key = terminal.read_key()
            if key is Key.ESC:
                return None
            if key in ("d", "D"):
                selected = self.choose_services(selected)
                redraw = True
            elif key is Key.ENTER:
                reservation = self.catalog.reserve(
                    self.session.login, arrival, departure, room_index, chosen, price
                )
                self.history.append(reservation)
                return reservation

    def choose_services(self, selected: Sequence[bool]) -> list[bool]:
        """Toggle extra services with ENTER; return the new selection when ESC is pressed."""
        terminal = self.terminal
        services = self.catalog.services
        chosen = list(selected)
        descriptions = [service.description() for service in services]
        width = max((len(text) for text in descriptions), default=0) + 4
        cursor = ListCursor(len(services))
        terminal.clear()
        redraw = True
        while True:
            if redraw:
                terminal.home()
                terminal.write(
                    "ESC - powrot do rezerwacji\n"
                    "STRZALKI - przechodzenie po uslugach\n"
                    "ENTER - zaznacz/odznacz usluge\n\n"
                )
                for index in cursor.visible():
                    mark = _CHECKED if chosen[index] else _UNCHECKED
                    text = highlight(descriptions[index].ljust(width), index == cursor.selected)
                    terminal.write(f"{index}. {mark}{text}{_SERVICE_PADDING}\n")
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
                return chosen
            elif key is Key.ENTER and services:
                chosen[cursor.selected] = not chosen[cursor.selected]
                redraw = True

    def browse_history(self) -> None:
        """List the guest's bookings; ENTER opens one to pay or cancel it."""
        terminal = self.terminal
        cursor = ListCursor(len(self.history))
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
                if not self.history:
                    terminal.write("Brak wynikow :(\n")
                for index in cursor.visible():
                    reservation = self.history[index]
                    text = (
                        f"Rezerwacja: {format_date(reservation.arrival)} - "
                        f"{format_date(reservation.departure)}\tStatus: {reservation.status.value}"
                    )
                    terminal.write(
                        f"{index}. {highlight(text, index == cursor.selected)}{_PADDING}\n"
                    )
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
            elif key is Key.ENTER and self.history:
                self._show_reservation(self.history[cursor.selected])
                terminal.clear()
                redraw = True

    def _show_reservation(self, reservation: Reservation) -> None:
        terminal = self.terminal
        redraw = True
        while True:
            if redraw:
                terminal.clear()
                terminal.write("ESC - powrot do menu\n")
                if reservation.status is ReservationStatus.TO_PAY:
                    terminal.write("ENTER - oplac\n")
                if reservation.can_cancel(today()):
                    terminal.write("A - anuluj\n")
                terminal.write(reservation.details())
                redraw = False
            key = terminal.read_key()
            if key is Key.ESC:
                return
            if key is Key.ENTER:
                if reservation.status is ReservationStatus.TO_PAY:
                    reservation.pay(self.store, now())
                redraw = True
            elif key in ("a", "A"):
                if reservation.can_cancel(today()):
                    self.catalog.cancel_reservation(reservation)
                redraw = True

    def run(self) -> None:
        """Show the guest's main menu until they log out."""
        terminal = self.terminal
        terminal.clear()
        self.history = load_reservations(self.store, self.session.login)
        while True:
            terminal.write(
                "1. Pokaz katalog pokoi.\n"
                "2. Pokaz historie rezerwacji.\n"
                "3. Wyslij wiadomosc.\n"
                "4. Zobacz wyslane wiadomosci.\n"
                "5. Zobacz odebrane wiadomosci.\n"
                "6. Wyloguj sie.\n"
            )
            self.session.refresh_messages()
            choice = terminal.prompt_int("")
            if choice == 1:
                self.browse_catalog()
            elif choice == 2:
                self.browse_history()
            elif choice == 3:
                compose_message(terminal, self.store, self.session.login)
            elif choice == 4:
                browse_messages(terminal, self.session.sent, True)
            elif choice == 5:
                browse_messages(terminal, self.session.received, False)
            elif choice == 6:
                self.session.logout()
                return