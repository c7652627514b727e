"""The staff console: editing the catalogue and running the front desk."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from hoteldesk.accounts import Session
from hoteldesk.catalog import Catalog
from hoteldesk.dates import format_date, today
from hoteldesk.guest import FilterSettings, edit_filters
from hoteldesk.mailbox import browse_messages, compose_message
from hoteldesk.reception import Reception
from hoteldesk.rooms import Room
from hoteldesk.services import ExtraService
from hoteldesk.terminal import Key, ListCursor, Terminal, highlight

__all__ = [
    "RoomField",
    "RoomForm",
    "ServiceForm",
    "StaffConsole",
    "ROOM_STANDARDS",
]

ROOM_STANDARDS = ("family", "basic", "komfort", "apartament", "deluxe")

_MIN_NUMBER = 101
_MAX_NUMBER = 199
_MIN_CAPACITY = 1
_MAX_CAPACITY = 8
_PRICE_STEP = 10
_MIN_PRICE = 50
_MAX_PRICE = 1000
_PADDING = "          "
_SERVICE_PADDING = " " * 30


class RoomField(IntEnum):
    """The fields of the room form, in the order they appear on screen."""

    NUMBER = 0
    CAPACITY = 1
    PRICE = 2
    STANDARD = 3


_ROOM_LABELS = {
    RoomField.NUMBER: "Numer pokoju",
    RoomField.CAPACITY: "Makasymalna liczba osob",
    RoomField.PRICE: "Cena za noc",
    RoomField.STANDARD: "Standard",
}


@dataclass
class RoomForm:
    """Values of a room being added or edited."""

    number: int = _MIN_NUMBER
    capacity: int = 1
    price: int = 100
    standard_index: int = 0

    @property
    def standard(self) -> str:
        return ROOM_STANDARDS[self.standard_index]

    @classmethod
    def from_room(cls, room: Room) -> "RoomForm":
        """Start the form from an existing room; an unknown standard becomes the first."""
        index = ROOM_STANDARDS.index(room.standard) if room.standard in ROOM_STANDARDS else 0
        return cls(room.number, room.capacity, int(room.price), index)

    def adjust(self, field: RoomField | int, delta: int) -> None:
        """Step one field down (negative ``delta``) or up (positive), within its limits."""
        field = RoomField(field)
        if delta < 0:
            if field is RoomField.NUMBER and self.number > _MIN_NUMBER:
                self.number -= 1
            elif field is RoomField.CAPACITY and self.capacity > _MIN_CAPACITY:
                self.capacity -= 1
            elif field is RoomField.PRICE and self.price > _MIN_PRICE:
                self.price -= _PRICE_STEP
            elif field is RoomField.STANDARD and self.standard_index:
                self.standard_index -= 1
        elif delta > 0:
            if field is RoomField.NUMBER and self.number < _MAX_NUMBER:
                self.number += 1
            elif field is RoomField.CAPACITY and self.capacity < _MAX_CAPACITY:
                self.capacity += 1
            elif field is RoomField.PRICE and self.price < _MAX_PRICE:
                self.price += _PRICE_STEP
            elif field is RoomField.STANDARD and self.standard_index < len(ROOM_STANDARDS) - 1:
                self.standard_index += 1

    def value_text(self, field: RoomField) -> str:
        """The field's value as shown on screen."""
        values = {
            RoomField.NUMBER: str(self.number),
            RoomField.CAPACITY: str(self.capacity),
            RoomField.PRICE: str(self.price),
            RoomField.STANDARD: self.standard,
        }
        return values[field]

    def build(self) -> Room:
        """Return the room described by the form."""
        return Room(self.number, self.capacity, float(self.price), self.standard)


@dataclass
class ServiceForm:
    """Values of a service being added or edited, typed in as text."""

    name: str = ""
    price_text: str = f"{0.0:.6f}"
    editing_price: bool = False

    @classmethod
    def from_service(cls, service: ExtraService) -> "ServiceForm":
        """Start the form from an existing service."""
        return cls(service.name, f"{service.price:.6f}")

    def type_char(self, char: str) -> bool:
        """Type one character into the active field; tell whether it was accepted."""
        if len(char) != 1:
            return False
        if not self.editing_price:
            if (char.isascii() and char.isalpha()) or char == " ":
                self.name += char
                return True
            return False
        if ("0" <= char <= "9") or (
            char == "." and self.price_text and "." not in self.price_text
        ):
            self.price_text += char
            return True
        return False

    def backspace(self) -> None:
        """Delete the last character of the active field."""
        if self.editing_price:
            self.price_text = self.price_text[:-1]
        else:
            self.name = self.name[:-1]

    def build(self) -> ExtraService:
        """Return the service; raises ValueError when the price is not a number."""
        return ExtraService(self.name, float(self.price_text))


def _resize(cursor: ListCursor, size: int) -> None:
    cursor.size = size
    cursor.stop = min(cursor.start + cursor.page, size)
    cursor.selected = min(cursor.selected, max(size - 1, 0))


class StaffConsole:
    """The menus a logged-in staff member works with."""

    def __init__(self, session: Session, catalog: Catalog, terminal: Terminal) -> None:
        self.session = session
        self.catalog = catalog
        self.terminal = terminal
        self.store = session.store

    def browse_catalog(self) -> None:
        """Choose between the room list and the service list."""
        terminal = self.terminal
        terminal.clear()
        while True:
            choice = terminal.prompt_int(
                "1. Przegladaj pokoje.\n2. Przegladaj uslugi.\n3. Wroc do menu.\n"
            )
            if choice == 1:
                self.browse_rooms()
            elif choice == 2:
                self.browse_services()
            elif choice == 3:
                return

    def browse_rooms(self) -> None:
        """List rooms; F filters, D adds, E edits, BACKSPACE removes, ESC leaves."""
        terminal = self.terminal
        day = today()
        settings = FilterSettings()
        settings.reset(day)
        results = settings.apply(self.catalog)
        cursor = ListCursor(len(results))
        terminal.clear()
        redraw = True

        def refresh() -> list[int]:
            defaults = FilterSettings(arrival=settings.arrival, departure=settings.departure)
            return defaults.apply(self.catalog)

        while True:
            if redraw:
                terminal.home()
                terminal.write(
                    "ESC - wyjscie z katalogu\n"
                    "F - wybierz filtry\n"
                    "D - dodaj nowy pokoj\n"
                    "E - edytuj aktualnie wybrany pokoj\n"
                    "BACKSPACE - usun aktualnie wybrany pokoj\n"
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
            elif key in ("f", "F"):
                filters = FilterSettings(arrival=settings.arrival, departure=settings.departure)
                results = edit_filters(terminal, filters, self.catalog, day)
                settings = filters
                cursor.reset(len(results))
                terminal.clear()
                redraw = True
            elif key in ("d", "D"):
                self.catalog.add_room(self.room_form())
                results = refresh()
                _resize(cursor, len(results))
                terminal.clear()
                redraw = True
            elif key in ("e", "E") and results:
                index = results[cursor.selected]
                self.catalog.edit_room(index, self.room_form(self.catalog.rooms[index]))
                results = refresh()
                _resize(cursor, len(results))
                terminal.clear()
                redraw = True
            elif key is Key.BACKSPACE and results:
                self.catalog.remove_room(results[cursor.selected])
                results = refresh()
                cursor.shrink(len(results))
                terminal.clear()
                redraw = True

    def room_form(self, room: Room | None = None) -> Room:
        """Edit room values with the arrow keys; ENTER returns the room."""
        terminal = self.terminal
        form = RoomForm() if room is None else RoomForm.from_room(room)
        fields = list(RoomField)
        selected = 0
        terminal.clear()
        redraw = True
        while True:
            if redraw:
                terminal.home()
                terminal.write("ENTER - zatwierdz pokoj\n\n\n")
                for item in fields:
                    value = highlight(form.value_text(item), item == selected)
                    terminal.write(f"{_ROOM_LABELS[item]}: {value}{_PADDING}\n")
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
                form.adjust(fields[selected], -1)
                redraw = True
            elif key is Key.RIGHT:
                form.adjust(fields[selected], 1)
                redraw = True
            elif key is Key.ENTER:
                return form.build()

    def browse_services(self) -> None:
        """List services; D adds, E edits, BACKSPACE removes, ESC leaves."""
        terminal = self.terminal
        services = self.catalog.services
        cursor = ListCursor(len(services))
        terminal.clear()
        redraw = True
        while True:
            if redraw:
                descriptions = [service.description() for service in services]
                width = max((len(text) for text in descriptions), default=0) + 4
                terminal.home()
                terminal.write(
                    "ESC - wyjscie z katalogu\n"
                    "D - dodaj nowa usluge\n"
                    "E - edytuj aktualnie wybrana usluge\n"
                    "BACKSPACE - usun aktualnie wybrana usluge\n"
                )
                for index in cursor.visible():
                    text = highlight(descriptions[index].ljust(width), index == cursor.selected)
                    terminal.write(f"{index}. {text}{_SERVICE_PADDING}\n")
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
            elif key in ("d", "D"):
                self.catalog.add_service(self.service_form())
                _resize(cursor, len(services))
                terminal.clear()
                redraw = True
            elif key in ("e", "E") and services:
                edited = self.service_form(services[cursor.selected])
                self.catalog.edit_service(cursor.selected, edited)
                terminal.clear()
                redraw = True
            elif key is Key.BACKSPACE and services:
                self.catalog.remove_service(cursor.selected)
                cursor.shrink(len(services))
                terminal.clear()
                redraw = True

    def service_form(self, service: ExtraService | None = None) -> ExtraService:
        """Type a service's name and price; ENTER returns it once the price is valid."""
        terminal = self.terminal
        form = ServiceForm() if service is None else ServiceForm.from_service(service)
        terminal.clear()
        redraw = True
        while True:
            if redraw:
                terminal.home()
                terminal.write("ENTER - zatwierdz usluge\n\n\n")
                terminal.write(
                    f"Nazwa uslugi: {highlight(form.name, not form.editing_price)}{_PADDING}\n"
                    f"cena: {highlight(form.price_text, form.editing_price)}{_PADDING}\n"
                )
                redraw = False
            key = terminal.read_key()
            if key is Key.UP:
                form.editing_price = False
                redraw = True
            elif key is Key.DOWN:
                form.editing_price = True
                redraw = True
            elif key in (Key.LEFT, Key.RIGHT):
                redraw = True
            elif key is Key.ENTER:
                try:
                    return form.build()
                except ValueError:
                    redraw = True
            elif key is Key.BACKSPACE:
                form.backspace()
                redraw = True
            elif isinstance(key, str):
                redraw = form.type_char(key) or redraw

    def reception_menu(self) -> None:
        """The front desk menu: check-in, check-out, reservations and rooms."""
        terminal = self.terminal
        terminal.clear()
        reception = Reception(self.store, self.catalog, terminal)
        while True:
            self.session.refresh_messages()
            choice = terminal.prompt_int(
                "1. Zamelduj\n"
                "2. Wymelduj\n"
                "3. Zobacz wszystkie rezerwacje\n"
                "4. Zobacz status wszystkich pokoi\n"
                "5. Wroc do menu\n"
            )
            if choice == 1:
                reception.browse_check_in()
            elif choice == 2:
                reception.browse_check_out()
            elif choice == 3:
                reception.browse_reservations()
            elif choice == 4:
                reception.browse_rooms()
            elif choice == 5:
                return

    def run(self) -> None:
        """Show the staff main menu until the user logs out."""
        terminal = self.terminal
        terminal.clear()
        while True:
            self.session.refresh_messages()
            choice = terminal.prompt_int(
                "1. Pokaz katalog.\n"
                "2. Wejdz do wirtualnej recepcji.\n"
                "3. Wyslij wiadomosc.\n"
                "4. Zobacz wyslane wiadomosci.\n"
                "5. Zobacz odebrane wiadomosci.\n"
                "6. Wyloguj sie.\n"
            )
            if choice == 1:
                self.browse_catalog()
            elif choice == 2:
                self.reception_menu()
            elif choice == 3:
                compose_message(terminal, self.store, self.session.login)
            elif choice == 4:
                browse_messages(terminal, self.session.sent, True)
            elif choice == 5:
                browse_messages(terminal, self.session.received, False)
            elif choice == 6:
                self.session.logout()
                return