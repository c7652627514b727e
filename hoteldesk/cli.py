"""Command-line entry point: pick a role, then log in or register."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from hoteldesk.accounts import (
    AccountError,
    Role,
    authenticate,
    register,
    validate_login,
    validate_password,
)
from hoteldesk.catalog import Catalog
from hoteldesk.guest import GuestConsole
from hoteldesk.staff import StaffConsole
from hoteldesk.storage import DataStore
from hoteldesk.terminal import Terminal

__all__ = ["account_menu", "main", "DEFAULT_DATA_DIR"]

DEFAULT_DATA_DIR = "dane"

_BANNER = """
 +-----------------------------------+
 |   H     O     T     E     L       |
 +-----------------------------------+
"""

_MAIN_MENU = (
    "Co chcesz zrobic?\n"
    "1. Przejsc do czesci dla gosci.\n"
    "2. Przejsc do czesci dla pracownikow.\n"
    "3. Wyjsc z programu.\n"
)

_ACCOUNT_MENU = (
    "Chcesz:\n"
    "1. zalogowac sie.\n"
    "2. utworzyc nowe konto.\n"
    "3. wrocic do wyboru uzytkownika.\n"
)

_LOGIN_RULES = (
    "Podaj login. Musi miec przynajmniej 3 znaki. "
    "Dozwolone znaki to male i duze litery oraz cyfry.\n"
)
_PHRASE_RULES = (
    "Podaj haslo. Musi miec przynajmniej 8 znakow. Dozwolone znaki to male i duze "
    "litery, cyfry oraz znaki specjalne poza przecinkiem.\n"
)
_ASK_LOGIN = "Podaj login.\n"
_ASK_PHRASE = "Podaj haslo.\n"


def _read_word(terminal: Terminal, text: str) -> str:
    """Read a line and keep its first whitespace-separated word."""
    words = terminal.prompt(text).split()
    return words[0] if words else ""


def _log_in(terminal: Terminal, store: DataStore, catalog: Catalog, role: Role) -> bool:
    login = _read_word(terminal, _ASK_LOGIN)
    password = _read_word(terminal, _ASK_PHRASE)
    try:
        session = authenticate(store, role, login, password)
    except AccountError as error:
        terminal.write(f"{error}\n")
        return False
    console_type = GuestConsole if role is Role.GUEST else StaffConsole
    console_type(session, catalog, terminal).run()
    terminal.clear()
    return True


def _sign_up(terminal: Terminal, store: DataStore, role: Role) -> None:
    while True:
        login = _read_word(terminal, _LOGIN_RULES)
        try:
            validate_login(store, login)
            break
        except AccountError as error:
            terminal.write(f"{error}\n")
    while True:
        password = _read_word(terminal, _PHRASE_RULES)
        try:
            validate_password(password)
            break
        except AccountError as error:
            terminal.write(f"{error}\n")
    register(store, role, login, password)
    terminal.write("Poprawnie utworzono konto.\nZaloguj sie, by miec dostep do systemu.\n")


def account_menu(terminal: Terminal, store: DataStore, catalog: Catalog, role: Role) -> None:
    """Offer login and registration for one role until the user logs in and out, or goes back."""
    lead = "\n" if role is Role.GUEST else ""
    while True:
        choice = terminal.prompt_int(lead + _ACCOUNT_MENU)
        if choice == 1:
            if _log_in(terminal, store, catalog, role):
                return
        elif choice == 2:
            _sign_up(terminal, store, role)
        elif choice == 3:
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Run the hotel desk console; returns the exit status."""
    parser = argparse.ArgumentParser(prog="hoteldesk", description="Hotel reservation console.")
    parser.add_argument(
        "--data-dir",
        default=DEFAULT_DATA_DIR,
        help="directory holding the data files (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    terminal = Terminal()
    store = DataStore(args.data_dir)
    catalog = Catalog(store)

    terminal.write(_BANNER)
    terminal.write("\n\n\n")
    try:
        while True:
            choice = terminal.prompt_int(_MAIN_MENU)
            if choice == 1:
                account_menu(terminal, store, catalog, Role.GUEST)
            elif choice == 2:
                account_menu(terminal, store, catalog, Role.STAFF)
            elif choice == 3:
                return 0
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())