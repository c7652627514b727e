"""User accounts: registration, login and the logged-in session."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from hoteldesk.messages import Message, load_messages
from hoteldesk.storage import GUESTS_FILE, STAFF_FILE, DataStore

__all__ = [
    "AccountError",
    "Role",
    "Session",
    "parse_credentials",
    "user_exists",
    "validate_login",
    "validate_password",
    "authenticate",
    "register",
]

_LOGIN_PATTERN = re.compile(r"[a-zA-Z0-9]{3,}")
_PHRASE_RE = re.compile(r"[^,]{8,}")


class AccountError(Exception):
    """Raised when a login or password is rejected."""


class Role(Enum):
    """Kinds of users, each kept in its own credentials file."""

    GUEST = GUESTS_FILE
    STAFF = STAFF_FILE

    @property
    def file_name(self) -> str:
        return self.value


def parse_credentials(line: str) -> tuple[str, str]:
    """Split a ``login,password`` line of a credentials file."""
    login, _, rest = line.partition(",")
    return login, rest.split(",")[0]


def user_exists(store: DataStore, login: str) -> bool:
    """Tell whether any staff member or guest has this login."""
    return any(
        parse_credentials(line)[0] == login
        for name in (STAFF_FILE, GUESTS_FILE)
        for line in store.read_lines(name)
    )


def validate_login(store: DataStore, login: str) -> None:
    """Reject a login that is taken or not at least 3 letters and digits."""
    if user_exists(store, login):
        raise AccountError("Ten login jest juz zajety.")
    if not _LOGIN_PATTERN.fullmatch(login):
        raise AccountError("Login nie spelnia warunkow. Sprobuj ponownie.")


def validate_password(password: str) -> None:
    """Reject a password shorter than 8 characters or holding a comma."""
    if not _PHRASE_RE.fullmatch(password):
        raise AccountError("Haslo nie spelnia warunkow. Sprobuj ponownie.")


@dataclass
class Session:
    """A logged-in user with their messages."""

    store: DataStore
    role: Role
    login: str
    sent: list[Message] = field(default_factory=list)
    received: list[Message] = field(default_factory=list)

    def logout(self) -> None:
        """Forget the user."""
        self.login = ""
        self.sent = []
        self.received = []

    def refresh_messages(self) -> None:
        """Reload the user's sent and received messages."""
        self.sent, self.received = load_messages(self.store, self.login)


def authenticate(store: DataStore, role: Role, login: str, password: str) -> Session:
    """Open a session for matching credentials; raises AccountError otherwise."""
    for line in store.read_lines(role.file_name):
        if parse_credentials(line) == (login, password):
            return Session(store, role, login)
    raise AccountError("Niepoprawne dane lub nie ma takiego uzytkownika.")


def register(store: DataStore, role: Role, login: str, password: str) -> None:
    """Validate and store a new account; raises AccountError when rejected."""
    validate_login(store, login)
    validate_password(password)
    store.append_line(role.file_name, f"{login},{password}")