"""Messages exchanged between users, kept in a JSON file."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from hoteldesk.dates import format_timestamp, parse_timestamp
from hoteldesk.storage import MESSAGES_FILE, DataStore

__all__ = ["Message", "send_message", "load_messages"]


@dataclass
class Message:
    """A message with its sender, recipient, subject, body lines and time sent."""

    sender: str
    recipient: str
    subject: str
    body: list[str] = field(default_factory=list)
    sent_at: datetime = field(default_factory=lambda: datetime.now().replace(microsecond=0))

    def to_json(self) -> dict[str, Any]:
        """Return the record stored in the messages file."""
        return {
            "nadawca": self.sender,
            "adresat": self.recipient,
            "temat": self.subject,
            "data": format_timestamp(self.sent_at),
            "tresc": list(self.body),
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Message":
        """Build a message from a stored record."""
        return cls(
            sender=data["nadawca"],
            recipient=data["adresat"],
            subject=data["temat"],
            body=list(data["tresc"]),
            sent_at=parse_timestamp(data["data"]),
        )


def send_message(
    store: DataStore,
    sender: str,
    recipient: str,
    subject: str,
    body: list[str],
    sent_at: datetime,
) -> Message:
    """Store a new message and return it."""
    message = Message(sender, recipient, subject, list(body), sent_at)
    store.append_json(MESSAGES_FILE, message.to_json())
    return message


def load_messages(store: DataStore, username: str) -> tuple[list[Message], list[Message]]:
    """Return the messages a user has sent and those they have received."""
    sent: list[Message] = []
    received: list[Message] = []
    for record in store.read_json_list(MESSAGES_FILE):
        if record["adresat"] == username:
            received.append(Message.from_json(record))
        if record["nadawca"] == username:
            sent.append(Message.from_json(record))
    return sent, received