"""Writing and reading messages at the console."""

from __future__ import annotations

from collections.abc import Sequence

from hoteldesk.accounts import user_exists
from hoteldesk.dates import format_timestamp, now
from hoteldesk.messages import Message, send_message
from hoteldesk.storage import DataStore
from hoteldesk.terminal import Key, ListCursor, Terminal, highlight

__all__ = ["compose_message", "message_rows", "browse_messages", "MAX_SUBJECT"]

MAX_SUBJECT = 30


def compose_message(terminal: Terminal, store: DataStore, sender: str) -> Message:
    """Ask for a recipient, subject and body, then send the message."""
    while True:
        words = terminal.prompt("Podaj odbiorce.\n").split()
        recipient = words[0] if words else ""
        if recipient and user_exists(store, recipient):
            break
        terminal.write("Nie ma takiego uzytkownika. Sprobuj ponownie.\n")
    while True:
        subject = terminal.prompt(
            f"Podaj temat. Nie moze byc dluzszy niz {MAX_SUBJECT} znakow.\n"
        )
        if len(subject) <= MAX_SUBJECT:
            break
        terminal.write(f"Temat dluzszy niz {MAX_SUBJECT} znakow!\n")
    terminal.write(
        "Podaj tresc wiadomosci. Linia zawierajaca tylko kropke konczy pisanie wiadomosci.\n"
    )
    body: list[str] = []
    while (line := terminal.prompt("")) != ".":
        body.append(line)
    return send_message(store, sender, recipient, subject, body, now())


def message_rows(messages: Sequence[Message], outgoing: bool) -> list[str]:
    """Aligned list lines: the other party, the subject and the time sent."""

    def party(message: Message) -> str:
        return message.recipient if outgoing else message.sender

    party_width = max((len(party(m)) for m in messages), default=0) + 4
    subject_width = max((len(m.subject) for m in messages), default=0) + 4
    return [
        f"{party(m).ljust(party_width)}{m.subject.ljust(subject_width)}"
        f"{format_timestamp(m.sent_at)}\t"
        for m in messages
    ]


def _details(message: Message) -> str:
    lines = [
        f"Data wyslania : {format_timestamp(message.sent_at)}",
        f"Nadwaca: {message.sender}\tAdresat: {message.recipient}",
        f"Temat: {message.subject}",
        "-" * 53,
        "Tresc:",
        "",
        *message.body,
    ]
    return "\n".join(lines) + "\n\n"


def browse_messages(terminal: Terminal, messages: Sequence[Message], outgoing: bool) -> None:
    """Scroll through messages and open one with ENTER; ESC leaves."""
    rows = message_rows(messages, outgoing)
    cursor = ListCursor(len(rows))
    terminal.clear()
    redraw = True
    while True:
        if redraw:
            terminal.home()
            terminal.write(
                "ESC - powrot do menu\n"
                "STRZALKI - przechodzenie po wiadomosciach\n"
                "ENTER - wybierz wiadomosc do przeczytania\n\n"
            )
            if not rows:
                terminal.write("Brak wynikow :(\n")
            for index in cursor.visible():
                terminal.write(
                    f"{index}. {highlight(rows[index], index == cursor.selected)}          \n"
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
        elif key is Key.ENTER and rows:
            terminal.clear()
            terminal.write(_details(messages[cursor.selected]))
            terminal.pause()
            terminal.clear()
            redraw = True