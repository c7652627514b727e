"""File-backed storage for the hotel's CSV and JSON data files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

__all__ = [
    "DataStore",
    "ROOMS_FILE",
    "SERVICES_FILE",
    "RESERVATIONS_FILE",
    "MESSAGES_FILE",
    "ID_FILE",
    "GUESTS_FILE",
    "STAFF_FILE",
]

ROOMS_FILE = "pokoje.csv"
SERVICES_FILE = "uslugi.csv"
RESERVATIONS_FILE = "rezerwacje.json"
MESSAGES_FILE = "wiadomosc.json"
ID_FILE = "id.txt"
GUESTS_FILE = "goscie.csv"
STAFF_FILE = "pracownicy.csv"


class DataStore:
    """A directory holding the data files, addressed by file name."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def path(self, name: str) -> Path:
        """Return the full path of a data file."""
        return self.root / name

    def _prepare(self, name: str) -> Path:
        target = self.path(name)
        target.parent.mkdir(parents=True, exist_ok=True)
        return target

    def read_json_list(self, name: str) -> list[Any]:
        """Read a JSON array; a missing file or a non-array gives an empty list."""
        target = self.path(name)
        if not target.exists():
            return []
        with target.open(encoding="utf-8") as handle:
            data = json.load(handle)
        return data if isinstance(data, list) else []

    def write_json_list(self, name: str, items: list[Any]) -> None:
        """Write a JSON array, indented by four spaces."""
        with self._prepare(name).open("w", encoding="utf-8") as handle:
            json.dump(items, handle, indent=4, ensure_ascii=False)

    def append_json(self, name: str, item: Any) -> None:
        """Append one element to a JSON array file."""
        items = self.read_json_list(name)
        items.append(item)
        self.write_json_list(name, items)

    def read_lines(self, name: str) -> list[str]:
        """Read the lines of a text file; a missing file has none."""
        target = self.path(name)
        if not target.exists():
            return []
        return target.read_text(encoding="utf-8").splitlines()

    def write_lines(self, name: str, lines: list[str]) -> None:
        """Replace a text file with the given lines."""
        with self._prepare(name).open("w", encoding="utf-8") as handle:
            for line in lines:
                handle.write(f"{line}\n")

    def append_line(self, name: str, line: str) -> None:
        """Append one line to a text file."""
        with self._prepare(name).open("a", encoding="utf-8") as handle:
            handle.write(f"{line}\n")

    def next_reservation_id(self) -> int:
        """Take the next reservation id from the id file and store it back.

        A missing file counts as zero; a malformed one raises ValueError.
        """
        lines = self.read_lines(ID_FILE)
        last = int(lines[0]) if lines else 0
        new_id = last + 1
        self._prepare(ID_FILE).write_text(str(new_id), encoding="utf-8")
        return new_id