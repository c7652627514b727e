"""Hotel rooms and their availability."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from hoteldesk.dates import date_range

__all__ = ["Room"]


@dataclass
class Room:
    """A room with its capacity, nightly price, standard and status."""

    number: int
    capacity: int
    price: float
    standard: str
    status: str = "wolny"
    unavailable: set[date] = field(default_factory=set, compare=False, repr=False)

    def to_csv_line(self) -> str:
        """Render as a line of the rooms file."""
        return (
            f"{self.number},{self.capacity},{self.price:.6f},"
            f"{self.standard},{self.status}"
        )

    def description(self) -> str:
        """Render as a line of the catalog."""
        return (
            f"Numer pokoju: {self.number}, max liczba osob: {self.capacity}, "
            f"cena/noc: {self.price:.6f}, standard: {self.standard}"
        )

    @classmethod
    def from_csv_line(cls, line: str) -> "Room":
        """Parse a line of the rooms file; raises ValueError when malformed."""
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed room line: {line!r}")
        number, capacity, price, standard = fields[:4]
        status = fields[4] if len(fields) > 4 and fields[4] else "wolny"
        return cls(int(number), int(capacity), float(price), standard, status)

    def mark_unavailable(self, start: date, end: date) -> None:
        """Block every day from ``start`` to ``end``, both included."""
        self.unavailable.update(date_range(start, end))

    def is_available(self, day: date) -> bool:
        """Tell whether the room is free on the given day."""
        return day not in self.unavailable