"""Extra services a guest can add to a reservation."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ExtraService"]


@dataclass
class ExtraService:
    """A named service with its price."""

    name: str
    price: float

    def to_csv_line(self) -> str:
        """Render as a ``name,price`` line of the services file."""
        return f"{self.name},{self.price:.6f}"

    def description(self) -> str:
        """Render as a line of the service list."""
        return f"{self.price:.6f}    {self.name}"

    @classmethod
    def from_csv_line(cls, line: str) -> "ExtraService":
        """Parse a ``name,price`` line; raises ValueError when malformed."""
        fields = line.split(",")
        if len(fields) < 2:
            raise ValueError(f"malformed service line: {line!r}")
        # The services file keeps whole prices; any fraction is dropped.
        return cls(fields[0], float(int(float(fields[1]))))