"""Payments for reservations and the invoices they produce."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from hoteldesk.dates import format_date
from hoteldesk.messages import Message, send_message
from hoteldesk.storage import DataStore

__all__ = ["Payment", "SYSTEM_SENDER", "INVOICE_SUBJECT"]

SYSTEM_SENDER = "System"
INVOICE_SUBJECT = "Potwierdzenie platnosci"


@dataclass
class Payment:
    """A payment made by a guest for one reservation."""

    amount: float
    payer: str
    when: datetime
    reservation_id: int

    def invoice_body(self) -> list[str]:
        """Return the lines of the invoice."""
        return [
            f"FAKTURA\nza rezerwacje {self.reservation_id}",
            f"\nWystawiona dnia: {format_date(self.when)}.\nPlatnik: {self.payer}"
            "\t\t\tSprzedawca: Hotel\n",
            f"Na kwote: {self.amount:.6f}",
        ]

    def issue_invoice(self, store: DataStore) -> Message:
        """Send the invoice to the payer as a message from the system."""
        return send_message(
            store, SYSTEM_SENDER, self.payer, INVOICE_SUBJECT, self.invoice_body(), self.when
        )