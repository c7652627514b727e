"""Terminal hotel desk: room catalogue, reservations, payments, messages and reception."""

__version__ = "0.1.0"