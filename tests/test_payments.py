from datetime import datetime

import pytest

from hoteldesk.messages import load_messages
from hoteldesk.payments import Payment
from hoteldesk.storage import DataStore

WHEN = datetime(2025, 5, 12, 10, 30, 0)


@pytest.fixture
def store(tmp_path):
    return DataStore(tmp_path)


def test_invoice_heading():
    body = Payment(250, "alice", WHEN, 7).invoice_body()
    assert body[0] == "FAKTURA\nza rezerwacje 7"
    assert len(body) == 3


def test_invoice_names_payer_and_date():
    body = Payment(250, "alice", WHEN, 7).invoice_body()
    assert "Platnik: alice" in body[1]
    assert "12.05.2025" in body[1]
    assert "Sprzedawca: Hotel" in body[1]


def test_invoice_amount():
    assert Payment(250, "alice", WHEN, 7).invoice_body()[2] == "Na kwote: 250.000000"


def test_issue_invoice_sends_message(store):
    payment = Payment(250, "alice", WHEN, 7)
    message = payment.issue_invoice(store)
    sent, received = load_messages(store, "alice")
    assert sent == []
    assert received == [message]
    assert message.sender == "System"
    assert message.subject == "Potwierdzenie platnosci"
    assert message.body == payment.invoice_body()
    assert message.sent_at == WHEN