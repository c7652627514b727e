# hoteldesk

A small hotel front desk that runs in a terminal. Guests browse the room
catalogue, filter it by dates, price, capacity and standard, book a room
with extra services, pay for or cancel their bookings and exchange
messages with other users. Staff add, edit and remove rooms and extra
services, and use the virtual reception to check guests in and out and to
mark rooms as cleaned.

The interface text is in Polish.

## Installing

```
pip install .
```

Python 3.10 or later is required; the package has no third-party
dependencies.

## Running

```
hoteldesk
```

or, to keep the data somewhere else than `dane/` under the current
directory:

```
hoteldesk --data-dir path/to/data
```

The data directory holds these files; missing ones are treated as empty
and created when first written:

| file              | contents                                                     |
|-------------------|--------------------------------------------------------------|
| `pokoje.csv`      | rooms: number, max guests, price per night, standard, status |
| `uslugi.csv`      | extra services: name, price                                  |
| `goscie.csv`      | guest accounts: login, password                              |
| `pracownicy.csv`  | staff accounts: login, password                              |
| `rezerwacje.json` | all reservations                                             |
| `wiadomosc.json`  | all messages                                                 |
| `id.txt`          | the last reservation id handed out                           |

From the start menu choose the guest or the staff part, then log in or
create an account. A login must be at least three letters or digits and
not already used by any guest or staff member; a password needs at least
eight characters and may not contain a comma.

In the list screens the arrow keys move the selection, Enter opens or
confirms, and Esc goes back. Guests press `F` in the catalogue to change
filters (`R` in the filter screen resets them) and `D` while booking to
pick extra services. Staff press `F` to filter, `D` to add, `E` to edit and
Backspace to remove the selected room or service.

A booking starts as "do oplacenia" (awaiting payment). Paying it marks it
"oplacona" and sends an invoice message from "System" to the guest. An
unpaid booking can be cancelled while its arrival date is more than three
days away, which frees the room's dates again. At the reception, paid
bookings arriving today or later can be checked in (the room becomes
"zajety"), stays in progress can be checked out (the room becomes
"do sprzatania"), and a room waiting for cleaning can be marked free
("wolny").

## Using it from Python

The building blocks work without the terminal screens:

```python
from datetime import timedelta

from hoteldesk.accounts import Role, authenticate, register
from hoteldesk.catalog import Catalog
from hoteldesk.dates import today
from hoteldesk.storage import DataStore

store = DataStore("dane")
catalog = Catalog(store)

arrival = today() + timedelta(days=1)
departure = arrival + timedelta(days=1)
matches = catalog.search(arrival, departure, 0, 1000, 1, "all")
for index in matches:
    print(catalog.rooms[index].description())

password = "password"
register(store, Role.GUEST, "alice01", password)
session = authenticate(store, Role.GUEST, "alice01", password)
```

- `hoteldesk.storage.DataStore` reads and writes the data files.
- `hoteldesk.catalog.Catalog` holds rooms and services, searches them,
  quotes prices and books rooms (`reserve`, `cancel_reservation`).
- `hoteldesk.reservations` loads bookings and changes their status;
  `Reservation.pay` records a payment and sends the invoice.
- `hoteldesk.accounts` validates, registers and authenticates users and
  raises `AccountError` when something is rejected.
- `hoteldesk.messages` sends and loads messages.
- `hoteldesk.reception.Reception` performs check-in, check-out and
  cleaning without going through the screens.
- `hoteldesk.dates` formats and parses the `dd.mm.yyyy` dates used in the
  files.

## Limitations

Passwords are stored as plain text in the account files, and the data
files are not locked, so only one copy of the program should use a data
directory at a time. Payments are only recorded; no payment provider is
involved.

## Tests

```
pip install .[test]
pytest
```