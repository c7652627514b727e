from datetime import datetime

import pytest

from hoteldesk.accounts import (
    AccountError,
    Role,
    authenticate,
    parse_credentials,
    register,
    user_exists,
    validate_login,
    validate_password,
)
from hoteldesk.messages import send_message
from hoteldesk.storage import GUESTS_FILE, STAFF_FILE, DataStore


@pytest.fixture
def store(tmp_path):
    return DataStore(tmp_path)


def test_parse_credentials():
    assert parse_credentials("alice,password") == ("alice", "password")
    assert parse_credentials("alice") == ("alice", "")


def test_register_writes_line(store):
    password = "password"
    register(store, Role.GUEST, "alice", password)
    assert store.read_lines(GUESTS_FILE) == ["alice,password"]
    assert store.read_lines(STAFF_FILE) == []


def test_user_exists_checks_both_files(store):
    password = "password"
    register(store, Role.STAFF, "bob", password)
    register(store, Role.GUEST, "carol", password)
    assert user_exists(store, "bob")
    assert user_exists(store, "carol")
    assert not user_exists(store, "dave")


def test_duplicate_login_rejected_across_roles(store):
    password = "password"
    register(store, Role.STAFF, "bob", password)
    with pytest.raises(AccountError, match="zajety"):
        register(store, Role.GUEST, "bob", password)


@pytest.mark.parametrize("login", ["ab", "a_bc", "ala ma", ""])
def test_bad_logins(store, login):
    with pytest.raises(AccountError, match="Login nie spelnia"):
        validate_login(store, login)


def test_good_login_passes(store):
    validate_login(store, "Abc123")
    assert not user_exists(store, "Abc123")


def test_password_rules():
    validate_password("password")
    with pytest.raises(AccountError, match="Haslo"):
        validate_password("password"[:5])
    with pytest.raises(AccountError, match="Haslo"):
        validate_password(",".join(["password", "password"]))


def test_register_rejects_bad_password(store):
    with pytest.raises(AccountError):
        register(store, Role.GUEST, "alice", "password"[:3])
    assert store.read_lines(GUESTS_FILE) == []


def test_authenticate(store):
    password = "password"
    register(store, Role.GUEST, "alice", password)
    session = authenticate(store, Role.GUEST, "alice", password)
    assert session.login == "alice"
    assert session.role is Role.GUEST


def test_authenticate_wrong_role_or_password(store):
    password = "password"
    register(store, Role.GUEST, "alice", password)
    with pytest.raises(AccountError, match="Niepoprawne dane"):
        authenticate(store, Role.STAFF, "alice", password)
    with pytest.raises(AccountError):
        authenticate(store, Role.GUEST, "alice", password + "x")


def test_session_messages_and_logout(store):
    password = "password"
    register(store, Role.GUEST, "alice", password)
    session = authenticate(store, Role.GUEST, "alice", password)
    moment = datetime(2025, 5, 12, 10, 0, 0)
    send_message(store, "alice", "bob", "Hi", ["one"], moment)
    send_message(store, "bob", "alice", "Re", ["two"], moment)
    session.refresh_messages()
    assert [m.subject for m in session.sent] == ["Hi"]
    assert [m.subject for m in session.received] == ["Re"]
    session.logout()
    assert session.login == ""
    assert session.sent == [] and session.received == []