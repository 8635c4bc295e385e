"""Tests for Session state and the login/register use cases."""

import pytest

from oms_client.application.login import LoginHandler
from oms_client.application.register import RegisterHandler
from oms_client.application.session import Session
from oms_client.domain.exceptions import BackendError, ValidationError
from tests.fakes import FakeAuthRepository, FakeSessionStore


class TestSession:

    def test_starts_anonymous(self):
        session = Session()
        assert not session.is_authenticated
        assert session.token is None

    def test_restores_saved_record(self):
        store = FakeSessionStore({"token": "abc", "username": "alice"})
        session = Session(store)
        assert session.token == "abc"
        assert session.username == "alice"

    def test_login_persists(self):
        store = FakeSessionStore()
        Session(store).login("abc", "alice")
        assert store.record == {"token": "abc", "username": "alice"}

    def test_logout_clears(self):
        store = FakeSessionStore({"token": "abc", "username": "alice"})
        session = Session(store)
        session.logout()
        assert not session.is_authenticated
        assert store.record is None

    def test_invalidate_clears(self):
        store = FakeSessionStore({"token": "abc"})
        session = Session(store)
        session.invalidate()
        assert session.token is None
        assert store.record is None


class TestLogin:

    def test_success_starts_session(self):
        session = Session(FakeSessionStore())
        handler = LoginHandler(FakeAuthRepository({"alice": "pw"}), session)
        user = handler.handle(" alice ", "pw")
        assert user["username"] == "alice"
        assert session.token == "token-alice"
        assert session.username == "alice"

    def test_bad_credentials(self):
        session = Session()
        handler = LoginHandler(FakeAuthRepository({"alice": "pw"}), session)
        with pytest.raises(BackendError, match="Invalid username or password"):
            handler.handle("alice", "nope")
        assert not session.is_authenticated

    @pytest.mark.parametrize("username, password", [("", "pw"), ("  ", "pw"), ("alice", "")])
    def test_missing_fields(self, username, password):
        handler = LoginHandler(FakeAuthRepository(), Session())
        with pytest.raises(ValidationError, match="required"):
            handler.handle(username, password)


class TestRegister:

    def test_creates_account(self):
        auth = FakeAuthRepository()
        message = RegisterHandler(auth).handle("bob", "pw", "bob@example.com", "Bob B")
        assert message == "User registered successfully"
        assert auth.accounts == {"bob": "pw"}

    def test_duplicate_reported(self):
        auth = FakeAuthRepository({"bob": "pw"})
        with pytest.raises(BackendError, match="already exists"):
            RegisterHandler(auth).handle("bob", "pw", "b@x", "Bob")
