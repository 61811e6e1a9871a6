from dataclasses import asdict

import pytest

from admin_console import create_app
from admin_console.config import TestConfig
from admin_console.extensions import db
from admin_console.services.supabase_auth import AuthError, AuthSession, SIGNED_IN, SIGNED_OUT

PASSWORD = 'secret'

USERS = {
    'admin@example.com': PASSWORD,
    'admin': PASSWORD,
    'writer@example.com': PASSWORD,
}


class FakeSubscription:
    def __init__(self, client, callback):
        self.client = client
        self.callback = callback

    def unsubscribe(self):
        if self in self.client.listeners:
            self.client.listeners.remove(self)


class FakeAuthClient:
    """In-memory stand-in for the hosted auth service."""

    storage_key = 'session'

    def __init__(self, storage=None, users=None):
        self.storage = storage if storage is not None else {}
        self.users = USERS if users is None else users
        self.listeners = []
        self.get_session_error = None
        self.sign_in_error = None
        self.sign_out_error = None
        self.sign_out_calls = 0
        # (event, session) pairs emitted while get_session runs
        self.session_check_events = []
        self.listeners_at_session_check = None

    def get_session(self):
        self.listeners_at_session_check = len(self.listeners)
        for event, session in self.session_check_events:
            self.emit(event, session)
        if self.get_session_error is not None:
            raise self.get_session_error
        data = self.storage.get(self.storage_key)
        return AuthSession(**data) if data else None

    def on_auth_state_change(self, callback):
        subscription = FakeSubscription(self, callback)
        self.listeners.append(subscription)
        return subscription

    def sign_in_with_password(self, email, password):
        if self.sign_in_error is not None:
            raise self.sign_in_error
        if self.users.get(email) != password:
            raise AuthError('Invalid login credentials', status=400)
        session = AuthSession(
            access_token=f'token-{email}',
            refresh_token='refresh',
            expires_at=4102444800,
            user={'id': f'id-{email}', 'email': email},
        )
        self.storage[self.storage_key] = asdict(session)
        self.emit(SIGNED_IN, session)
        return session

    def sign_out(self):
        self.sign_out_calls += 1
        self.storage.pop(self.storage_key, None)
        self.emit(SIGNED_OUT, None)
        if self.sign_out_error is not None:
            raise self.sign_out_error

    def emit(self, event, session):
        for subscription in list(self.listeners):
            subscription.callback(event, session)


class Notifications(list):
    """Records notify(title, description, variant) calls."""

    def __call__(self, title, description='', variant='default'):
        self.append((title, description, variant))

    @property
    def titles(self):
        return [n[0] for n in self]


@pytest.fixture()
def auth_client():
    return FakeAuthClient()


@pytest.fixture()
def notifications():
    return Notifications()


@pytest.fixture()
def app():
    app = create_app(TestConfig, auth_client_factory=lambda config, storage: FakeAuthClient(storage))
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_client(client):
    r = client.post('/login', data={'email': 'admin@example.com', 'password': PASSWORD})
    assert r.status_code == 302
    return client
