"""
Supabase Auth Service

Adapts the Supabase SDK's auth client to the small interface the
SessionProvider relies on, and keeps the SDK's session in the Flask session
cookie so one client serves one browser session.
"""

import logging
from dataclasses import dataclass, field

import httpx
from supabase import AuthError as SupabaseAuthError
from supabase import ClientOptions, create_client

logger = logging.getLogger(__name__)

SIGNED_IN = 'SIGNED_IN'
SIGNED_OUT = 'SIGNED_OUT'
TOKEN_REFRESHED = 'TOKEN_REFRESHED'

# SDK failures worth reporting to the user instead of crashing the request
CLIENT_ERRORS = (SupabaseAuthError, httpx.HTTPError)


class AuthError(Exception):
    """Error reported by the auth service or raised while talking to it."""

    def __init__(self, message, status=None):
        super().__init__(message)
        self.message = message
        self.status = status


def _translate(e):
    message = getattr(e, 'message', None) or str(e) or 'Auth service error'
    return AuthError(message, status=getattr(e, 'status', None))


def _user_dict(user):
    if user is None:
        return {}
    if hasattr(user, 'model_dump'):
        return user.model_dump(mode='json')
    return dict(user)


@dataclass
class AuthSession:
    access_token: str
    refresh_token: str
    expires_at: int
    user: dict = field(default_factory=dict)

    @classmethod
    def from_sdk(cls, session):
        return cls(
            access_token=session.access_token,
            refresh_token=session.refresh_token or '',
            expires_at=int(session.expires_at or 0),
            user=_user_dict(session.user),
        )


class FlaskSessionStorage:
    """SDK session storage kept under one key of the Flask session."""

    def __init__(self, session, namespace='supabase.auth.token'):
        self.session = session
        self.namespace = namespace

    def _items(self):
        return self.session.get(self.namespace) or {}

    def get_item(self, key):
        return self._items().get(key)

    def set_item(self, key, value):
        items = dict(self._items())
        items[key] = value
        self.session[self.namespace] = items

    def remove_item(self, key):
        items = dict(self._items())
        items.pop(key, None)
        if items:
            self.session[self.namespace] = items
        else:
            self.session.pop(self.namespace, None)

    def clear(self):
        self.session.pop(self.namespace, None)


class SupabaseAuthClient:
    """Wraps ``supabase_client.auth``; SDK errors surface as AuthError."""

    def __init__(self, auth, storage):
        self.auth = auth
        self.storage = storage

    def get_session(self):
        """Current session, or None. A failed lookup leaves storage untouched."""
        try:
            session = self.auth.get_session()
        except CLIENT_ERRORS as e:
            raise _translate(e) from e
        return AuthSession.from_sdk(session) if session else None

    def on_auth_state_change(self, callback):
        """Register callback(event, session); returns the SDK subscription."""
        def forward(event, session):
            callback(event, AuthSession.from_sdk(session) if session else None)
        return self.auth.on_auth_state_change(forward)

    def sign_in_with_password(self, email, password):
        try:
            response = self.auth.sign_in_with_password({'email': email, 'password': password})
        except CLIENT_ERRORS as e:
            raise _translate(e) from e
        if response.session is None:
            raise AuthError('Sign-in did not return a session')
        logger.info("Signed in %s", email)
        return AuthSession.from_sdk(response.session)

    def sign_out(self):
        """Sign out; the local session is dropped even if the SDK call fails."""
        try:
            self.auth.sign_out()
        except CLIENT_ERRORS as e:
            self.storage.clear()
            raise _translate(e) from e


def client_from_config(config, storage):
    """Build a client for one browser session from Flask config."""
    session_storage = FlaskSessionStorage(
        storage, config.get('AUTH_STORAGE_KEY', 'supabase.auth.token'))
    options = ClientOptions(
        storage=session_storage,
        persist_session=True,
        auto_refresh_token=False,
    )
    supabase = create_client(config['SUPABASE_URL'], config['SUPABASE_ANON_KEY'], options=options)
    return SupabaseAuthClient(supabase.auth, session_storage)
