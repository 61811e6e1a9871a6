"""
Session Provider

Owns the admin session for one browser session: mirrors the signed-in user
from the auth client and adds the admin-only rule on top of sign-in. Views
reach the provider mounted for the current request through use_auth().
"""

import logging
from dataclasses import dataclass
from typing import Optional

from flask import g, has_app_context

from admin_console.auth.policy import AllowListPolicy
from admin_console.services.supabase_auth import AuthError

logger = logging.getLogger(__name__)

NOT_ADMIN_MESSAGE = 'Not authorized as admin'


@dataclass(frozen=True)
class LoginResult:
    success: bool
    error: Optional[str] = None


def _silent(title, description='', variant='default'):
    pass


class SessionProvider:
    """Session state plus login/logout for one auth client.

    ``user``, ``is_authenticated`` and ``loading`` are only ever written
    together through ``_set_session``.
    """

    def __init__(self, client, policy=None, notify=None):
        self.client = client
        self.policy = policy or AllowListPolicy()
        self.notify = notify or _silent
        self.user = None
        self.is_authenticated = False
        self.loading = True
        self._subscription = None

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def mount(self):
        """Subscribe to auth changes, then load the current session."""
        self.user = None
        self.is_authenticated = False
        self.loading = True
        self._subscription = self.client.on_auth_state_change(self._on_auth_state_change)
        try:
            session = self.client.get_session()
            self._set_session(session)
        except Exception as e:
            logger.error("Error checking auth session: %s", e)
            self._set_session(None)
        finally:
            self.loading = False
        return self

    def unmount(self):
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def __enter__(self):
        return self.mount()

    def __exit__(self, exc_type, exc, tb):
        self.unmount()

    def _on_auth_state_change(self, event, session):
        logger.debug("Auth state change: %s", event)
        self._set_session(session)

    def _set_session(self, session):
        self.user = session.user if session is not None else None
        self.is_authenticated = session is not None

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def login(self, email, password):
        """Sign in and require admin rights. Never raises.

        A user who signs in but is not an admin is signed straight back out.
        """
        try:
            session = self.client.sign_in_with_password(email, password)
            self._set_session(session)

            if not self.check_admin_status():
                logger.warning("Rejected non-admin login for %s", email)
                self._end_session()
                return self._login_failed(NOT_ADMIN_MESSAGE)

            self.notify('Login successful', 'Welcome back!')
            return LoginResult(success=True)
        except AuthError as e:
            logger.error("Login error: %s", e)
            return self._login_failed(e.message or 'Login failed')
        except Exception:
            logger.exception("Login error")
            self._end_session()
            self.notify('Login failed', 'An error occurred during login', 'destructive')
            return LoginResult(success=False, error='Login failed')

    def logout(self):
        try:
            self.client.sign_out()
            self.notify('Logged out', 'You have been successfully logged out')
        except Exception as e:
            logger.error("Logout error: %s", e)
            message = getattr(e, 'message', None) or 'An error occurred during logout'
            self.notify('Logout failed', message, 'destructive')
        finally:
            self._set_session(None)

    def check_admin_status(self):
        if not self.user:
            return False
        try:
            return bool(self.policy.is_admin(self.user))
        except Exception as e:
            logger.error("Error checking admin status: %s", e)
            return False

    def _login_failed(self, message):
        self.notify('Login failed', message, 'destructive')
        return LoginResult(success=False, error=message)

    def _end_session(self):
        """Sign out without telling the user about it."""
        try:
            self.client.sign_out()
        except Exception as e:
            logger.error("Error rolling back session: %s", e)
        finally:
            self._set_session(None)


def use_auth():
    """Return the SessionProvider mounted for the current request."""
    provider = g.get('auth') if has_app_context() else None
    if provider is None:
        raise RuntimeError('use_auth must be used within a SessionProvider')
    return provider
