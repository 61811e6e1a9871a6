"""
Services Package

Exports all services for easy importing.
"""

from admin_console.services.supabase_auth import (
    AuthError,
    AuthSession,
    FlaskSessionStorage,
    SupabaseAuthClient,
    SIGNED_IN,
    SIGNED_OUT,
    TOKEN_REFRESHED,
    client_from_config,
)
from admin_console.services.notifications import notify

__all__ = [
    'AuthError',
    'AuthSession',
    'FlaskSessionStorage',
    'SupabaseAuthClient',
    'SIGNED_IN',
    'SIGNED_OUT',
    'TOKEN_REFRESHED',
    'client_from_config',
    'notify',
]
