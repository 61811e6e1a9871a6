"""
Admin Authorization Policies

Signing in proves who the user is; a policy decides whether that user may
use the admin console.
"""

from admin_console.extensions import db
from admin_console.models import AdminUser

DEFAULT_ADMIN_EMAILS = ('admin@example.com', 'admin')


class AllowListPolicy:
    """Fixed list of admin emails.

    For the demo: stands in for a role lookup (see AdminTablePolicy).
    """

    def __init__(self, emails=DEFAULT_ADMIN_EMAILS):
        self.emails = frozenset(emails)

    def is_admin(self, user):
        return user.get('email') in self.emails


class AdminTablePolicy:
    """Admin iff the user's email has a row in admin_users."""

    def is_admin(self, user):
        email = user.get('email')
        if not email:
            return False
        return db.session.query(AdminUser.id).filter_by(email=email).first() is not None


def policy_from_config(config):
    name = config.get('ADMIN_POLICY', 'allow_list')
    if name == 'table':
        return AdminTablePolicy()
    if name == 'allow_list':
        return AllowListPolicy(config.get('ADMIN_EMAILS') or DEFAULT_ADMIN_EMAILS)
    raise ValueError(f'Unknown ADMIN_POLICY: {name!r}')
