"""
Auth Blueprint

Login and logout for the admin console. Credentials are checked by the
hosted auth service; admin rights are checked by the SessionProvider.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from admin_console.auth import routes  # noqa: E402, F401
