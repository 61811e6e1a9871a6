"""
Admin Decorator
"""

from functools import wraps
from flask import redirect, request, url_for

from admin_console.auth.provider import use_auth


def admin_required(f):
    """Decorator to ensure the request comes from a signed-in admin.
    
    Being signed in is not enough: the user must also pass the admin
    policy, otherwise the request is sent to the login page.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        auth = use_auth()
        if not (auth.is_authenticated and auth.check_admin_status()):
            return redirect(url_for('auth.login', next=request.path))
        return f(*args, **kwargs)
    return wrapper
