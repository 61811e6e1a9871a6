"""
User-facing notifications, delivered as Flask flash messages.
"""

from flask import flash

VARIANT_CATEGORIES = {
    'default': 'success',
    'destructive': 'danger',
}


def notify(title, description='', variant='default'):
    """Show a message to the user. Fire-and-forget."""
    category = VARIANT_CATEGORIES.get(variant, 'info')
    message = f'{title}: {description}' if description else title
    flash(message, category)
