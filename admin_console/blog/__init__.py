"""
Blog Blueprint

Admin-only pages for listing, creating, editing and deleting blog posts.
"""

from flask import Blueprint

blog_bp = Blueprint('blog', __name__)

from admin_console.blog import routes  # noqa: E402, F401
