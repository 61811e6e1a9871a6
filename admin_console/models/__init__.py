"""
Models Package

Exports all models for easy importing.
"""

from admin_console.models.blog_post import BlogPost, CATEGORIES
from admin_console.models.post import Post
from admin_console.models.admin_user import AdminUser

__all__ = ['BlogPost', 'CATEGORIES', 'Post', 'AdminUser']
