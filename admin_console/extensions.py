"""
Flask Extensions

The admin session itself is owned by the hosted auth service; the local
database only stores blog posts and the admin role table.
"""

from flask_sqlalchemy import SQLAlchemy

# Database instance
db = SQLAlchemy()
