"""
Admin User Model
"""

from datetime import datetime

from admin_console.extensions import db


class AdminUser(db.Model):
    """Identities allowed into the admin console (role store for AdminTablePolicy)"""
    __tablename__ = 'admin_users'
    
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    
    def __repr__(self):
        return f'<AdminUser {self.email}>'
