"""
Admin User Model
"""

from aisolutions.extensions import db
from aisolutions.models.base import RowMixin, utcnow


class AdminUser(RowMixin, db.Model):
    """Content editor account for the admin panel"""
    __tablename__ = 'admin_users'
    
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    name = db.Column(db.String(120), nullable=False)
    role = db.Column(db.String(40), nullable=False, default='admin')
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)
    
    def __repr__(self):
        return f'<AdminUser {self.email}>'
