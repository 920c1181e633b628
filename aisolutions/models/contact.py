"""
Contact Submission Model
"""

from aisolutions.extensions import db
from aisolutions.models.base import RowMixin, utcnow


class ContactSubmission(RowMixin, db.Model):
    """Message sent through the public contact form"""
    __tablename__ = 'contact_submissions'
    
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    phone = db.Column(db.String(40))
    subject = db.Column(db.String(200))
    message = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(20), nullable=False, default='new', index=True)
    priority = db.Column(db.String(20), nullable=False, default='normal')
    assigned_to = db.Column(db.Integer, db.ForeignKey('admin_users.id'))
    resolved_at = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)
    
    def __repr__(self):
        return f'<ContactSubmission {self.email} ({self.status})>'
