"""
Event Model
"""

from aisolutions.extensions import db
from aisolutions.models.base import RowMixin, utcnow


class Event(RowMixin, db.Model):
    """Company event (workshop, conference, launch, ...)"""
    __tablename__ = 'events'
    
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    event_date = db.Column(db.String(10), nullable=False, index=True)  # YYYY-MM-DD
    event_time = db.Column(db.String(20), nullable=False)
    location = db.Column(db.String(200), nullable=False)
    event_type = db.Column(db.String(60), nullable=False)
    status = db.Column(db.String(20), nullable=False, default='upcoming', index=True)
    max_attendees = db.Column(db.Integer, default=100)
    current_attendees = db.Column(db.Integer, default=0)
    highlights = db.Column(db.JSON, nullable=False, default=list)
    image_url = db.Column(db.String(500))
    created_by = db.Column(db.Integer, db.ForeignKey('admin_users.id'))
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)
    
    def __repr__(self):
        return f'<Event {self.title} on {self.event_date}>'
