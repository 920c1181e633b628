"""
Analytics Event Model
"""

from aisolutions.extensions import db
from aisolutions.models.base import RowMixin, utcnow


class AnalyticsEvent(RowMixin, db.Model):
    """Visitor event recorded by the public site (page views)"""
    __tablename__ = 'analytics_events'
    
    id = db.Column(db.Integer, primary_key=True)
    event_type = db.Column(db.String(40), nullable=False)
    page_url = db.Column(db.String(500))
    session_id = db.Column(db.String(64))
    user_agent = db.Column(db.String(300))
    ip_address = db.Column(db.String(45))
    # 'metadata' is reserved on declarative models
    event_metadata = db.Column('metadata', db.JSON)
    created_at = db.Column(db.DateTime, default=utcnow, index=True)
    
    def __repr__(self):
        return f'<AnalyticsEvent {self.event_type} {self.page_url}>'
