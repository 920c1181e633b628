"""
Testimonial Model
"""

from aisolutions.extensions import db
from aisolutions.models.base import RowMixin, utcnow


class Testimonial(RowMixin, db.Model):
    """Client testimonial; public submissions wait in 'pending' for review"""
    __tablename__ = 'testimonials'
    
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    role = db.Column(db.String(120))
    company = db.Column(db.String(120))
    project = db.Column(db.String(200))
    text = db.Column(db.Text, nullable=False)
    rating = db.Column(db.Integer, nullable=False)  # 1-5 stars
    image_url = db.Column(db.String(500))
    status = db.Column(db.String(20), nullable=False, default='pending', index=True)
    featured = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)
    
    def __repr__(self):
        return f'<Testimonial {self.name} ({self.status})>'
