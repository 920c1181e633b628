"""
Gallery Photo Model
"""

from aisolutions.extensions import db
from aisolutions.models.base import RowMixin, utcnow


class GalleryPhoto(RowMixin, db.Model):
    """Photo shown in the public gallery"""
    __tablename__ = 'gallery_photos'
    
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    image_url = db.Column(db.String(500), nullable=False)
    category = db.Column(db.String(100), nullable=False)
    tags = db.Column(db.JSON, nullable=False, default=list)
    status = db.Column(db.String(20), nullable=False, default='active', index=True)
    uploaded_by = db.Column(db.Integer, db.ForeignKey('admin_users.id'))
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)
    
    def __repr__(self):
        return f'<GalleryPhoto {self.title}>'
