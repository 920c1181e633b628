"""
Blog Post Model
"""

from aisolutions.extensions import db
from aisolutions.models.base import RowMixin, utcnow


class BlogPost(RowMixin, db.Model):
    """Blog article shown on /blog once published"""
    __tablename__ = 'blogs'
    
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(220), unique=True, nullable=False, index=True)
    content = db.Column(db.Text, nullable=False)
    excerpt = db.Column(db.String(500))
    image_url = db.Column(db.String(500))
    category = db.Column(db.String(100), nullable=False)
    tags = db.Column(db.JSON, nullable=False, default=list)
    status = db.Column(db.String(20), nullable=False, default='draft', index=True)
    author_id = db.Column(db.Integer, db.ForeignKey('admin_users.id'))
    published_at = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)
    
    def __repr__(self):
        return f'<BlogPost {self.slug} ({self.status})>'
