"""
Portfolio Service Model
"""

from aisolutions.extensions import db
from aisolutions.models.base import RowMixin, utcnow


class PortfolioService(RowMixin, db.Model):
    """Service or project offered on the portfolio page"""
    __tablename__ = 'portfolio_services'
    
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(100), nullable=False)
    features = db.Column(db.JSON, nullable=False, default=list)
    technologies = db.Column(db.JSON, nullable=False, default=list)
    image_url = db.Column(db.String(500))
    demo_url = db.Column(db.String(500))
    github_url = db.Column(db.String(500))
    price_range = db.Column(db.String(100))
    status = db.Column(db.String(20), nullable=False, default='active', index=True)
    created_by = db.Column(db.Integer, db.ForeignKey('admin_users.id'))
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)
    
    def __repr__(self):
        return f'<PortfolioService {self.title}>'
