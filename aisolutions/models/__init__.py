"""
Models Package

Exports all models for easy importing.
"""

from aisolutions.models.admin_user import AdminUser
from aisolutions.models.blog import BlogPost
from aisolutions.models.photo import GalleryPhoto
from aisolutions.models.event import Event
from aisolutions.models.portfolio import PortfolioService
from aisolutions.models.testimonial import Testimonial
from aisolutions.models.contact import ContactSubmission
from aisolutions.models.analytics import AnalyticsEvent

__all__ = [
    'AdminUser',
    'BlogPost',
    'GalleryPhoto',
    'Event',
    'PortfolioService',
    'Testimonial',
    'ContactSubmission',
    'AnalyticsEvent',
]
