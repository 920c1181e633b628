"""
Content Table Descriptors

Per-table configuration for the generic ResourceManager: form fields, status
vocabularies, filters, search fields and the few table-specific derivations
(blog slug and publish date, contact resolution stamp).
"""

from aisolutions.models import (
    BlogPost,
    ContactSubmission,
    Event,
    GalleryPhoto,
    PortfolioService,
    Testimonial,
)
from aisolutions.models.base import utcnow
from aisolutions.services.resources import TableDescriptor, ValidationError
from aisolutions.services.text import slugify

BLOG_STATUSES = ('draft', 'published', 'archived')
PHOTO_STATUSES = ('active', 'inactive')
PHOTO_CATEGORIES = ('Office Tour', 'Team', 'Technology', 'Business', 'Products', 'Events')
EVENT_STATUSES = ('upcoming', 'ongoing', 'completed', 'cancelled')
EVENT_TYPES = ('Workshop', 'Conference', 'Seminar', 'Product Launch', 'Company Milestone', 'Career Event')
SERVICE_STATUSES = ('active', 'inactive')
TESTIMONIAL_STATUSES = ('pending', 'approved', 'rejected')
CONTACT_STATUSES = ('new', 'in_progress', 'resolved', 'archived')
CONTACT_PRIORITIES = ('low', 'normal', 'high', 'urgent')


def prepare_blog(values):
    """Derive the slug from the title when none is given; stamp publish time."""
    slug = slugify(values.get('slug') or '') or slugify(values.get('title') or '')
    if not slug:
        raise ValidationError('Could not derive a URL slug from the title')
    values['slug'] = slug
    values['published_at'] = utcnow() if values.get('status') == 'published' else None
    return values


def stamp_resolution(field_name, value):
    if field_name != 'status':
        return {}
    return {'resolved_at': utcnow() if value == 'resolved' else None}


BLOGS = TableDescriptor(
    key='blogs',
    label='Blog',
    plural='blogs',
    model=BlogPost,
    form_fields=('title', 'slug', 'content', 'excerpt', 'image_url', 'category', 'tags', 'status'),
    required=('title', 'content', 'category'),
    list_fields=('tags',),
    defaults={'status': 'draft'},
    statuses=BLOG_STATUSES,
    filters={'status': BLOG_STATUSES},
    search_fields=('title', 'category'),
    order_by=[('created_at', False), ('id', False)],
    owner_field='author_id',
    columns=('title', 'category', 'status', 'published_at'),
    prepare=prepare_blog,
)

PHOTOS = TableDescriptor(
    key='photos',
    label='Photo',
    plural='photos',
    model=GalleryPhoto,
    form_fields=('title', 'description', 'image_url', 'category', 'tags', 'status'),
    required=('title', 'image_url', 'category'),
    list_fields=('tags',),
    choices={'category': PHOTO_CATEGORIES},
    defaults={'status': 'active'},
    statuses=PHOTO_STATUSES,
    filters={'category': PHOTO_CATEGORIES},
    search_fields=('title', 'description'),
    order_by=[('created_at', False), ('id', False)],
    owner_field='uploaded_by',
    columns=('title', 'category', 'status'),
)

EVENTS = TableDescriptor(
    key='events',
    label='Event',
    plural='events',
    model=Event,
    form_fields=('title', 'description', 'event_date', 'event_time', 'location', 'event_type',
                 'status', 'max_attendees', 'highlights', 'image_url'),
    required=('title', 'description', 'event_date', 'event_time', 'location', 'event_type'),
    list_fields=('highlights',),
    int_fields=('max_attendees',),
    int_bounds={'max_attendees': (0, None)},
    choices={'event_type': EVENT_TYPES},
    defaults={'status': 'upcoming', 'max_attendees': 100},
    statuses=EVENT_STATUSES,
    filters={'status': EVENT_STATUSES},
    search_fields=('title', 'location'),
    order_by=[('event_date', False), ('id', False)],
    owner_field='created_by',
    columns=('title', 'event_date', 'location', 'event_type', 'status'),
)

PORTFOLIO = TableDescriptor(
    key='portfolio',
    label='Service',
    plural='portfolio services',
    model=PortfolioService,
    form_fields=('title', 'description', 'category', 'features', 'technologies', 'image_url',
                 'demo_url', 'github_url', 'price_range', 'status'),
    required=('title', 'description', 'category'),
    list_fields=('features', 'technologies'),
    defaults={'status': 'active'},
    statuses=SERVICE_STATUSES,
    filters={'status': SERVICE_STATUSES},
    search_fields=('title', 'category'),
    order_by=[('created_at', False), ('id', False)],
    owner_field='created_by',
    columns=('title', 'category', 'price_range', 'status'),
)

TESTIMONIALS = TableDescriptor(
    key='testimonials',
    label='Testimonial',
    plural='testimonials',
    model=Testimonial,
    form_fields=('name', 'role', 'company', 'project', 'text', 'rating', 'image_url', 'status', 'featured'),
    required=('name', 'text', 'rating'),
    int_fields=('rating',),
    int_bounds={'rating': (1, 5)},
    bool_fields=('featured',),
    defaults={'rating': 5, 'status': 'pending', 'featured': False},
    statuses=TESTIMONIAL_STATUSES,
    filters={'status': TESTIMONIAL_STATUSES},
    search_fields=('name', 'company', 'text'),
    order_by=[('created_at', False), ('id', False)],
    toggles={'status': TESTIMONIAL_STATUSES, 'featured': None},
    columns=('name', 'company', 'rating', 'status', 'featured'),
)

# Contact submissions arrive from the public form; admins only triage them.
CONTACTS = TableDescriptor(
    key='contacts',
    label='Submission',
    plural='contact submissions',
    model=ContactSubmission,
    form_fields=('name', 'email', 'phone', 'subject', 'message', 'status', 'priority'),
    required=('name', 'email', 'message'),
    defaults={'status': 'new', 'priority': 'normal'},
    statuses=CONTACT_STATUSES,
    choices={'priority': CONTACT_PRIORITIES},
    filters={'status': CONTACT_STATUSES, 'priority': CONTACT_PRIORITIES},
    search_fields=('name', 'email', 'subject'),
    order_by=[('created_at', False), ('id', False)],
    toggles={'status': CONTACT_STATUSES, 'priority': CONTACT_PRIORITIES},
    columns=('name', 'email', 'subject', 'status', 'priority', 'created_at'),
    editable=False,
    on_toggle=stamp_resolution,
)

DESCRIPTORS = {d.key: d for d in (BLOGS, PHOTOS, EVENTS, PORTFOLIO, TESTIMONIALS, CONTACTS)}


def get_descriptor(key):
    return DESCRIPTORS.get(key)
