"""
Public Site Services

Read-only listings for the public pages and the two constrained inserts the
public may perform (testimonials and contact messages). Public inserts never
trust client-supplied workflow fields: status, priority and featured are set
here.
"""

import logging
from aisolutions.services.resources import ValidationError, apply_filters

logger = logging.getLogger(__name__)

DEFAULT_SUBJECT = 'General Inquiry'


def get_published_blogs(store, search_term='', category='all'):
    """Published posts, newest first, plus the category choices they span."""
    blogs = store.list({'status': 'published'}, order_by=[('published_at', False), ('id', False)])
    categories = ['all'] + sorted({blog['category'] for blog in blogs})
    filtered = apply_filters(blogs, search_term, {'category': category},
                             search_fields=('title', 'excerpt', 'tags'))
    return filtered, categories


def get_blog_post(store, slug, related_limit=3):
    """Return (post, related posts); post is None when no published post has this slug."""
    matches = store.list({'slug': slug, 'status': 'published'})
    if not matches:
        return None, []
    post = matches[0]
    same_category = store.list({'status': 'published', 'category': post['category']},
                               order_by=[('published_at', False), ('id', False)])
    related = [blog for blog in same_category if blog['id'] != post['id']][:related_limit]
    return post, related


def get_gallery(store, category='all'):
    photos = store.list({'status': 'active'}, order_by=[('created_at', False), ('id', False)])
    categories = ['all'] + sorted({photo['category'] for photo in photos})
    return apply_filters(photos, filters={'category': category}), categories


def get_events(store):
    """Upcoming events soonest first, completed events most recent first."""
    upcoming = store.list({'status': 'upcoming'}, order_by=[('event_date', True), ('id', True)])
    past = store.list({'status': 'completed'}, order_by=[('event_date', False), ('id', False)])
    return upcoming, past


def get_portfolio(store):
    return store.list({'status': 'active'}, order_by=[('created_at', False), ('id', False)])


def get_approved_testimonials(store):
    return store.list({'status': 'approved'},
                      order_by=[('featured', False), ('created_at', False), ('id', False)])


def _text(form, name):
    return (form.get(name) or '').strip()


def submit_testimonial(store, form):
    """Store a visitor's testimonial for review. Raises ValidationError or StorageError."""
    name = _text(form, 'name')
    text = _text(form, 'text')
    try:
        rating = int(_text(form, 'rating') or 0)
    except ValueError:
        rating = 0
    if not name or not text or rating == 0:
        raise ValidationError('Please fill in all required fields')
    if not 1 <= rating <= 5:
        raise ValidationError('Rating must be between 1 and 5')

    row = store.insert({
        'name': name,
        'role': _text(form, 'role') or None,
        'company': _text(form, 'company') or None,
        'project': _text(form, 'project') or None,
        'text': text,
        'rating': rating,
        'status': 'pending',
        'featured': False,
    })
    logger.info('Testimonial %s submitted for review', row['id'])
    return row


def submit_contact(store, form):
    """Store a contact-form message. Raises ValidationError or StorageError."""
    name = _text(form, 'name')
    email = _text(form, 'email')
    message = _text(form, 'message')
    if not name or not email or not message:
        raise ValidationError('Please fill in all required fields')
    if '@' not in email:
        raise ValidationError('Please provide a valid email address')

    row = store.insert({
        'name': name,
        'email': email,
        'phone': _text(form, 'phone') or None,
        'subject': _text(form, 'subject') or DEFAULT_SUBJECT,
        'message': message,
        'status': 'new',
        'priority': 'normal',
    })
    logger.info('Contact submission %s received', row['id'])
    return row


def record_page_view(store, request, session_id=None):
    """Count a public page render for the admin dashboard."""
    store.insert({
        'event_type': 'page_view',
        'page_url': request.path,
        'session_id': session_id,
        'user_agent': (request.user_agent.string or '')[:300] or None,
        'ip_address': request.remote_addr,
    })
