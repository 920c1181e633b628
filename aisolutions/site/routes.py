"""
Site Routes

Public pages: home, about, portfolio, testimonials, gallery, events, blog and
contact. Failures loading content degrade to an empty page plus a flash
message; they never break the page.
"""

import logging
import uuid
from flask import current_app, flash, redirect, render_template, request, session, url_for
from aisolutions.models import AnalyticsEvent, BlogPost, ContactSubmission, Event, GalleryPhoto, PortfolioService, Testimonial
from aisolutions.services.resources import ValidationError
from aisolutions.services.storage import StorageError, TableStore
from aisolutions.site import site_bp
from aisolutions.site.services import (
    get_approved_testimonials,
    get_blog_post,
    get_events,
    get_gallery,
    get_portfolio,
    get_published_blogs,
    record_page_view,
    submit_contact,
    submit_testimonial,
)

logger = logging.getLogger(__name__)

blog_store = TableStore(BlogPost)
photo_store = TableStore(GalleryPhoto)
event_store = TableStore(Event)
service_store = TableStore(PortfolioService)
testimonial_store = TableStore(Testimonial)
contact_store = TableStore(ContactSubmission)
analytics_store = TableStore(AnalyticsEvent)


@site_bp.before_request
def count_page_view():
    """Record a page view for every public GET."""
    if request.method != 'GET':
        return
    visitor = session.get('visitor_id')
    if not visitor:
        visitor = uuid.uuid4().hex
        session['visitor_id'] = visitor
    try:
        record_page_view(analytics_store, request, session_id=visitor)
    except StorageError:
        logger.warning('Could not record page view for %s', request.path)


@site_bp.route('/')
def index():
    """Home page with featured testimonials and current services."""
    try:
        testimonials = [t for t in get_approved_testimonials(testimonial_store) if t['featured']][:3]
        services = get_portfolio(service_store)[:3]
    except StorageError:
        testimonials, services = [], []
    return render_template('site/index.html', testimonials=testimonials, services=services)


@site_bp.route('/about')
def about():
    return render_template('site/about.html')


@site_bp.route('/portfolio')
def portfolio():
    try:
        services = get_portfolio(service_store)
    except StorageError:
        flash('Failed to load portfolio services', 'danger')
        services = []
    return render_template('site/portfolio.html', services=services)


@site_bp.route('/testimonials', methods=['GET', 'POST'])
def testimonials():
    """Approved testimonials (featured first) and the review submission form."""
    if request.method == 'POST':
        try:
            submit_testimonial(testimonial_store, request.form)
            flash('Thank you for your feedback! It will be reviewed before publication.', 'success')
            return redirect(url_for('site.testimonials'))
        except ValidationError as e:
            flash(str(e), 'danger')
        except StorageError:
            flash('Failed to submit testimonial. Please try again.', 'danger')

    try:
        items = get_approved_testimonials(testimonial_store)
    except StorageError:
        flash('Failed to load testimonials', 'danger')
        items = []
    return render_template('site/testimonials.html', testimonials=items, form=request.form)


@site_bp.route('/gallery')
def gallery():
    category = request.args.get('category', 'all')
    try:
        photos, categories = get_gallery(photo_store, category)
    except StorageError:
        flash('Failed to load gallery', 'danger')
        photos, categories = [], ['all']
    return render_template('site/gallery.html', photos=photos, categories=categories,
                           selected_category=category)


@site_bp.route('/events')
def events():
    try:
        upcoming, past = get_events(event_store)
    except StorageError:
        flash('Failed to load events', 'danger')
        upcoming, past = [], []
    return render_template('site/events.html', upcoming=upcoming, past=past)


@site_bp.route('/blog')
def blog():
    search_term = request.args.get('q', '')
    category = request.args.get('category', 'all')
    try:
        blogs, categories = get_published_blogs(blog_store, search_term, category)
    except StorageError:
        flash('Failed to load blog posts', 'danger')
        blogs, categories = [], ['all']
    return render_template('site/blog.html', blogs=blogs, categories=categories,
                           search_term=search_term, selected_category=category)


@site_bp.route('/blog/<slug>')
def blog_post(slug):
    try:
        post, related = get_blog_post(blog_store, slug, current_app.config['BLOG_RELATED_LIMIT'])
    except StorageError:
        flash('Failed to load blog post', 'danger')
        post, related = None, []
    if post is None:
        return render_template('site/blog_not_found.html', slug=slug), 404
    return render_template('site/blog_post.html', post=post, related=related)


@site_bp.route('/contact', methods=['GET', 'POST'])
def contact():
    if request.method == 'POST':
        try:
            submit_contact(contact_store, request.form)
            flash("Thank you for your message! We'll get back to you soon.", 'success')
            return redirect(url_for('site.contact'))
        except ValidationError as e:
            flash(str(e), 'danger')
        except StorageError:
            flash('Failed to send message. Please try again.', 'danger')
    return render_template('site/contact.html', form=request.form)
