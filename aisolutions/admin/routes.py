"""
Admin Routes

Login/logout, dashboard, password change and the generic content screens.
Every content table (blogs, photos, events, portfolio, testimonials,
contacts) is served by the same handlers, driven by its TableDescriptor.
"""

import logging
from flask import abort, current_app, flash, redirect, render_template, request, session, url_for
from aisolutions.admin import admin_bp
from aisolutions.admin.decorators import admin_required, get_admin_gate
from aisolutions.models import AnalyticsEvent
from aisolutions.services.descriptors import DESCRIPTORS, get_descriptor
from aisolutions.services.resources import ResourceManager
from aisolutions.services.storage import StorageError, TableStore

logger = logging.getLogger(__name__)

_stores = {}


def _store_for(model):
    store = _stores.get(model)
    if store is None:
        store = _stores[model] = TableStore(model)
    return store


def _manager(key):
    descriptor = get_descriptor(key)
    if descriptor is None:
        abort(404)
    return ResourceManager(descriptor, _store_for(descriptor.model),
                           actor=get_admin_gate().current_identity())


# -----------------------------------------------------------------------------
# Admin Authentication Routes
# -----------------------------------------------------------------------------

@admin_bp.route('/', methods=['GET', 'POST'])
@admin_bp.route('/login', methods=['GET', 'POST'])
def admin_login():
    """Admin login page."""
    gate = get_admin_gate()
    if gate.is_authenticated:
        return redirect(url_for('admin.admin_dashboard'))

    if request.method == 'POST':
        email = request.form.get('email', '').strip()
        password = request.form.get('password', '')

        if not email or not password:
            flash('Please enter both email and password.', 'danger')
            return render_template('admin/login.html', email=email)

        error = gate.login(email, password)
        if error:
            flash(error, 'danger')
            return render_template('admin/login.html', email=email)

        session.permanent = True
        flash(f'Welcome, {gate.current_identity().name}!', 'success')
        return redirect(url_for('admin.admin_dashboard'))

    return render_template('admin/login.html', email='')


@admin_bp.route('/logout')
def admin_logout():
    """Admin logout - forgets the persisted identity."""
    get_admin_gate().logout()
    flash('You have been logged out of the admin panel.', 'info')
    return redirect(url_for('admin.admin_login'))


@admin_bp.route('/password', methods=['GET', 'POST'])
@admin_required
def admin_password():
    """Change the signed-in admin's password."""
    if request.method == 'POST':
        authenticator = current_app.extensions['admin_authenticator']
        error = authenticator.change_password(
            get_admin_gate().current_identity(),
            request.form.get('current_password', ''),
            request.form.get('new_password', ''),
            request.form.get('confirm_password', ''),
        )
        if error:
            flash(error, 'danger')
        else:
            flash('Password updated successfully', 'success')
            return redirect(url_for('admin.admin_password'))

    return render_template('admin/password.html')


# -----------------------------------------------------------------------------
# Admin Dashboard
# -----------------------------------------------------------------------------

@admin_bp.route('/dashboard')
@admin_required
def admin_dashboard():
    """Admin dashboard with content counts and pending work."""
    counts = [
        ('total_blogs', DESCRIPTORS['blogs'].model, None),
        ('total_photos', DESCRIPTORS['photos'].model, None),
        ('total_events', DESCRIPTORS['events'].model, None),
        ('total_services', DESCRIPTORS['portfolio'].model, None),
        ('pending_contacts', DESCRIPTORS['contacts'].model, {'status': 'new'}),
        ('pending_testimonials', DESCRIPTORS['testimonials'].model, {'status': 'pending'}),
        ('total_visits', AnalyticsEvent, None),
    ]
    stats = {}
    try:
        for name, model, filter_equals in counts:
            stats[name] = _store_for(model).count(filter_equals)
    except StorageError:
        flash('Failed to load dashboard statistics', 'danger')
        stats = {name: 0 for name, _, _ in counts}

    return render_template('admin/dashboard.html',
                         stats=stats,
                         descriptors=DESCRIPTORS.values(),
                         admin=get_admin_gate().current_identity())


# -----------------------------------------------------------------------------
# Content Management (one set of handlers for every table)
# -----------------------------------------------------------------------------

@admin_bp.route('/<key>')
@admin_required
def list_resources(key):
    """List, search and filter one content table."""
    manager = _manager(key)
    manager.load()
    d = manager.descriptor
    search_term = request.args.get('q', '')
    filters = {name: request.args.get(name, 'all') for name in d.filters}
    rows = manager.filtered(search_term, filters)
    return render_template('admin/resource_list.html',
                         descriptor=d,
                         rows=rows,
                         total=len(manager.rows),
                         search_term=search_term,
                         filters=filters)


@admin_bp.route('/<key>/new', methods=['GET', 'POST'])
@admin_required
def create_resource(key):
    manager = _manager(key)
    d = manager.descriptor
    if not d.editable:
        abort(404)

    manager.begin_create()
    if request.method == 'POST' and manager.submit(d.draft_from_form(request.form)):
        return redirect(url_for('admin.list_resources', key=key))

    return render_template('admin/resource_form.html', descriptor=d, draft=manager.draft, row_id=None)


def _load_row(manager, row_id):
    d = manager.descriptor
    try:
        row = manager.store.get(row_id)
    except StorageError:
        flash(f'Failed to fetch {d.label.lower()}', 'danger')
        return None
    if row is None:
        flash(f'{d.label} not found.', 'warning')
    return row


@admin_bp.route('/<key>/<int:row_id>')
@admin_required
def view_resource(key, row_id):
    """Read-only detail of one row (contact submissions are triaged here)."""
    manager = _manager(key)
    row = _load_row(manager, row_id)
    if row is None:
        return redirect(url_for('admin.list_resources', key=key))
    return render_template('admin/resource_detail.html', descriptor=manager.descriptor, row=row)


@admin_bp.route('/<key>/<int:row_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_resource(key, row_id):
    manager = _manager(key)
    d = manager.descriptor
    if not d.editable:
        abort(404)

    row = _load_row(manager, row_id)
    if row is None:
        return redirect(url_for('admin.list_resources', key=key))

    manager.begin_edit(row)
    if request.method == 'POST' and manager.submit(d.draft_from_form(request.form)):
        return redirect(url_for('admin.list_resources', key=key))

    return render_template('admin/resource_form.html', descriptor=d, draft=manager.draft, row_id=row_id)


@admin_bp.route('/<key>/<int:row_id>/delete', methods=['POST'])
@admin_required
def delete_resource(key, row_id):
    """Delete a row. The form must carry confirm=yes."""
    manager = _manager(key)
    manager.remove(row_id, confirmed=request.form.get('confirm') == 'yes')
    return redirect(url_for('admin.list_resources', key=key))


@admin_bp.route('/<key>/<int:row_id>/toggle', methods=['POST'])
@admin_required
def toggle_resource(key, row_id):
    """Single-field update (status, priority, featured) without the full form."""
    manager = _manager(key)
    manager.toggle_field(row_id, request.form.get('field', ''), request.form.get('value', ''))
    if request.form.get('next') == 'detail':
        return redirect(url_for('admin.view_resource', key=key, row_id=row_id))
    return redirect(url_for('admin.list_resources', key=key))
