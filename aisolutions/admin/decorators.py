"""
Admin Decorator

Admin authentication is session-based: the identity lives in the signed
session cookie and is checked by the session gate on every admin request.
"""

from functools import wraps
from flask import current_app, g, redirect, session, url_for
from aisolutions.services.session_gate import SessionGate


def _track_identity(identity):
    g.admin_identity = identity


def get_admin_gate():
    """The request's session gate, restored from the session on first use.

    Restoration finishes before any caller sees the gate, so an admin with a
    valid persisted identity is never redirected while it is being read.
    """
    gate = g.get('admin_gate')
    if gate is None:
        gate = SessionGate(session, current_app.extensions['admin_authenticator'])
        gate.on_change(_track_identity)
        gate.restore()
        g.admin_gate = gate
    return gate


def admin_required(f):
    """Decorator to ensure the request is from an authenticated admin.
    
    Security:
    - Uses ONLY the persisted admin identity in the session
    - Admin must login via /admin/login to set it
    - The identity is not re-checked against admin_users after login
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not get_admin_gate().is_authenticated:
            return redirect(url_for('admin.admin_login'))
        return f(*args, **kwargs)
    return wrapper
