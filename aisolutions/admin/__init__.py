"""
Admin Blueprint

Admin authentication is session-based: the identity lives in the signed
session cookie and is checked by the session gate on every admin request.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from aisolutions.admin import routes  # noqa: E402, F401
