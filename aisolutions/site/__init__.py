"""
Site Blueprint

Public, unauthenticated pages of the marketing website.
"""

from flask import Blueprint

site_bp = Blueprint('site', __name__)

from aisolutions.site import routes  # noqa: E402, F401
