"""
AI Solutions - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the website and its admin panel.
"""

import logging
import os
from flask import Flask
from aisolutions.extensions import db
from aisolutions.config import Config

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    # Initialize extensions
    db.init_app(app)

    # One authenticator per app; each request builds its own session gate on it
    from aisolutions.models import AdminUser
    from aisolutions.services.session_gate import AdminAuthenticator
    from aisolutions.services.storage import TableStore
    app.extensions['admin_authenticator'] = AdminAuthenticator(
        TableStore(AdminUser), min_password_length=app.config['MIN_PASSWORD_LENGTH'])

    # Register blueprints
    from aisolutions.admin import admin_bp
    from aisolutions.site import site_bp

    app.register_blueprint(admin_bp, url_prefix='/admin')
    app.register_blueprint(site_bp)

    # Context processor for the signed-in admin
    @app.context_processor
    def inject_admin_identity():
        """Inject `admin_identity` into templates based on the session gate."""
        from aisolutions.admin.decorators import get_admin_gate
        return dict(admin_identity=get_admin_gate().current_identity(),
                    site_name=app.config['SITE_NAME'])

    @app.template_filter('csv')
    def csv_filter(items):
        from aisolutions.services.text import join_csv
        return join_csv(items)

    # Create database tables
    with app.app_context():
        os.makedirs(app.instance_path, exist_ok=True)
        db.create_all()
        _ensure_default_data(app)

    return app


def _ensure_default_data(app):
    """Ensure the default admin account exists."""
    from sqlalchemy.exc import SQLAlchemyError
    from werkzeug.security import generate_password_hash
    from aisolutions.models import AdminUser

    email = app.config['ADMIN_EMAIL'].strip().lower()
    if AdminUser.query.filter_by(email=email).first():
        return

    try:
        admin = AdminUser(
            email=email,
            name=app.config['ADMIN_NAME'],
            role='admin',
            password_hash=generate_password_hash(app.config['ADMIN_PASSWORD'], method='pbkdf2:sha256'),
        )
        db.session.add(admin)
        db.session.commit()
        logger.info('Created default admin account %s', email)
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Could not create default admin account')
