"""
Configuration settings for the AI Solutions website and admin panel
"""
import os


class Config:
    """Flask application configuration"""
    
    # Flask secret key for signing the session cookie
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'
    
    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'aisolutions.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
    
    # Application settings
    SITE_NAME = 'AI Solutions'
    BLOG_RELATED_LIMIT = int(os.environ.get('BLOG_RELATED_LIMIT') or 3)
    MIN_PASSWORD_LENGTH = 6
    
    # Default admin account, seeded (hashed) on first start
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL') or 'admin@aisolutions.com'
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or 'admin123'
    ADMIN_NAME = os.environ.get('ADMIN_NAME') or 'Site Administrator'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
