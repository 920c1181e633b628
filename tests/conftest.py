import pytest

from aisolutions import create_app
from aisolutions.config import TestConfig
from aisolutions.extensions import db

ADMIN_EMAIL = 'admin@aisolutions.com'
ADMIN_PASSWORD = 'admin123'


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def app_context(app):
    with app.app_context():
        yield


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_client(client):
    r = client.post('/admin/login', data={'email': ADMIN_EMAIL, 'password': ADMIN_PASSWORD})
    assert r.status_code == 302
    return client


@pytest.fixture()
def notices():
    """Collects (category, message) pairs instead of flashing them."""
    messages = []

    def notify(message, category='message'):
        messages.append((category, message))
    notify.messages = messages
    return notify
