def test_test_config(app):
    assert app.config['TESTING'] is True
    assert app.config['SQLALCHEMY_DATABASE_URI'] == 'sqlite:///:memory:'
    assert app.config['SITE_NAME'] == 'AI Solutions'


def test_no_form_extension_settings(app):
    # no Flask-WTF in the stack, so no CSRF switch either
    assert 'WTF_CSRF_ENABLED' not in app.config
