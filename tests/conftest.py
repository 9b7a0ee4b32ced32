import pytest
from werkzeug.test import EnvironBuilder
from werkzeug.wrappers import Request

from app import create_app


def fake_reverse_lookup(ip):
    return ['localhost', 'localhost.localdomain']


@pytest.fixture
def app():
    """Application wired with a stub resolver and no country database."""
    application = create_app('testing', reverse_resolver=fake_reverse_lookup, country_lookup=None)
    yield application
    application.lookup_service.shutdown()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_request():
    """Build a bare Werkzeug request with a given remote address and headers."""
    def _make_request(path='/', remote_addr='127.0.0.1', headers=None):
        environ_base = {}
        if remote_addr is not None:
            environ_base['REMOTE_ADDR'] = remote_addr
        builder = EnvironBuilder(path=path, headers=headers, environ_base=environ_base)
        try:
            return Request(builder.get_environ())
        finally:
            builder.close()
    return _make_request


@pytest.fixture
def make_app():
    """Build extra applications with custom collaborators or settings."""
    apps = []

    def _make_app(reverse_resolver=fake_reverse_lookup, country_lookup=None, **overrides):
        application = create_app(
            'testing',
            reverse_resolver=reverse_resolver,
            country_lookup=country_lookup,
            **overrides
        )
        apps.append(application)
        return application

    yield _make_app
    for application in apps:
        application.lookup_service.shutdown()
