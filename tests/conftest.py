import pytest

from config import TestConfig
from portfolio_app import create_app
from portfolio_app.extensions import db


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def register(client, username="alice", email="alice@example.com", password="secret123", confirm=None):
    return client.post("/register", json={
        "username": username,
        "email": email,
        "password": password,
        "confirm_password": password if confirm is None else confirm,
    })


def login(client, username="alice", password="secret123"):
    return client.post("/login", json={"username": username, "password": password})


@pytest.fixture
def logged_in(client):
    """A client with a registered and logged-in user ``alice``."""
    assert register(client).status_code == 302
    assert login(client).status_code == 302
    return client
