import pytest

from diet_tracker import create_app
from diet_tracker.extensions import db

DEFAULT_PASSWORD = "Passw0rd!"


@pytest.fixture()
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "SECRET_KEY": "test-secret",
        "UPLOADS_DIR": str(tmp_path / "uploads"),
        "AUTO_CREATE_TABLES": True,
    })
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def uploads_dir(app):
    return app.config["UPLOADS_DIR"]


@pytest.fixture()
def register(client):
    """Register a user and return ``(token, user)`` from the response."""
    def _register(email="alice@x.com", password=DEFAULT_PASSWORD, name="Alice"):
        r = client.post("/api/register", json={"email": email, "password": password, "name": name})
        assert r.status_code == 201, r.data
        body = r.get_json()
        return body["token"], body["user"]
    return _register


@pytest.fixture()
def auth_headers(register):
    def _headers(email="alice@x.com", name="Alice"):
        token, _ = register(email=email, name=name)
        return {"Authorization": f"Bearer {token}"}
    return _headers
