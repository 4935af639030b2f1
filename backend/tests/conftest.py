import mongomock
import pytest
from flask_jwt_extended import create_access_token

import eventhub.extensions as extensions
from eventhub import create_app
from eventhub.config import TestConfig


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setattr(extensions, "MongoClient", mongomock.MongoClient)
    app = create_app(TestConfig)
    yield app
    extensions.get_client().drop_database(TestConfig.MONGO_DB_NAME)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    return extensions.get_db()


@pytest.fixture
def auth_headers(app):
    def _headers(identity="user-1"):
        with app.app_context():
            token = create_access_token(identity=identity)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def create_event(client, auth_headers):
    def _create(identity="organizer-1", **overrides):
        payload = {"title": "Hack Night", "location": "Online", "date": "2025-01-01"}
        payload.update(overrides)
        resp = client.post("/api/v1/event/create", json=payload, headers=auth_headers(identity))
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["event"]

    return _create
