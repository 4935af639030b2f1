"""Tests for the error taxonomy and the shared route pipeline."""

import mongomock
import pytest
from flask import jsonify

import eventhub.extensions as extensions
from eventhub import create_app
from eventhub.config import TestConfig
from eventhub.errors import ConflictError, ForbiddenError, InternalError, NotFoundError, ValidationError
from eventhub.utils.handlers import api_handler


class TestAPIErrors:

    def test_defaults(self):
        assert ValidationError().status_code == 400
        assert NotFoundError().status_code == 404
        assert ConflictError().status_code == 400
        assert ForbiddenError().status_code == 403
        assert InternalError().status_code == 500
        assert InternalError(None).to_dict() == {"message": "Internal Server Error"}

    def test_status_override_is_per_instance(self):
        err = NotFoundError("event not found", status_code=400)
        assert err.status_code == 400
        assert NotFoundError().status_code == 404

    def test_to_dict_omits_empty_errors(self):
        assert ConflictError("Already registered").to_dict() == {"message": "Already registered"}
        err = ValidationError(errors=[{"field": "title", "message": "Field required"}])
        assert err.to_dict() == {
            "message": "Invalid input",
            "errors": [{"field": "title", "message": "Field required"}],
        }


@pytest.fixture
def pipeline_client(monkeypatch):
    monkeypatch.setattr(extensions, "MongoClient", mongomock.MongoClient)
    app = create_app(TestConfig)

    @app.route("/_raises/<kind>")
    @api_handler
    def raises(kind):
        if kind == "conflict":
            raise ConflictError("Already registered")
        if kind == "boom":
            raise RuntimeError("store unreachable")
        if kind == "blank":
            raise RuntimeError()
        return jsonify({"message": "ok"}), 200

    return app.test_client()


class TestApiHandler:

    def test_passes_through_success(self, pipeline_client):
        resp = pipeline_client.get("/_raises/none")
        assert resp.status_code == 200

    def test_api_error_maps_to_its_status(self, pipeline_client):
        resp = pipeline_client.get("/_raises/conflict")
        assert resp.status_code == 400
        assert resp.get_json() == {"message": "Already registered"}

    def test_unexpected_error_is_500_with_message(self, pipeline_client):
        resp = pipeline_client.get("/_raises/boom")
        assert resp.status_code == 500
        assert resp.get_json() == {"message": "store unreachable"}

    def test_unexpected_error_without_message_uses_fallback(self, pipeline_client):
        resp = pipeline_client.get("/_raises/blank")
        assert resp.status_code == 500
        assert resp.get_json() == {"message": "Internal Server Error"}
