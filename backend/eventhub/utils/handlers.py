"""Shared request pipeline for route handlers.

Each route does validate -> store call(s) -> respond. ``api_handler`` owns the
last step for failures so routes only describe the happy path:

    @events_bp.route("/create", methods=["POST"])
    @jwt_required()
    @api_handler
    def create_event():
        ...
        return jsonify({"message": "Event created successfully", "event": event}), 201
"""
from functools import wraps

from flask import current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from eventhub.errors import APIError, InternalError


def get_json_body():
    """Request body as a dict; malformed or missing JSON reads as empty."""
    data = request.get_json(silent=True)
    return data if data is not None else {}


def error_response(exc: APIError):
    return jsonify(exc.to_dict()), exc.status_code


def api_handler(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except APIError as exc:
            current_app.logger.info(
                "%s %s -> %d %s", request.method, request.path, exc.status_code, exc.message
            )
            return error_response(exc)
        except HTTPException:
            raise
        except Exception as exc:
            current_app.logger.exception(
                "Unhandled error in %s (%s %s)", view.__name__, request.method, request.path
            )
            return error_response(InternalError(str(exc) or None))

    return wrapper
