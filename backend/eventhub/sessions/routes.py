from flask import Blueprint, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required

from eventhub.utils.handlers import api_handler, get_json_body
from eventhub.utils.serializers import serialize_doc, serialize_docs
from eventhub.utils.validators import validate_payload

from .schemas import BookSessionRequest, CancelSessionRequest
from .services import SessionService

sessions_bp = Blueprint("sessions", __name__)


@sessions_bp.route("/book", methods=["POST"])
@jwt_required()
@api_handler
def book_session():
    data = validate_payload(BookSessionRequest, get_json_body())
    session = SessionService.book(get_jwt_identity(), data)

    return jsonify({
        "message": "Session booked successfully",
        "session": serialize_doc(session)
    }), 201


@sessions_bp.route("/cancel", methods=["POST"])
@jwt_required()
@api_handler
def cancel_session():
    data = validate_payload(CancelSessionRequest, get_json_body())
    session = SessionService.cancel(get_jwt_identity(), data.sessionId)

    return jsonify({
        "message": "Session cancelled successfully",
        "session": serialize_doc(session)
    }), 200


@sessions_bp.route("/all", methods=["GET"])
@jwt_required()
@api_handler
def get_all_sessions():
    sessions = SessionService.list_sessions(get_jwt_identity())
    return jsonify({"message": "sessions fetched", "allSessions": serialize_docs(sessions)}), 200


@sessions_bp.route("/<session_id>", methods=["GET"])
@jwt_required()
@api_handler
def get_session_by_id(session_id):
    session = SessionService.get_session(get_jwt_identity(), session_id)
    return jsonify({"message": "session fetched", "session": serialize_doc(session)}), 200
