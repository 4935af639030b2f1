from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import get_jwt_identity, jwt_required

from eventhub.utils.handlers import api_handler, get_json_body
from eventhub.utils.serializers import serialize_doc, serialize_docs
from eventhub.utils.validators import validate_payload

from .schemas import CreateEventRequest, EventIdRequest, UpdateEventRequest
from .services import EventService

events_bp = Blueprint("events", __name__)


@events_bp.route("/create", methods=["POST"])
@jwt_required()
@api_handler
def create_event():
    data = validate_payload(CreateEventRequest, get_json_body())
    event = EventService.create_event(get_jwt_identity(), data)

    return jsonify({
        "message": "Event created successfully",
        "event": serialize_doc(event)
    }), 201


@events_bp.route("/all", methods=["GET"])
@jwt_required()
@api_handler
def get_all_events():
    all_events = EventService.list_events()
    return jsonify({"message": "events fetched", "allEvents": serialize_docs(all_events)}), 200


@events_bp.route("/participants", methods=["GET", "POST"])
@jwt_required()
@api_handler
def get_all_participants():
    payload = get_json_body()
    # GET clients usually can't send a body
    if isinstance(payload, dict) and "eventId" not in payload and "eventId" in request.args:
        payload = {"eventId": request.args["eventId"]}

    data = validate_payload(EventIdRequest, payload, message="Invalid update data")
    participants = EventService.list_participants(data.eventId)

    return jsonify({
        "message": "all participants fetched",
        "allParticipants": serialize_docs(participants)
    }), 200


@events_bp.route("/<event_id>", methods=["GET"])
@jwt_required()
@api_handler
def get_event_by_id(event_id):
    event = EventService.get_event(event_id, not_found_status=400)
    return jsonify({"message": "event fetched", "event": serialize_doc(event)}), 200


@events_bp.route("/update", methods=["PUT", "POST"])
@jwt_required()
@api_handler
def update_event():
    data = validate_payload(UpdateEventRequest, get_json_body(), message="Invalid update data")
    event = EventService.update_event(
        get_jwt_identity(),
        data,
        organizer_only=current_app.config["EVENT_UPDATE_ORGANIZER_ONLY"],
    )

    return jsonify({
        "message": "Event updated successfully",
        "event": serialize_doc(event)
    }), 200


@events_bp.route("/delete", methods=["DELETE", "POST"])
@jwt_required()
@api_handler
def delete_event():
    data = validate_payload(EventIdRequest, get_json_body(), message="Invalid update data")
    deleted = EventService.delete_event(get_jwt_identity(), data.eventId)
    return jsonify({"message": "event deleted", "deletedEvent": deleted}), 200


@events_bp.route("/register", methods=["POST"])
@jwt_required()
@api_handler
def register_event():
    data = validate_payload(EventIdRequest, get_json_body(), message="Invalid update data")
    participant = EventService.register(get_jwt_identity(), data.eventId)

    return jsonify({
        "message": "Registered successfully",
        "participant": serialize_doc(participant)
    }), 201


@events_bp.route("/unregister", methods=["POST"])
@jwt_required()
@api_handler
def delete_registration():
    data = validate_payload(EventIdRequest, get_json_body(), message="Invalid update data")
    outcome = EventService.unregister(get_jwt_identity(), data.eventId)

    # 201 kept for compatibility with existing clients
    return jsonify({"message": "cancelled successfully", "participant": outcome}), 201
