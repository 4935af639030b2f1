from datetime import datetime

from bcrypt import checkpw, gensalt, hashpw
from flask import Blueprint, jsonify
from flask_jwt_extended import create_access_token, get_jwt_identity, jwt_required
from pymongo.errors import DuplicateKeyError

from eventhub.errors import ConflictError, NotFoundError, UnauthorizedError
from eventhub.extensions import db
from eventhub.utils.handlers import api_handler, get_json_body
from eventhub.utils.validators import safe_object_id, validate_payload

from .schemas import LoginRequest, RegisterRequest

auth_bp = Blueprint("auth", __name__)


def public_user(user):
    return {
        "_id": str(user["_id"]),
        "name": user["name"],
        "email": user["email"]
    }


@auth_bp.route("/register", methods=["POST"])
@api_handler
def register():
    data = validate_payload(RegisterRequest, get_json_body(), message="Missing required fields")
    email = data.email.strip().lower()

    if db.users.find_one({"email": email}):
        raise ConflictError("User already exists", status_code=409)

    user = {
        "name": data.name,
        "email": email,
        "passwordHash": hashpw(data.password.encode(), gensalt()),
        "createdAt": datetime.utcnow()
    }

    try:
        res = db.users.insert_one(user)
    except DuplicateKeyError:
        raise ConflictError("User already exists", status_code=409) from None
    user["_id"] = res.inserted_id

    return jsonify({
        "message": "User registered successfully",
        "access_token": create_access_token(identity=str(res.inserted_id)),
        "user": public_user(user)
    }), 201


@auth_bp.route("/login", methods=["POST"])
@api_handler
def login():
    data = validate_payload(LoginRequest, get_json_body())
    user = db.users.find_one({"email": data.email.strip().lower()})

    if not user or not checkpw(data.password.encode(), user["passwordHash"]):
        raise UnauthorizedError("Invalid credentials")

    return jsonify({
        "message": "Logged in successfully",
        "access_token": create_access_token(identity=str(user["_id"])),
        "user": public_user(user)
    }), 200


@auth_bp.route("/me", methods=["GET"])
@jwt_required()
@api_handler
def me():
    user_oid = safe_object_id(get_jwt_identity())
    user = db.users.find_one({"_id": user_oid}) if user_oid else None

    if not user:
        raise NotFoundError("User not found")

    return jsonify({"message": "user fetched", "user": public_user(user)}), 200
