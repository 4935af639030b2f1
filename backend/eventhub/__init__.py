import logging

from flask import Flask, jsonify
from flask_cors import CORS
from flask_jwt_extended import JWTManager

from eventhub.config import Config
from eventhub.extensions import init_mongo

jwt = JWTManager()


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO))

    # Disable strict slashes to prevent 308 redirects that break CORS preflight
    app.url_map.strict_slashes = False

    # Allow the web frontend to talk to Flask
    CORS(
        app,
        supports_credentials=True,
        resources={r"/*": {"origins": app.config["CORS_ORIGINS"]}}
    )

    # Init extensions
    init_mongo(app)
    jwt.init_app(app)

    # Register API blueprints
    from eventhub.auth.routes import auth_bp
    from eventhub.events.routes import events_bp
    from eventhub.sessions.routes import sessions_bp

    app.register_blueprint(auth_bp, url_prefix='/api/v1/auth')
    app.register_blueprint(events_bp, url_prefix='/api/v1/event')
    app.register_blueprint(sessions_bp, url_prefix='/api/v1/session')

    return app


# Rejected tokens never reach a handler; answer in the same {"message": ...} shape
@jwt.unauthorized_loader
def missing_token(reason):
    return jsonify({"message": f"Unauthorized: {reason}"}), 401


@jwt.invalid_token_loader
def invalid_token(reason):
    return jsonify({"message": f"Invalid token: {reason}"}), 401


@jwt.expired_token_loader
def expired_token(jwt_header, jwt_payload):
    return jsonify({"message": "Token has expired"}), 401
