import os
from datetime import timedelta
from pathlib import Path
from dotenv import load_dotenv

# Load .env from the package directory or the backend directory
env_path = Path(__file__).parent / '.env'
if not env_path.exists():
    env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'
    JWT_SECRET_KEY = os.environ.get('JWT_SECRET_KEY') or SECRET_KEY
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(
        hours=int(os.environ.get('JWT_ACCESS_TOKEN_EXPIRES_HOURS', 24))
    )

    MONGO_URI = os.getenv('MONGO_URI', 'mongodb://localhost:27017/eventhub')
    # Overrides the database named in MONGO_URI when set
    MONGO_DB_NAME = os.getenv('MONGO_DB_NAME')
    MONGO_SERVER_SELECTION_TIMEOUT_MS = int(os.getenv('MONGO_SERVER_SELECTION_TIMEOUT_MS', 5000))

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv('CORS_ORIGINS', 'http://localhost:5173,http://localhost:8080').split(',')
        if origin.strip()
    ]

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # When off, any authenticated identity may update any event
    EVENT_UPDATE_ORGANIZER_ONLY = _env_flag('EVENT_UPDATE_ORGANIZER_ONLY', True)


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    JWT_SECRET_KEY = 'test-jwt-secret-key-with-enough-length'
    MONGO_URI = 'mongodb://localhost:27017/eventhub_test'
    MONGO_DB_NAME = 'eventhub_test'
    LOG_LEVEL = 'DEBUG'
    EVENT_UPDATE_ORGANIZER_ONLY = True
