from pymongo import ASCENDING, MongoClient

_client = None
_db = None


def init_mongo(app):
    global _client, _db
    _client = MongoClient(
        app.config["MONGO_URI"],
        serverSelectionTimeoutMS=app.config["MONGO_SERVER_SELECTION_TIMEOUT_MS"],
    )

    db_name = app.config.get("MONGO_DB_NAME")
    if db_name:
        _db = _client[db_name]
    else:
        # get_default_database() extracts the DB name from the URI (e.g. /eventhub)
        _db = _client.get_default_database(default="eventhub")

    ensure_indexes(_db)
    app.logger.info("[MongoDB] Connected to database: %s", _db.name)


def ensure_indexes(database):
    """Create the indexes the handlers rely on. Safe to call repeatedly."""
    # One registration per (event, user); backs the "Already registered" pre-check
    database.participants.create_index(
        [("eventId", ASCENDING), ("userId", ASCENDING)],
        unique=True,
        name="uniq_event_user",
    )
    database.sessions.create_index([("userId", ASCENDING), ("date", ASCENDING)])
    database.users.create_index("email", unique=True)


def get_db():
    """Get the database instance. Must be called after init_mongo."""
    return _db


def get_client():
    """Get the MongoDB client instance. Must be called after init_mongo."""
    return _client


# Proxy so modules can import `db` before init_mongo has run
class _DBProxy:
    def __getattr__(self, name):
        if _db is None:
            raise RuntimeError("Database not initialized. Call init_mongo first.")
        return getattr(_db, name)

    def __getitem__(self, name):
        if _db is None:
            raise RuntimeError("Database not initialized. Call init_mongo first.")
        return _db[name]

    def __bool__(self):
        return _db is not None


db = _DBProxy()
