"""Error taxonomy shared by every blueprint.

Handlers raise these; ``eventhub.utils.handlers.api_handler`` turns them into
JSON responses:

    raise NotFoundError("Event not found")
    raise NotFoundError("event not found", status_code=400)
    raise ValidationError("Invalid input", errors=[{"field": "title", "message": "Field required"}])
"""


class APIError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message=None, status_code=None, errors=None):
        self.message = message or self.__class__.message
        if status_code is not None:
            self.status_code = status_code
        self.errors = errors
        super().__init__(self.message)

    def to_dict(self):
        body = {"message": self.message}
        if self.errors is not None:
            body["errors"] = self.errors
        return body


class ValidationError(APIError):
    """Malformed or missing input (400)."""

    status_code = 400
    message = "Invalid input"


class NotFoundError(APIError):
    """Referenced entity is absent (404 unless the endpoint says otherwise)."""

    status_code = 404
    message = "Not found"


class ConflictError(APIError):
    """Duplicate of an existing record (400)."""

    status_code = 400
    message = "Already exists"


class UnauthorizedError(APIError):
    """Missing or bad credentials (401)."""

    status_code = 401
    message = "Unauthorized"


class ForbiddenError(APIError):
    """Authenticated, but not allowed to touch this record (403)."""

    status_code = 403
    message = "Forbidden"


class InternalError(APIError):
    """Unexpected store or runtime failure (500)."""

    status_code = 500
    message = "Internal Server Error"
