BAD_REQUEST = "bad_request"
NOT_FOUND = "not_found"
INTERNAL_SERVER_ERROR = "internal_server_error"
SUCCESS = "success"


class AppError(Exception):
    """Base for errors that map onto the response envelope.

    Only the service layer raises these; repository and store code lets the
    raw database errors through.
    """

    status_code: int = 500
    error: str = INTERNAL_SERVER_ERROR
    default_description: str = "Something went wrong"

    def __init__(self, description: str | None = None):
        self.description = description or self.default_description
        super().__init__(self.description)


class BadRequestError(AppError):
    status_code = 400
    error = BAD_REQUEST
    default_description = "invalid request"


class ConflictError(BadRequestError):
    # Duplicates reuse the bad request code on the wire
    default_description = "Asset already exist"


class NotFoundError(AppError):
    status_code = 404
    error = NOT_FOUND
    default_description = "Asset not found"


class InternalServerError(AppError):
    pass
