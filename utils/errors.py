class ApiError(Exception):
    """Base error rendered as a JSON failure body by the app-level handler."""

    status_code = 400

    def __init__(self, message, status_code=None, error=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.error = error


class ValidationError(ApiError):
    status_code = 400


class DuplicateError(ApiError):
    status_code = 400


class InvalidIdError(ApiError):
    status_code = 400


class NotFoundError(ApiError):
    status_code = 404
