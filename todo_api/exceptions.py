"""API error types.

Services return None for expected failures; the API layer turns those into
one of these exceptions, and the handlers in ``todo_api.main`` render them as
``{"error": "<message>"}``.
"""
from fastapi import HTTPException, status


class TodoAPIError(HTTPException):
    """Base class for errors with a fixed status code and default message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

    def __init__(self, detail: str = None, headers: dict = None):
        super().__init__(
            status_code=type(self).status_code,
            detail=detail or type(self).message,
            headers=headers,
        )


class ValidationError(TodoAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"


class AuthError(TodoAPIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"

    def __init__(self, detail: str = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class NotFoundError(TodoAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class InternalError(TodoAPIError):
    pass
