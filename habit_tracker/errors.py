"""Error kinds raised by the services.

Each class carries the HTTP status it maps to; the app registers a single
handler for :class:`AppError` that turns any of them into a JSON response.
"""

from fastapi import status


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Unexpected error occurred"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        self.message = message or self.message


# ----- 400 -----
class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class InvalidDate(ValidationError):
    message = "Invalid date provided, expected YYYY-MM-DD"


class MissingRangeBound(ValidationError):
    message = "Both start and end must be provided"


class InvalidRange(ValidationError):
    message = "start must be on or before end"


class InvalidRangeDays(ValidationError):
    message = "days must be a positive integer"


# ----- 401 -----
class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentication required"


class MissingCredentials(AuthError):
    message = "Missing or malformed Authorization header"


class InvalidCredentials(AuthError):
    message = "Invalid credentials"


class InvalidOrExpiredToken(AuthError):
    message = "Invalid or expired token"


# ----- 404 -----
class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Resource not found"


class HabitNotFound(NotFound):
    message = "Habit not found"


class CheckinNotFound(NotFound):
    message = "Habit check-in not found"


class TodoNotFound(NotFound):
    message = "Todo not found"


class TaskNotFound(NotFound):
    message = "Task not found"


# ----- 409 -----
class Conflict(AppError):
    status_code = status.HTTP_409_CONFLICT
    message = "Conflict"


class EmailAlreadyRegistered(Conflict):
    message = "Email already registered"
