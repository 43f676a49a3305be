
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class TaskTrackerError(Exception):
    """Base error; ``status_code`` is the HTTP status the API answers with."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TaskTrackerError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(TaskTrackerError):
    status_code = status.HTTP_404_NOT_FOUND


class StorageError(TaskTrackerError):
    pass


def _describe_request_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    return f"{location}: {message}" if location else message


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(TaskTrackerError)
    async def handle_tracker_error(request: Request, exc: TaskTrackerError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    # Requests FastAPI rejects before reaching a handler get the same envelope
    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _describe_request_error(exc)},
        )
