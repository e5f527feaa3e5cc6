import enum
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, enum.Enum):
    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


# Every ErrorKind must appear here; foreign-key conflicts are a client error.
STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 400,
}


class ApiError(Exception):
    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


def validation_error(message: str) -> ApiError:
    return ApiError(ErrorKind.VALIDATION, message)

def unauthorized(message: str = "Unauthorized") -> ApiError:
    return ApiError(ErrorKind.UNAUTHORIZED, message)

def not_found(message: str) -> ApiError:
    return ApiError(ErrorKind.NOT_FOUND, message)

def conflict(message: str) -> ApiError:
    return ApiError(ErrorKind.CONFLICT, message)


def error_body(*messages: str) -> dict:
    return {"errors": [{"message": m} for m in messages]}


def _format_validation_error(err: dict) -> str:
    loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
    msg = err.get("msg", "Invalid value")
    return f"{loc}: {msg}" if loc else msg


def install_error_handlers(app: FastAPI):
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        messages = [_format_validation_error(e) for e in exc.errors()]
        return JSONResponse(status_code=400, content=error_body(*messages))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.critical(f"Unhandled exception for request {request.method} {request.url.path}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"message": "An internal server error occurred."},
        )
