"""Map storefront failures onto HTTP responses.

Error bodies look like ``{"error": "<message>", "details": {...}}``.
"""

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.exceptions import ForbiddenError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _first_message(messages, default):
    if isinstance(messages, dict):
        for value in messages.values():
            if isinstance(value, (list, tuple)) and value:
                return str(value[0])
            if value:
                return str(value)
    elif messages:
        return str(messages)
    return default


def _error_response(status_code, message, details=None):
    content = {"error": message}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ObjectNotFoundError)
    async def not_found(request: Request, exc: ObjectNotFoundError):
        messages = getattr(exc, "messages", None)
        if isinstance(messages, dict):
            return _error_response(404, _first_message(messages, "Not found"), messages)
        return _error_response(404, str(exc) or "Not found")

    @app.exception_handler(ForbiddenError)
    async def forbidden(request: Request, exc: ForbiddenError):
        return _error_response(403, "Forbidden", exc.messages)

    @app.exception_handler(ValidationError)
    async def validation_failed(request: Request, exc: ValidationError):
        return _error_response(400, _first_message(exc.messages, "Validation failed"), exc.messages)

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        details = {".".join(str(part) for part in err["loc"]): [err["msg"]] for err in exc.errors()}
        return _error_response(400, _first_message(details, "Invalid request"), details)

    @app.exception_handler(HTTPException)
    async def http_error(request: Request, exc: HTTPException):
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unexpected(request: Request, exc: Exception):
        logger.exception("unexpected_error", path=request.url.path)
        return _error_response(500, "Internal server error")
