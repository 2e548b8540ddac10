import logging
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from videotube.utility.errors import ApiError
from videotube.utility.response import api_error

logger = logging.getLogger(__name__)

UNPROCESSABLE_CONTENT = 422


async def handle_api_error(request: Request, exc: ApiError):
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=api_error(exc.message, exc.status_code))


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=api_error(str(exc.detail), exc.status_code),
        headers=getattr(exc, "headers", None)
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    messages = [f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()]
    return JSONResponse(
        status_code=UNPROCESSABLE_CONTENT,
        content=api_error("; ".join(messages) or "Invalid request", UNPROCESSABLE_CONTENT)
    )


def add_exception_handlers(application):
    application.add_exception_handler(ApiError, handle_api_error)
    application.add_exception_handler(StarletteHTTPException, handle_http_exception)
    application.add_exception_handler(RequestValidationError, handle_validation_error)
