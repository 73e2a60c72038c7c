# =============================================================================
# pr_reviewer/api/errors.py
# =============================================================================
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pr_reviewer.core.exceptions import ReviewServiceError
from pr_reviewer.schemas.error import ErrorCode, ErrorDetail, ErrorResponse
from pr_reviewer.core.logger import get_module_logger

logger = get_module_logger(__name__, "errors.log")

ERROR_STATUS_CODES = {
    ErrorCode.INVALID_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorCode.TEAM_EXISTS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PR_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PR_MERGED: status.HTTP_409_CONFLICT,
    ErrorCode.NOT_ASSIGNED: status.HTTP_409_CONFLICT,
    ErrorCode.NO_CANDIDATE: status.HTTP_409_CONFLICT,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

def error_response(code: ErrorCode, message: str) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(code=code, message=message))
    return JSONResponse(
        status_code=ERROR_STATUS_CODES[code],
        content=body.model_dump(mode="json"),
    )

async def review_service_error_handler(request: Request, exc: ReviewServiceError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} -> {exc.code.value}: {exc.message}")
    return error_response(exc.code, exc.message)

async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON, missing fields and bad query params all map to INVALID_REQUEST"""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "invalid request"
    logger.warning(f"{request.method} {request.url.path} -> INVALID_REQUEST: {message}")
    return error_response(ErrorCode.INVALID_REQUEST, message)

def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(ReviewServiceError, review_service_error_handler)
    application.add_exception_handler(RequestValidationError, validation_error_handler)
