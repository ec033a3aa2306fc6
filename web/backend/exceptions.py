#!/usr/bin/env python3
"""
Error handlers for the web application.

Service exceptions live in core.exceptions; this module maps them to HTTP
responses with a consistent body.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.exceptions import (
    ServiceException,
    CandidateNotFoundException,
    JobNotFoundException,
    JobAccessDeniedException,
    InvalidRequestException
)

logger = logging.getLogger(__name__)

# Operations whose failure bodies still carry an empty result list
_EMPTY_RESULT_KEYS = {
    '/api/matches/compute': 'matches',
    '/top-candidates': 'candidates',
}


def status_code_for(exc: ServiceException) -> int:
    if isinstance(exc, (CandidateNotFoundException, JobNotFoundException)):
        return 404
    if isinstance(exc, JobAccessDeniedException):
        return 403
    if isinstance(exc, InvalidRequestException):
        return 400
    return 500


def _error_body(path: str, error, error_type: str) -> dict:
    body = {
        "success": False,
        "error": error,
        "type": error_type
    }
    for suffix, key in _EMPTY_RESULT_KEYS.items():
        if path.endswith(suffix):
            body[key] = []
    return body


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"Request to {request.url.path} rejected ({status_code}): {exc}")

    return JSONResponse(
        status_code=status_code,
        content=_error_body(request.url.path, str(exc), exc.__class__.__name__)
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request.url.path, exc.detail, "HTTPException")
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content=_error_body(request.url.path, "Internal server error", "InternalError")
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Report malformed request bodies and parameters as 400.
    """
    return JSONResponse(
        status_code=400,
        content=_error_body(request.url.path, jsonable_encoder(exc.errors()), "ValidationError")
    )
