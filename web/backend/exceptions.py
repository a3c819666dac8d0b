#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class UserNotFoundException(ServiceException):
    """Raised when a user is not found."""
    pass


class MatchNotFoundException(ServiceException):
    """Raised when a match is not found."""
    pass


class InvalidMatchStatusException(ServiceException):
    """Raised when a match decision is outside connected/skipped."""
    pass


class InvalidQuizAnswersException(ServiceException):
    """Raised when quiz answers cannot be scored."""
    pass


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
    status_code = 500
    if isinstance(exc, (UserNotFoundException, MatchNotFoundException)):
        status_code = 404
        logger.warning(f"Not found in {request.url.path}: {exc}")
    elif isinstance(exc, (InvalidMatchStatusException, InvalidQuizAnswersException)):
        status_code = 422
        logger.warning(f"Rejected request in {request.url.path}: {exc}")
    else:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__
        }
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
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        }
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
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )
