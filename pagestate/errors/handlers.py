"""Exception handlers for applications that expose pagestate over HTTP."""

import logging
from fastapi import Request
from fastapi.responses import JSONResponse

from .problem_details import ProblemDetailException, create_problem_response

logger = logging.getLogger(__name__)


async def problem_detail_exception_handler(
    request: Request, 
    exc: ProblemDetailException
) -> JSONResponse:
    """Handle ProblemDetailException instances, pagination errors included."""
    logger.info(
        f"Problem detail exception: {exc.status} - {exc.title}",
        extra={
            "status_code": exc.status,
            "path": str(request.url.path),
            "method": request.method,
            "detail": exc.detail,
            "kind": getattr(exc, "kind", None)
        }
    )
    return exc.to_response(request)


async def general_exception_handler(
    request: Request, 
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__} - {str(exc)}",
        extra={
            "path": str(request.url.path),
            "method": request.method,
            "exception_type": type(exc).__name__
        },
        exc_info=True
    )
    
    # Don't expose internal error details in production
    return create_problem_response(
        status=500,
        title="Internal Server Error",
        detail="An unexpected error occurred",
        request=request
    )


def register_exception_handlers(app):
    """Register pagestate exception handlers with a FastAPI app."""
    
    # Problem Detail exceptions, including InvalidToken, NoPreviousPage and QueryFailed
    app.add_exception_handler(ProblemDetailException, problem_detail_exception_handler)
    
    # Catch-all for unexpected exceptions
    app.add_exception_handler(Exception, general_exception_handler)
