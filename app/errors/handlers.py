from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR
from sqlalchemy.exc import IntegrityError
from loguru import logger

def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )

def generic_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred."},
    )
def database_integrity_handler(request: Request, exc: IntegrityError):
    """
    Handle SQLAlchemy integrity constraint violations.

    Converts database errors into user-friendly responses, such as a
    question pointing at an interview that does not exist.

    Args:
        request: FastAPI request instance
        exc: IntegrityError from SQLAlchemy

    Returns:
        JSONResponse with 400 status and user-friendly error message
    """
    error_msg = str(exc.orig).lower()
    logger.warning(f"Integrity error on {request.url.path}: {error_msg}")

    message = "Data constraint violation"
    if "foreign key" in error_msg:
        message = "Referenced interview does not exist"

    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "error": "Database error",
            "message": message,
            "hint": "Please check your data and try again"
        }
    )
