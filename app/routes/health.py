"""
Health check endpoint for the application.

Description:
This module defines a FastAPI route for checking the health status of the
application: database connectivity and whether the hosted model is configured.

Arguments:
- request: An instance of Request, required for rate limiting.
- db: The request-scoped database session.

Returns:
- A JSON response such as {"status": "ok", "database": "ok", "llm_provider": "heuristic"}.

Dependencies:
- fastapi: For creating the FastAPI application and defining routes.
- sqlalchemy: For the connectivity check.
- app.core.route_limiters: For rate limiting functionality.
- app.schemas.health_response: For defining the response model.
- loguru: For logging information about the health check endpoint.

Author: @kcaparas1630

"""
import os
from fastapi import APIRouter, Depends, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.route_limiters import limiter
from app.database import get_db_session
from app.schemas.health_response import HealthResponse
from loguru import logger

router = APIRouter(
    prefix="/api",
    tags=["health"],
    responses={404: {"description": "Not found"}}
)

@router.get("/health", response_model=HealthResponse)
@limiter.limit("10/minute")  # Custom limit for this endpoint
async def health(request: Request, db: Session = Depends(get_db_session)):
    """
    Request parameter is required for rate limiting.
    """
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.error(f"Health check database query failed: {e}")
        database = "unavailable"

    llm_provider = "openrouter" if os.getenv("OPENROUTER_API_KEY") else "heuristic"
    logger.info(f"Health check endpoint called (database={database}, llm_provider={llm_provider})")

    return {
        "status": "ok" if database == "ok" else "degraded",
        "database": database,
        "llm_provider": llm_provider
    }
