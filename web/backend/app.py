#!/usr/bin/env python3
"""
TalentMatch API - FastAPI Application

Match scoring between candidates and jobs, with automatic API documentation.

Usage:
    python main.py serve

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError

from core.exceptions import ServiceException
from .config import get_config
from .exceptions import (
    service_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    general_exception_handler
)
from .models.responses import HealthResponse
from .routers import (
    matches_router,
    candidates_router,
    jobs_router
)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="TalentMatch API",
    description="API for scoring candidates against jobs",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Register exception handlers
app.add_exception_handler(ServiceException, service_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(matches_router)
app.include_router(candidates_router)
app.include_router(jobs_router)


@app.get("/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", service="talentmatch-api")


def main():
    """Run the web server."""
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    config = get_config()

    logger.info(f"Starting TalentMatch API on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
