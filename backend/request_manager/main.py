"""FastAPI application entry point.

Run with::

    uvicorn request_manager.main:app --reload
"""
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from request_manager.config import settings
from request_manager.database import Base, engine
from request_manager.logging_config import setup_logging
from request_manager.middleware.error_handling import ErrorHandlingMiddleware, request_validation_handler

# Import routers
from request_manager.routers import users, service_requests

# Import all models so Base.metadata knows about them
from request_manager.models.user import User                       # noqa: F401
from request_manager.models.service_request import ServiceRequest  # noqa: F401


def create_app() -> FastAPI:
    """Build the app: logging, CORS, error mapping, routers and the SQLite startup hook."""
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Internal service requests: creation, assignment to support staff, status tracking",
        version=settings.API_VERSION,
    )

    # CORS is added last so it also wraps the error envelopes
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS.split(","),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Register routers
    app.include_router(users.router, prefix="/api/users", tags=["Users"])
    app.include_router(service_requests.router, prefix="/api/servicerequests", tags=["ServiceRequests"])

    @app.on_event("startup")
    def on_startup():
        """Create database tables on startup (for SQLite dev mode)."""
        if settings.DATABASE_URL.startswith("sqlite"):
            Base.metadata.create_all(bind=engine)

    @app.get("/api/health")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()
