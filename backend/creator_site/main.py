"""FastAPI main application."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from creator_site.config import settings
from creator_site.database import init_db
from creator_site.exceptions import DirectoryError, ValidationError, NotFoundError, StorageError
from creator_site.routers import health, social_media, brands, site_content, contact
from creator_site.services.logging_service import logger

# Create FastAPI application
app = FastAPI(
    title="Creator Site API",
    description="Social links, brand partnerships, site content and contact form for a creator profile page",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_STATUS_CODES = {
    ValidationError: 422,
    NotFoundError: 404,
    StorageError: 503,
}


@app.exception_handler(DirectoryError)
async def directory_error_handler(request: Request, exc: DirectoryError):
    """Map directory errors onto HTTP status codes."""
    status_code = ERROR_STATUS_CODES.get(type(exc), 500)
    if status_code >= 500:
        logger.error(
            "Directory operation failed",
            method=request.method,
            path=request.url.path,
            error_type=exc.error_type
        )
    return JSONResponse(status_code=status_code, content=exc.to_dict())


@app.on_event("startup")
async def startup_event():
    """Initialize application on startup."""
    # Create tables if they don't exist
    init_db()

    logger.info(
        "Creator site API started",
        environment=settings.ENVIRONMENT,
        database=settings.DATABASE_URL.split("@")[-1] if "@" in settings.DATABASE_URL else "configured"
    )


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Creator Site API",
        "version": settings.APP_VERSION,
        "status": "operational",
        "documentation": "/docs"
    }


# Include routers
app.include_router(health.router, tags=["Health & Monitoring"])
app.include_router(social_media.router, prefix="/api/social-media", tags=["Social Media"])
app.include_router(brands.router, prefix="/api/brands", tags=["Brands"])
app.include_router(site_content.router, prefix="/api/site-content", tags=["Site Content"])
app.include_router(contact.router, prefix="/api/contact", tags=["Contact"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "creator_site.main:app",
        host="0.0.0.0",
        port=settings.SERVER_PORT,
        reload=settings.DEBUG
    )
