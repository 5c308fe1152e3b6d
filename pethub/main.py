"""Main FastAPI application for the PetHub backend."""
from fastapi import FastAPI
import logging

from pethub import __version__
from pethub.db.init import init_db
from pethub.middleware.cors import add_cors_middleware
from pethub.routers import (
    auth_router,
    users_router,
    pets_router,
    tasks_router,
    medical_records_router,
    posts_router,
    comments_router,
    replies_router,
    shops_router,
    notifications_router,
    admin_router,
)
from pethub.utils.logger import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="PetHub API",
    description="REST API for pets, care tasks, medical records, the social feed and the shop map",
    version=__version__,
)

add_cors_middleware(app)


@app.on_event("startup")
async def startup_event():
    """Initialize database on startup."""
    try:
        init_db()
        logger.info("[SUCCESS] Database tables initialized successfully.")
    except Exception as e:
        # /health still answers; queries fail until the database is reachable
        logger.error("[WARNING] Database initialization failed: %s", e)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/")
async def root():
    """Root endpoint - API welcome message."""
    return {
        "message": "Welcome to the PetHub API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


app.include_router(auth_router, prefix="/auth")
app.include_router(users_router, prefix="/user")
app.include_router(pets_router, prefix="/pet")
app.include_router(tasks_router, prefix="/task")
app.include_router(medical_records_router, prefix="/medical-record")
# Older mobile builds still call the vaccination paths
app.include_router(medical_records_router, prefix="/vaccination", include_in_schema=False)
app.include_router(posts_router, prefix="/post")
app.include_router(comments_router, prefix="/comment")
app.include_router(replies_router, prefix="/reply")
app.include_router(shops_router, prefix="/shop")
app.include_router(notifications_router, prefix="/notification")
app.include_router(admin_router, prefix="/admin")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "pethub.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
