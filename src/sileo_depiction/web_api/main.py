"""
FastAPI Application
==================
Main entry point for the depiction API.

Run with:
    uvicorn sileo_depiction.web_api.main:app --reload
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sileo_depiction import __version__
from sileo_depiction.config import settings
from sileo_depiction.web_api.routers import depiction, health

# Create application
app = FastAPI(
    title="Sileo Depiction API",
    description="Native Sileo depictions from package metadata",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(depiction.router, prefix="/depiction", tags=["Depiction"])


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "Sileo Depiction API",
        "version": __version__,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


# For running directly: python -m sileo_depiction.web_api.main
if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
