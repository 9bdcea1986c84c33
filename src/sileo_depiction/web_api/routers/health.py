"""
Health Check Router
==================
Endpoints for health checks and readiness probes.
"""
from fastapi import APIRouter

from sileo_depiction import __version__
from sileo_depiction.contracts.load import DEFAULT_SCHEMA, load_schema

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def readiness_check():
    """
    Readiness check endpoint.
    Ready once the bundled output schema can be loaded.
    """
    load_schema(DEFAULT_SCHEMA)
    return {"status": "ready"}
