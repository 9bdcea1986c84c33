"""
API Routers
===========
Each router handles a specific domain of the API.
"""
from . import depiction, health

__all__ = ["depiction", "health"]
