"""
Pydantic Schemas
===============
Request models for the API.
"""
from .depiction import (
    ControlIn,
    DepictionRequest,
    DisplayIn,
    TabRequestBody,
)

__all__ = ["ControlIn", "DepictionRequest", "DisplayIn", "TabRequestBody"]
