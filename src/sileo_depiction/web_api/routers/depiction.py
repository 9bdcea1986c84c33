"""
Depiction Router
================
Endpoints that render depictions from records posted in the body.
"""
import logging
from typing import Any, Dict, Literal

from fastapi import APIRouter, HTTPException

from sileo_depiction.config import settings
from sileo_depiction.depiction import create_depiction
from sileo_depiction.tabs import ChangesTab, ContactTab, DetailsTab, build
from sileo_depiction.web_api.schemas.depiction import DepictionRequest, TabRequestBody

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/")
async def render_depiction(request: DepictionRequest) -> Dict[str, Any]:
    """
    Render the full tabbed depiction (Details, Changes, Contact).

    - **display**: contents of display.json
    - **control**: package id, version and name
    - **screenshots**: screenshot filenames (optional)
    """
    control = request.control.to_record()
    logger.info(f"Rendering depiction for {control.package_name}")
    depiction = create_depiction(
        request.display.to_record(),
        control,
        request.screenshots_record(),
        constants=settings.constants(),
        tint_color=request.tint_color,
        header_image=request.header_image,
    )
    return depiction.to_dict()


@router.post("/tabs/{tab}")
async def render_tab(
    tab: Literal["details", "changes", "contact"],
    request: TabRequestBody,
) -> Dict[str, Any]:
    """
    Render a single depiction tab.
    """
    display = request.display.to_record()
    if tab == "changes":
        return build(ChangesTab(display)).to_dict()

    if request.control is None:
        raise HTTPException(
            status_code=422,
            detail=f"control is required for the {tab} tab",
        )
    control = request.control.to_record()
    logger.info(f"Rendering {tab} tab for {control.package_name}")

    if tab == "details":
        req = DetailsTab(display, control, request.screenshots_record())
    else:
        req = ContactTab(display, control)
    return build(req, settings.constants()).to_dict()
