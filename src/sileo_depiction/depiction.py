"""Whole-depiction assembly: the three tabs under one tab bar."""

from __future__ import annotations

from sileo_depiction.constants import DEFAULT_CONSTANTS, DepictionConstants
from sileo_depiction.model.package import Control, Display, Screenshots
from sileo_depiction.model.views import Depiction
from sileo_depiction.tabs import ChangesTab, ContactTab, DetailsTab, build


def create_depiction(
    display: Display,
    control: Control,
    screenshots: Screenshots,
    *,
    constants: DepictionConstants = DEFAULT_CONSTANTS,
    tint_color: str | None = None,
    header_image: str | None = None,
) -> Depiction:
    """Build the Details, Changes and Contact tabs, in that order."""
    return Depiction(
        tabs=(
            build(DetailsTab(display, control, screenshots), constants),
            build(ChangesTab(display), constants),
            build(ContactTab(display, control), constants),
        ),
        tint_color=tint_color,
        header_image=header_image,
    )
