"""Tab assembler — package records in, one depiction tab out.

Usage::

    from sileo_depiction.tabs import DetailsTab, build

    tab = build(DetailsTab(display, control, screenshots))
    tab.to_dict()   # {"class": "DepictionStackView", "tabname": "Details", ...}

Every function here is pure: the same records always produce a
deep-equal tree.  Strings from the records are interpolated into
``mailto:`` / ``https:`` actions verbatim; callers pre-escape them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from sileo_depiction.constants import (
    DEFAULT_CONSTANTS,
    DONATE_Y_PADDING,
    ITEM_CORNER_RADIUS,
    ITEM_SIZE,
    SCREENSHOT_ACCESSIBILITY_TEXT,
    SPACER_HEIGHT,
    DepictionConstants,
)
from sileo_depiction.model import Alignment, TabName
from sileo_depiction.model.package import ChangelogEntry, Control, Display, Screenshots
from sileo_depiction.model.views import (
    ButtonView,
    DepictionScreenshot,
    HeaderView,
    LayerView,
    MarkdownView,
    ScreenshotsView,
    SeparatorView,
    SpacerView,
    StackView,
    SubheaderView,
    TableButtonView,
    TableTextView,
    TabView,
    ViewNode,
)

# Sentinel for "no screenshots" (last path segment of the first entry).
NO_SCREENSHOTS = "*"


# ── requests ────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class DetailsTab:
    display: Display
    control: Control
    screenshots: Screenshots


@dataclass(frozen=True, slots=True)
class ChangesTab:
    display: Display


@dataclass(frozen=True, slots=True)
class ContactTab:
    display: Display
    control: Control


TabRequest = Union[DetailsTab, ChangesTab, ContactTab]


def build(
    request: TabRequest,
    constants: DepictionConstants = DEFAULT_CONSTANTS,
) -> TabView:
    """Assemble the tab selected by *request*."""
    if isinstance(request, DetailsTab):
        return _build_details(
            request.display, request.control, request.screenshots, constants
        )
    if isinstance(request, ChangesTab):
        return _build_changes(request.display)
    if isinstance(request, ContactTab):
        return _build_contact(request.display)
    raise TypeError(f"unsupported tab request: {type(request).__name__}")


# ── tabs ────────────────────────────────────────────────────────────


def _twitter_url(display: Display) -> str:
    return f"https://twitter.com/{display.contact.twitter}"


def _build_details(
    display: Display,
    control: Control,
    screenshots: Screenshots,
    constants: DepictionConstants,
) -> TabView:
    views: list[ViewNode] = [
        SpacerView(spacing=SPACER_HEIGHT),
        ButtonView(
            text=constants.donate_text,
            action=constants.donate_link,
            y_padding=DONATE_Y_PADDING,
        ),
    ]
    views += screenshots_section(control.package_name, screenshots, constants)
    views.append(MarkdownView(markdown=display.information.description))
    views += source_code_section(display.information.source_code_link)
    views += [
        HeaderView(title="Extra information"),
        TableTextView(title="Version", text=control.version),
        TableButtonView(title="Twitter", action=_twitter_url(display)),
        TableButtonView(
            title="Email",
            action=f"mailto:{display.contact.email}?subject={control.name}",
        ),
        TableButtonView(
            title="View web depiction",
            action=f"{constants.web_depiction_url}?packageId={control.package_name}",
        ),
    ]
    return StackView(tab_name=TabName.DETAILS.value, views=tuple(views))


def _build_changes(display: Display) -> TabView:
    views: list[ViewNode] = []
    for entry in reversed(display.changelog):
        views += changelog_row(entry)
    return StackView(tab_name=TabName.CHANGES.value, views=tuple(views))


def _build_contact(display: Display) -> TabView:
    return StackView(
        tab_name=TabName.CONTACT.value,
        views=(
            TableButtonView(title="Email", action=f"mailto:{display.contact.email}"),
            TableButtonView(title="Twitter", action=_twitter_url(display)),
        ),
    )


# ── computed sections ───────────────────────────────────────────────


def changelog_row(entry: ChangelogEntry) -> tuple[ViewNode, ...]:
    """Version/date header, the markdown notes, then a spacer."""
    return (
        LayerView(
            views=(
                SubheaderView(
                    title=entry.version_number,
                    alignment=Alignment.LEFT,
                    use_bold_text=True,
                ),
                SubheaderView(title=entry.date, alignment=Alignment.RIGHT),
            )
        ),
        MarkdownView(markdown=entry.changes, use_spacing=True),
        SpacerView(spacing=SPACER_HEIGHT),
    )


def source_code_section(link: str) -> tuple[ViewNode, ...]:
    if not link:
        return (SeparatorView(),)
    return (
        SeparatorView(),
        TableButtonView(title="View source code", action=link),
        SeparatorView(),
    )


def screenshots_section(
    package_id: str,
    screenshots: Screenshots,
    constants: DepictionConstants = DEFAULT_CONSTANTS,
) -> tuple[ViewNode, ...]:
    """Zero or one gallery node.

    Only the first entry is checked for the sentinel; everything after it
    is rendered as-is.
    """
    entries = screenshots.screenshots
    if not entries or entries[0].split("/")[-1] == NO_SCREENSHOTS:
        return ()

    items = []
    for entry in entries:
        url = f"{constants.api}/{package_id}/screenshots/{entry}"
        items.append(
            DepictionScreenshot(
                url=url,
                full_size_url=url,
                accessibility_text=SCREENSHOT_ACCESSIBILITY_TEXT,
            )
        )
    return (
        ScreenshotsView(
            item_corner_radius=ITEM_CORNER_RADIUS,
            item_size=ITEM_SIZE,
            screenshots=tuple(items),
        ),
    )
