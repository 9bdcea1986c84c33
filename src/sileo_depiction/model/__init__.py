"""Enums shared across the view tree and the tab assembler."""

from __future__ import annotations

from enum import Enum, IntEnum


class ViewKind(str, Enum):
    """Canonical view node tags."""

    STACK = "stack"
    SPACER = "spacer"
    BUTTON = "button"
    MARKDOWN = "markdown"
    HEADER = "header"
    SUBHEADER = "subheader"
    TABLE_TEXT = "table-text"
    TABLE_BUTTON = "table-button"
    SEPARATOR = "separator"
    LAYER = "layer"
    SCREENSHOTS_GALLERY = "screenshots-gallery"


# Wire names understood by Sileo's native depiction renderer.
SILEO_CLASS: dict[ViewKind, str] = {
    ViewKind.STACK: "DepictionStackView",
    ViewKind.SPACER: "DepictionSpacerView",
    ViewKind.BUTTON: "DepictionButtonView",
    ViewKind.MARKDOWN: "DepictionMarkdownView",
    ViewKind.HEADER: "DepictionHeaderView",
    ViewKind.SUBHEADER: "DepictionSubheaderView",
    ViewKind.TABLE_TEXT: "DepictionTableTextView",
    ViewKind.TABLE_BUTTON: "DepictionTableButtonView",
    ViewKind.SEPARATOR: "DepictionSeparatorView",
    ViewKind.LAYER: "DepictionLayerView",
    ViewKind.SCREENSHOTS_GALLERY: "DepictionScreenshotsView",
}


class TabName(str, Enum):
    """The three tab labels a depiction carries."""

    DETAILS = "Details"
    CHANGES = "Changes"
    CONTACT = "Contact"


class Alignment(IntEnum):
    """Horizontal text alignment as Sileo encodes it."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2
