"""View nodes — the output tree handed to Sileo's native depiction renderer.

One frozen dataclass per node kind, each carrying only the fields that
kind uses.  ``to_dict()`` produces the renderer's JSON vocabulary
(``class``, ``tabname``, ``views``, ``yPadding``, ...).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union

from . import SILEO_CLASS, Alignment, ViewKind


def _node(kind: ViewKind, **fields: Any) -> dict[str, Any]:
    d: dict[str, Any] = {"class": SILEO_CLASS[kind]}
    d.update(fields)
    return d


@dataclass(frozen=True, slots=True)
class SpacerView:
    kind: ClassVar[ViewKind] = ViewKind.SPACER

    spacing: int

    def to_dict(self) -> dict[str, Any]:
        return _node(self.kind, spacing=self.spacing)


@dataclass(frozen=True, slots=True)
class ButtonView:
    kind: ClassVar[ViewKind] = ViewKind.BUTTON

    text: str
    action: str
    y_padding: int = 0

    def to_dict(self) -> dict[str, Any]:
        d = _node(self.kind, text=self.text, action=self.action)
        if self.y_padding:
            d["yPadding"] = self.y_padding
        return d


@dataclass(frozen=True, slots=True)
class MarkdownView:
    kind: ClassVar[ViewKind] = ViewKind.MARKDOWN

    markdown: str
    use_spacing: bool = False

    def to_dict(self) -> dict[str, Any]:
        d = _node(self.kind, markdown=self.markdown)
        if self.use_spacing:
            d["useSpacing"] = True
        return d


@dataclass(frozen=True, slots=True)
class HeaderView:
    kind: ClassVar[ViewKind] = ViewKind.HEADER

    title: str

    def to_dict(self) -> dict[str, Any]:
        return _node(self.kind, title=self.title)


@dataclass(frozen=True, slots=True)
class SubheaderView:
    kind: ClassVar[ViewKind] = ViewKind.SUBHEADER

    title: str
    alignment: Alignment = Alignment.LEFT
    use_bold_text: bool = False

    def to_dict(self) -> dict[str, Any]:
        d = _node(self.kind, title=self.title, alignment=int(self.alignment))
        if self.use_bold_text:
            d["useBoldText"] = True
        return d


@dataclass(frozen=True, slots=True)
class TableTextView:
    kind: ClassVar[ViewKind] = ViewKind.TABLE_TEXT

    title: str
    text: str

    def to_dict(self) -> dict[str, Any]:
        return _node(self.kind, title=self.title, text=self.text)


@dataclass(frozen=True, slots=True)
class TableButtonView:
    kind: ClassVar[ViewKind] = ViewKind.TABLE_BUTTON

    title: str
    action: str

    def to_dict(self) -> dict[str, Any]:
        return _node(self.kind, title=self.title, action=self.action)


@dataclass(frozen=True, slots=True)
class SeparatorView:
    kind: ClassVar[ViewKind] = ViewKind.SEPARATOR

    def to_dict(self) -> dict[str, Any]:
        return _node(self.kind)


@dataclass(frozen=True, slots=True)
class DepictionScreenshot:
    """One gallery item.  Not a view node on its own."""

    url: str
    full_size_url: str
    accessibility_text: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "fullSizeURL": self.full_size_url,
            "accessibilityText": self.accessibility_text,
        }


@dataclass(frozen=True, slots=True)
class ScreenshotsView:
    kind: ClassVar[ViewKind] = ViewKind.SCREENSHOTS_GALLERY

    item_corner_radius: int
    item_size: str                 # brace-delimited, e.g. "{160, 346}"
    screenshots: tuple[DepictionScreenshot, ...]

    def to_dict(self) -> dict[str, Any]:
        return _node(
            self.kind,
            itemCornerRadius=self.item_corner_radius,
            itemSize=self.item_size,
            screenshots=[s.to_dict() for s in self.screenshots],
        )


@dataclass(frozen=True, slots=True)
class LayerView:
    kind: ClassVar[ViewKind] = ViewKind.LAYER

    views: tuple[ViewNode, ...]

    def to_dict(self) -> dict[str, Any]:
        return _node(self.kind, views=[v.to_dict() for v in self.views])


@dataclass(frozen=True, slots=True)
class StackView:
    """A vertical stack.  With a ``tab_name`` it is a whole tab."""

    kind: ClassVar[ViewKind] = ViewKind.STACK

    tab_name: str
    views: tuple[ViewNode, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return _node(
            self.kind,
            tabname=self.tab_name,
            views=[v.to_dict() for v in self.views],
        )


ViewNode = Union[
    StackView,
    SpacerView,
    ButtonView,
    MarkdownView,
    HeaderView,
    SubheaderView,
    TableTextView,
    TableButtonView,
    SeparatorView,
    LayerView,
    ScreenshotsView,
]

# A tab is a stack carrying its label.
TabView = StackView


@dataclass(frozen=True, slots=True)
class Depiction:
    """Root of a native depiction: the tab bar holding every tab."""

    tabs: tuple[TabView, ...]
    min_version: str = "0.1"
    tint_color: str | None = None
    header_image: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "minVersion": self.min_version,
            "class": "DepictionTabView",
            "tabs": [t.to_dict() for t in self.tabs],
        }
        if self.tint_color:
            d["tintColor"] = self.tint_color
        if self.header_image:
            d["headerImage"] = self.header_image
        return d
