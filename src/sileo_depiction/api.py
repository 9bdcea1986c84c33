"""
sileo_depiction.api
===================

Programmatic entrypoints for rendering depictions from package folders.

Goals:
  - No argparse / HTTP dependencies
  - Stable, JSON-friendly outputs that match ``depiction.schema.json``

Usage::

    from sileo_depiction.api import render_depiction, render_tab

    depiction = render_depiction("packages/com.example.tweak")
    changes = render_tab("packages/com.example.tweak", "changes")
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sileo_depiction.constants import DEFAULT_CONSTANTS, DepictionConstants
from sileo_depiction.contracts.load import validate_instance
from sileo_depiction.depiction import create_depiction
from sileo_depiction.loaders import PackageRecords, load_package
from sileo_depiction.model import TabName
from sileo_depiction.tabs import ChangesTab, ContactTab, DetailsTab, TabRequest, build

__all__ = [
    "TAB_CHOICES",
    "make_request",
    "render_depiction",
    "render_tab",
    "validate_instance",
]

# Lower-case selectors accepted by the CLI and the HTTP API.
TAB_CHOICES = tuple(t.value.lower() for t in TabName)


def make_request(tab: str | TabName, records: PackageRecords) -> TabRequest:
    """Pick the request variant for *tab* and fill it from *records*.

    Raises
    ------
    ValueError
        If *tab* is not one of :data:`TAB_CHOICES`.
    """
    key = tab.value if isinstance(tab, TabName) else tab
    key = key.lower()
    if key == "details":
        return DetailsTab(records.display, records.control, records.screenshots)
    if key == "changes":
        return ChangesTab(records.display)
    if key == "contact":
        return ContactTab(records.display, records.control)
    raise ValueError(f"unknown tab {tab!r}; expected one of {', '.join(TAB_CHOICES)}")


# ── render_tab ──────────────────────────────────────────────────────


def render_tab(
    package_dir: str | Path,
    tab: str | TabName,
    *,
    constants: DepictionConstants = DEFAULT_CONSTANTS,
) -> dict[str, Any]:
    """Load *package_dir* and render a single tab as renderer JSON.

    Raises
    ------
    FileNotFoundError
        If the folder or one of its required records is missing.
    RecordError
        If a record is malformed.
    ValueError
        If *tab* is unknown.
    """
    records = load_package(package_dir)
    return build(make_request(tab, records), constants).to_dict()


# ── render_depiction ────────────────────────────────────────────────


def render_depiction(
    package_dir: str | Path,
    *,
    constants: DepictionConstants = DEFAULT_CONSTANTS,
    tint_color: str | None = None,
    header_image: str | None = None,
) -> dict[str, Any]:
    """Load *package_dir* and render the full tabbed depiction."""
    records = load_package(package_dir)
    depiction = create_depiction(
        records.display,
        records.control,
        records.screenshots,
        constants=constants,
        tint_color=tint_color,
        header_image=header_image,
    )
    return depiction.to_dict()
