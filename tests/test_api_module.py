"""Tests for sileo_depiction.api — programmatic entrypoints."""

from __future__ import annotations

from pathlib import Path

import pytest

from sileo_depiction.api import TAB_CHOICES, make_request, render_depiction, render_tab
from sileo_depiction.loaders import load_package
from sileo_depiction.model import TabName
from sileo_depiction.tabs import ChangesTab, ContactTab, DetailsTab

DEMO = Path(__file__).resolve().parent / "fixtures" / "packages" / "com.example.demo"


class TestMakeRequest:
    def test_choices(self) -> None:
        assert TAB_CHOICES == ("details", "changes", "contact")

    def test_variants(self) -> None:
        r = load_package(DEMO)
        assert make_request("details", r) == DetailsTab(r.display, r.control, r.screenshots)
        assert make_request("Changes", r) == ChangesTab(r.display)
        assert make_request(TabName.CONTACT, r) == ContactTab(r.display, r.control)

    def test_unknown(self) -> None:
        with pytest.raises(ValueError, match="unknown tab"):
            make_request("price", load_package(DEMO))


class TestRender:
    def test_render_tab(self) -> None:
        d = render_tab(DEMO, "contact")
        assert d["tabname"] == "Contact"
        assert d["views"][0]["action"] == "mailto:dev@example.com"

    def test_render_tab_deterministic(self) -> None:
        assert render_tab(DEMO, "details") == render_tab(DEMO, "details")

    def test_render_depiction(self) -> None:
        d = render_depiction(DEMO, header_image="https://img.example/h.png")
        assert d["headerImage"] == "https://img.example/h.png"
        assert len(d["tabs"]) == 3

    def test_nonexistent_package_raises(self) -> None:
        with pytest.raises(FileNotFoundError, match="does not exist"):
            render_tab("/nonexistent/path/xyz", "details")
