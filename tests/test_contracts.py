"""Rendered tabs and depictions must satisfy depiction.schema.json."""

from __future__ import annotations

from pathlib import Path

import jsonschema
import pytest

from sileo_depiction.api import TAB_CHOICES, render_depiction, render_tab
from sileo_depiction.contracts.load import load_schema, validate_file, validate_instance

PACKAGES = Path(__file__).resolve().parent / "fixtures" / "packages"


def test_schema_is_a_valid_draft_2020_12_schema() -> None:
    schema = load_schema("depiction.schema.json")
    jsonschema.Draft202012Validator.check_schema(schema)


@pytest.mark.parametrize("package", ["com.example.demo", "com.example.bare"])
@pytest.mark.parametrize("tab", TAB_CHOICES)
def test_tabs_validate(package: str, tab: str) -> None:
    validate_instance(render_tab(PACKAGES / package, tab))


@pytest.mark.parametrize("package", ["com.example.demo", "com.example.bare"])
def test_depiction_validates(package: str) -> None:
    validate_instance(render_depiction(PACKAGES / package, tint_color="#000000"))


def test_unknown_view_class_is_rejected() -> None:
    bad = {"class": "DepictionStackView", "tabname": "Details", "views": [{"class": "Nope"}]}
    with pytest.raises(jsonschema.ValidationError):
        validate_instance(bad)


def test_misspelled_field_is_rejected() -> None:
    bad = {
        "class": "DepictionStackView",
        "tabname": "Details",
        "views": [{"class": "DepictionSpacerView", "space": 12}],
    }
    with pytest.raises(jsonschema.ValidationError):
        validate_instance(bad)


def test_validate_file(tmp_path: Path) -> None:
    out = tmp_path / "tab.json"
    out.write_text('{"class": "DepictionStackView", "tabname": "Contact", "views": []}')
    validate_file(out)


def test_unknown_schema_name() -> None:
    with pytest.raises(FileNotFoundError):
        load_schema("nope.schema.json")
