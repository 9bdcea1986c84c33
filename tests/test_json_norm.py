"""Tests for the canonical JSON normalization layer."""

import json
from pathlib import Path

from sileo_depiction.model import Alignment
from sileo_depiction.model.views import SeparatorView, StackView
from sileo_depiction.utils.json_norm import stable_json_dump, stable_json_dumps


def test_stable_json_dumps_sorts_keys_and_adds_newline():
    s = stable_json_dumps({"b": 1, "a": 2})
    assert s.endswith("\n")
    # Keys should be sorted in the serialized output
    assert s.index('"a"') < s.index('"b"')


def test_stable_json_dumps_uses_view_to_dict():
    s = stable_json_dumps(StackView(tab_name="Details", views=(SeparatorView(),)))
    obj = json.loads(s)
    assert obj == {
        "class": "DepictionStackView",
        "tabname": "Details",
        "views": [{"class": "DepictionSeparatorView"}],
    }


def test_stable_json_dumps_normalizes_paths_and_enums():
    obj = json.loads(stable_json_dumps({"p": Path("a") / "b", "align": Alignment.RIGHT}))
    assert obj == {"p": "a/b", "align": 2}


def test_stable_json_dumps_keeps_non_ascii():
    assert "é" in stable_json_dumps({"t": "Développeur"})


def test_stable_json_dump_writes_to_file_like(tmp_path):
    out = tmp_path / "x.json"
    with out.open("w", encoding="utf-8") as f:
        stable_json_dump({"b": 1, "a": 2}, f)
    txt = out.read_text(encoding="utf-8")
    assert txt.endswith("\n")
    assert '"a"' in txt and '"b"' in txt
