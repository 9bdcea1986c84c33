"""Tests for the sileo-depiction CLI (in-process via ``main``)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from sileo_depiction.__main__ import main
from sileo_depiction.constants import DEFAULT_CONSTANTS
from sileo_depiction.utils.exit_codes import ExitCode

PACKAGES = Path(__file__).resolve().parent / "fixtures" / "packages"
DEMO = PACKAGES / "com.example.demo"


# ── tab ─────────────────────────────────────────────────────────────


class TestTabCommand:
    def test_prints_tab_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        rc = main(["tab", str(DEMO), "--tab", "changes"])
        assert rc == ExitCode.SUCCESS
        obj = json.loads(capsys.readouterr().out)
        assert obj["tabname"] == "Changes"
        assert len(obj["views"]) == 6
        assert obj["views"][0]["views"][0]["title"] == "1.1"

    def test_defaults_to_details(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["tab", str(DEMO)]) == ExitCode.SUCCESS
        assert json.loads(capsys.readouterr().out)["tabname"] == "Details"

    def test_api_base_override(self, capsys: pytest.CaptureFixture[str]) -> None:
        rc = main(["--api-base", "https://cdn.example/", "tab", str(DEMO)])
        assert rc == ExitCode.SUCCESS
        obj = json.loads(capsys.readouterr().out)
        gallery = next(v for v in obj["views"] if v["class"] == "DepictionScreenshotsView")
        assert gallery["screenshots"][0]["url"] == "https://cdn.example/pkg.demo/screenshots/a.png"

    def test_writes_out_file(self, tmp_path: Path) -> None:
        out = tmp_path / "nested" / "contact.json"
        rc = main(["tab", str(DEMO), "--tab", "contact", "--out", str(out), "--check"])
        assert rc == ExitCode.SUCCESS
        obj = json.loads(out.read_text(encoding="utf-8"))
        assert [v["title"] for v in obj["views"]] == ["Email", "Twitter"]

    def test_out_file_matches_stdout(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        out = tmp_path / "details.json"
        assert main(["tab", str(DEMO), "--out", str(out)]) == ExitCode.SUCCESS
        assert main(["tab", str(DEMO)]) == ExitCode.SUCCESS
        printed = capsys.readouterr().out
        assert out.read_text(encoding="utf-8") == printed
        assert printed.endswith("}\n")

    def test_output_is_deterministic(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["tab", str(DEMO)])
        first = capsys.readouterr().out
        main(["tab", str(DEMO)])
        assert capsys.readouterr().out == first

    def test_missing_package_is_an_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        rc = main(["tab", str(tmp_path / "missing")])
        assert rc == ExitCode.ERROR
        assert "does not exist" in capsys.readouterr().err

    def test_malformed_record_is_an_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        rc = main(["tab", str(PACKAGES / "com.example.broken")])
        assert rc == ExitCode.ERROR
        assert "display.contact" in capsys.readouterr().err

    def test_non_utf8_control_is_an_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (tmp_path / "display.json").write_bytes(
            (DEMO / "display.json").read_bytes()
        )
        (tmp_path / "control").write_bytes(b"Package: pkg.demo\nVersion: 1.0\nName: Caf\xe9\n")
        rc = main(["tab", str(tmp_path)])
        assert rc == ExitCode.ERROR
        assert "not valid UTF-8" in capsys.readouterr().err

    def test_unknown_tab_is_a_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["tab", str(DEMO), "--tab", "price"])
        assert exc.value.code == 2


# ── depiction ───────────────────────────────────────────────────────


class TestDepictionCommand:
    def test_full_depiction(self, capsys: pytest.CaptureFixture[str]) -> None:
        rc = main(
            ["depiction", str(DEMO), "--tint-color", "#ff9500", "--check"]
        )
        assert rc == ExitCode.SUCCESS
        obj = json.loads(capsys.readouterr().out)
        assert obj["class"] == "DepictionTabView"
        assert obj["tintColor"] == "#ff9500"
        assert [t["tabname"] for t in obj["tabs"]] == ["Details", "Changes", "Contact"]

    def test_uses_default_constants(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["depiction", str(DEMO)])
        details = json.loads(capsys.readouterr().out)["tabs"][0]
        assert details["views"][1]["action"] == DEFAULT_CONSTANTS.donate_link


# ── validate ────────────────────────────────────────────────────────


class TestValidateCommand:
    def test_ok(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        out = tmp_path / "d.json"
        assert main(["depiction", str(DEMO), "--out", str(out)]) == ExitCode.SUCCESS
        assert main(["validate", str(out)]) == ExitCode.SUCCESS
        assert "OK" in capsys.readouterr().out

    def test_violation(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text('{"class": "DepictionStackView"}', encoding="utf-8")
        assert main(["validate", str(bad)]) == ExitCode.VIOLATION

    def test_unreadable_instance(self, tmp_path: Path) -> None:
        assert main(["validate", str(tmp_path / "missing.json")]) == ExitCode.ERROR

    def test_invalid_json(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text("{", encoding="utf-8")
        assert main(["validate", str(bad)]) == ExitCode.ERROR


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == ExitCode.ERROR
    assert "usage" in capsys.readouterr().out
