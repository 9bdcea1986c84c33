"""Read package records from a depiction data folder.

Expected layout::

    <package-dir>/
        display.json        required
        control             Debian control stanza (or control.json)
        screenshots.json    optional; missing → no screenshots

Control stanza format::

    Package: com.example.tweak
    Version: 1.2.0
    Name: Example Tweak
    Description: First line
     continuation line

Keys are matched case-insensitively.  ``Package`` and ``Version`` are
required; ``Name`` falls back to the package id.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

from sileo_depiction.model.package import Control, Display, RecordError, Screenshots

logger = logging.getLogger(__name__)

DISPLAY_FILE = "display.json"
CONTROL_FILE = "control"
CONTROL_JSON_FILE = "control.json"
SCREENSHOTS_FILE = "screenshots.json"

# ── regex for control stanza lines ──────────────────────────────────

_FIELD = re.compile(r"^(?P<key>[A-Za-z0-9][A-Za-z0-9-]*):\s?(?P<value>.*)$")
_CONTINUATION = re.compile(r"^[ \t]+(?P<value>.*)$")


@dataclass(frozen=True, slots=True)
class PackageRecords:
    """Everything the tab assembler needs for one package."""

    display: Display
    control: Control
    screenshots: Screenshots


def parse_control(source: str | Path) -> Control:
    """Parse a Debian control stanza into a :class:`Control`.

    Only the first stanza is read; a blank line ends it.
    """
    if isinstance(source, Path):
        where = source.as_posix()
        try:
            text = source.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise RecordError(f"{where}: not valid UTF-8: {e}") from e
    else:
        text = source
        where = "control"

    fields: dict[str, str] = {}
    last_key: str | None = None
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            if fields:
                break
            continue
        if line.startswith("#"):
            continue

        cont = _CONTINUATION.match(line)
        if cont and last_key is not None:
            value = cont.group("value")
            fields[last_key] += "\n" + ("" if value == "." else value)
            continue

        m = _FIELD.match(line)
        if not m:
            raise RecordError(f"{where}:{lineno}: not a control field: {line!r}")
        last_key = m.group("key").lower()
        fields[last_key] = m.group("value").strip()

    for required in ("package", "version"):
        if not fields.get(required):
            raise RecordError(
                f"{where}: missing required field {required.capitalize()!r}"
            )

    package_name = fields.pop("package")
    version = fields.pop("version")
    name = fields.pop("name", "") or package_name
    return Control(
        package_name=package_name,
        version=version,
        name=name,
        extra=MappingProxyType(fields),
    )


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise RecordError(f"{path.as_posix()}: not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise RecordError(f"{path.as_posix()}: invalid JSON: {e}") from e


def load_display(path: Path) -> Display:
    data = _read_json(path)
    try:
        return Display.from_dict(data)
    except RecordError as e:
        raise RecordError(f"{path.as_posix()}: {e}") from e


def load_control(package_dir: Path) -> Control:
    """Prefer the plain control stanza, fall back to ``control.json``."""
    stanza = package_dir / CONTROL_FILE
    if stanza.is_file():
        return parse_control(stanza)

    as_json = package_dir / CONTROL_JSON_FILE
    if as_json.is_file():
        data = _read_json(as_json)
        try:
            return Control.from_dict(data)
        except RecordError as e:
            raise RecordError(f"{as_json.as_posix()}: {e}") from e

    raise FileNotFoundError(
        f"no {CONTROL_FILE} or {CONTROL_JSON_FILE} in {package_dir.as_posix()}"
    )


def load_screenshots(path: Path) -> Screenshots:
    if not path.is_file():
        logger.debug(f"No {path.name} in {path.parent}, rendering without screenshots")
        return Screenshots()
    data = _read_json(path)
    try:
        return Screenshots.from_dict(data)
    except RecordError as e:
        raise RecordError(f"{path.as_posix()}: {e}") from e


def load_package(package_dir: str | Path) -> PackageRecords:
    """Load display, control and screenshots for one package folder.

    Raises
    ------
    FileNotFoundError
        If the folder, ``display.json`` or the control file is missing.
    RecordError
        If any record is malformed.
    """
    root = Path(package_dir)
    if not root.is_dir():
        raise FileNotFoundError(f"package folder does not exist: {root.as_posix()}")

    display_path = root / DISPLAY_FILE
    if not display_path.is_file():
        raise FileNotFoundError(f"missing {DISPLAY_FILE} in {root.as_posix()}")

    display = load_display(display_path)
    control = load_control(root)
    screenshots = load_screenshots(root / SCREENSHOTS_FILE)

    logger.debug(
        f"Loaded {control.package_name} {control.version}: "
        f"{len(display.changelog)} changelog entries, "
        f"{len(screenshots.screenshots)} screenshots"
    )
    return PackageRecords(display=display, control=control, screenshots=screenshots)
