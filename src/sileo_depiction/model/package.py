"""Package records — the read-only input of the tab assembler.

These mirror the files found in a depiction data folder:

    display.json      → :class:`Display`
    control           → :class:`Control`
    screenshots.json  → :class:`Screenshots`

``from_dict`` constructors accept the camelCase keys used on disk and
raise :class:`RecordError` when a required field is missing or has the
wrong type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


class RecordError(ValueError):
    """A package record is missing a field or has the wrong shape."""


def _require_str(data: Mapping[str, Any], key: str, *, where: str) -> str:
    if key not in data:
        raise RecordError(f"{where}: missing required field {key!r}")
    value = data[key]
    if not isinstance(value, str):
        raise RecordError(
            f"{where}: field {key!r} must be a string, got {type(value).__name__}"
        )
    return value


def _optional_str(data: Mapping[str, Any], key: str, *, where: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise RecordError(
            f"{where}: field {key!r} must be a string, got {type(value).__name__}"
        )
    return value


def _require_mapping(data: Any, *, where: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise RecordError(f"{where}: expected an object, got {type(data).__name__}")
    return data


# ── display ─────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Information:
    description: str
    source_code_link: str = ""     # "" → no source-code row


@dataclass(frozen=True, slots=True)
class Contact:
    email: str
    twitter: str


@dataclass(frozen=True, slots=True)
class ChangelogEntry:
    """One released version and its markdown change notes."""

    version_number: str
    date: str
    changes: str

    @classmethod
    def from_dict(cls, data: Any, *, where: str = "changelog[]") -> ChangelogEntry:
        data = _require_mapping(data, where=where)
        return cls(
            version_number=_require_str(data, "versionNumber", where=where),
            date=_require_str(data, "date", where=where),
            changes=_optional_str(data, "changes", where=where),
        )


@dataclass(frozen=True, slots=True)
class Display:
    """Human-facing package text.

    ``changelog`` is stored oldest-first; the Changes tab reverses it.
    """

    information: Information
    contact: Contact
    changelog: tuple[ChangelogEntry, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Display:
        data = _require_mapping(data, where="display")
        info = _require_mapping(data.get("information"), where="display.information")
        contact = _require_mapping(data.get("contact"), where="display.contact")

        raw_changelog = data.get("changelog")
        if raw_changelog is None:
            raw_changelog = []
        if not isinstance(raw_changelog, list):
            raise RecordError("display.changelog: expected a list")

        return cls(
            information=Information(
                description=_require_str(
                    info, "description", where="display.information"
                ),
                source_code_link=_optional_str(
                    info, "sourceCodeLink", where="display.information"
                ),
            ),
            contact=Contact(
                email=_require_str(contact, "email", where="display.contact"),
                twitter=_require_str(contact, "twitter", where="display.contact"),
            ),
            changelog=tuple(
                ChangelogEntry.from_dict(entry, where=f"display.changelog[{i}]")
                for i, entry in enumerate(raw_changelog)
            ),
        )


# ── control ─────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Control:
    """Package identity, as found in the Debian control stanza."""

    package_name: str
    version: str
    name: str
    extra: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), compare=False
    )

    @classmethod
    def from_dict(cls, data: Any) -> Control:
        data = _require_mapping(data, where="control")
        package_name = _require_str(data, "packageName", where="control")
        return cls(
            package_name=package_name,
            version=_require_str(data, "version", where="control"),
            name=_optional_str(data, "name", where="control") or package_name,
        )


# ── screenshots ─────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Screenshots:
    """Screenshot filenames relative to the package's screenshot folder.

    A first entry whose last path segment is ``*`` means "none available".
    """

    screenshots: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Screenshots:
        data = _require_mapping(data, where="screenshots")
        raw = data.get("screenshots")
        if raw is None:
            raw = []
        if not isinstance(raw, list) or not all(isinstance(s, str) for s in raw):
            raise RecordError("screenshots.screenshots: expected a list of strings")
        return cls(screenshots=tuple(raw))
