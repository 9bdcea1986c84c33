"""
Depiction Schemas
=================
Request bodies for depiction endpoints.  Keys are camelCase on the wire,
matching the files in a depiction data folder.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from sileo_depiction.model.package import (
    ChangelogEntry,
    Contact,
    Control,
    Display,
    Information,
    Screenshots,
)


class ChangelogEntryIn(BaseModel):
    """One changelog entry"""

    model_config = ConfigDict(populate_by_name=True)

    version_number: str = Field(..., alias="versionNumber")
    date: str
    changes: str = Field(default="", description="Markdown change notes")


class InformationIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    description: str = Field(..., description="Markdown package description")
    source_code_link: str = Field(default="", alias="sourceCodeLink")


class ContactIn(BaseModel):
    email: str
    twitter: str


class DisplayIn(BaseModel):
    """Contents of display.json"""

    information: InformationIn
    contact: ContactIn
    changelog: List[ChangelogEntryIn] = Field(
        default_factory=list, description="Oldest entry first"
    )

    def to_record(self) -> Display:
        return Display(
            information=Information(
                description=self.information.description,
                source_code_link=self.information.source_code_link,
            ),
            contact=Contact(email=self.contact.email, twitter=self.contact.twitter),
            changelog=tuple(
                ChangelogEntry(
                    version_number=e.version_number,
                    date=e.date,
                    changes=e.changes,
                )
                for e in self.changelog
            ),
        )


class ControlIn(BaseModel):
    """Package identity"""

    model_config = ConfigDict(populate_by_name=True)

    package_name: str = Field(..., alias="packageName")
    version: str
    name: Optional[str] = Field(default=None, description="Defaults to packageName")

    def to_record(self) -> Control:
        return Control(
            package_name=self.package_name,
            version=self.version,
            name=self.name or self.package_name,
        )


class TabRequestBody(BaseModel):
    """Records for a single tab.  ``control`` is needed by details and contact."""

    display: DisplayIn
    control: Optional[ControlIn] = None
    screenshots: List[str] = Field(default_factory=list)

    def screenshots_record(self) -> Screenshots:
        return Screenshots(screenshots=tuple(self.screenshots))

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "display": {
                    "information": {
                        "description": "A tweak.",
                        "sourceCodeLink": "https://github.com/example/tweak",
                    },
                    "contact": {"email": "dev@example.com", "twitter": "example"},
                    "changelog": [
                        {"versionNumber": "1.0", "date": "2023-05-09", "changes": "- Initial release"}
                    ],
                },
                "control": {"packageName": "com.example.tweak", "version": "1.0", "name": "Tweak"},
                "screenshots": ["1.png", "2.png"],
            }
        }
    )


class DepictionRequest(BaseModel):
    """Records for the full tabbed depiction"""

    model_config = ConfigDict(populate_by_name=True)

    display: DisplayIn
    control: ControlIn
    screenshots: List[str] = Field(default_factory=list)
    tint_color: Optional[str] = Field(default=None, alias="tintColor")
    header_image: Optional[str] = Field(default=None, alias="headerImage")

    def screenshots_record(self) -> Screenshots:
        return Screenshots(screenshots=tuple(self.screenshots))
