"""Fixed values baked into every depiction.

The tab assembler never reads the environment; callers that want
different endpoints (see ``config.Settings.constants``) pass their own
:class:`DepictionConstants`.
"""

from __future__ import annotations

from dataclasses import dataclass

REPO_BASE = "https://p2kdev.github.io/repo"

ITEM_CORNER_RADIUS = 6
ITEM_SIZE = "{160, 346}"
SPACER_HEIGHT = 12
DONATE_Y_PADDING = 10
SCREENSHOT_ACCESSIBILITY_TEXT = "Screenshot"


@dataclass(frozen=True, slots=True)
class DepictionConstants:
    api: str = f"{REPO_BASE}/depictions/api"
    donate_text: str = "Support the developer"
    donate_link: str = f"{REPO_BASE}/donate"
    web_depiction_url: str = f"{REPO_BASE}/depictions/index.html"


DEFAULT_CONSTANTS = DepictionConstants()
